#!/usr/bin/env python3
"""
Database management script for the event planner
"""

import sys
import argparse
import logging

from eventplanner.config import Config
from eventplanner.database import connect_database, init_database, bind_database, close_database
from eventplanner import services

def init_database_cmd(db, config):
    """Create tables, apply policies and seed example events"""
    init_database(db, seed=config.seed_data)
    print("✅ Database initialized")

def list_events(db):
    """List all events with their RSVP counts"""
    db.connect(reuse_if_open=True)
    events = services.list_events()
    counts = services.rsvp_counts()
    if events:
        print("\n📋 Current Events:")
        print("-" * 80)
        print(f"{'ID':<6} {'Date':<12} {'Time':<7} {'Title':<40} {'RSVPs'}")
        print("-" * 80)
        for event in events:
            print(f"{event['id']:<6} {event['event_date']:<12} {event['event_time'] or '':<7} "
                  f"{event['title'][:40]:<40} {counts.get(event['id'], 0)}")
    else:
        print("No events found in database")
    db.close()

def clear_rsvps(db, event_id):
    """Remove every RSVP from one event"""
    db.connect(reuse_if_open=True)
    if services.get_event(event_id) is None:
        print(f"❌ Event {event_id} not found")
    else:
        removed = services.clear_rsvps(event_id)
        print(f"✅ Removed {removed} RSVPs from event {event_id}")
    db.close()

def main():
    parser = argparse.ArgumentParser(description='Manage the event planner database')
    parser.add_argument('command', choices=['init', 'list', 'clear-rsvps'],
                       help='Command to execute')
    parser.add_argument('event_id', nargs='?', type=int, help='Event id for clear-rsvps')
    
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    config = Config.from_env()
    db = bind_database(connect_database(config))
    try:
        if args.command == 'init':
            init_database_cmd(db, config)
        elif args.command == 'list':
            list_events(db)
        elif args.command == 'clear-rsvps':
            if args.event_id is None:
                print("❌ Event id required for clear-rsvps command")
                print("Usage: python manage_db.py clear-rsvps <event_id>")
                sys.exit(1)
            clear_rsvps(db, args.event_id)
    finally:
        close_database(db)

if __name__ == '__main__':
    main()
