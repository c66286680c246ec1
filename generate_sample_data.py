#!/usr/bin/env python3
"""
Sample Data Generator for the event planner
===========================================

Fills a development database with events and RSVPs made up by Faker.

⚠️  WARNING: This will modify your database! ⚠️
"""

import sys
import random
from datetime import datetime, timedelta

from faker import Faker

from eventplanner.config import Config
from eventplanner.database import connect_database, init_database, close_database, database
from eventplanner.models.event import Event
from eventplanner.models.rsvp import RSVP
from eventplanner.session import new_session_id

EVENT_KINDS = [
    "Game Night", "Movie Club", "Book Club", "Picnic", "Karaoke",
    "Board Game Brunch", "Hike", "Pub Quiz", "Cook-along", "Watch Party",
]

LOCATIONS = [
    "Discord: #hangout", "Discord: #screening-room", "Discord: #lounge",
    "Central Park", "The Corner Pub", None,
]

def get_user_confirmation(config):
    """Require explicit YES confirmation before proceeding"""
    print("🔥 DATABASE WARNING 🔥")
    print("=" * 60)
    print("This script will generate sample data in your database.")
    print("Current database:", config.database_url or "(DATABASE_URL not set)")
    try:
        print(f"Current contents: {Event.select().count()} events, {RSVP.select().count()} RSVPs")
    except Exception as e:
        print(f"Could not check current database: {e}")
    print()
    print("⚠️  To proceed, you must type 'YES' exactly (case sensitive)")
    
    user_input = input("Type 'YES' to continue: ").strip()
    if user_input != "YES":
        print("❌ Operation cancelled. Database unchanged.")
        sys.exit(0)
    print("✅ Confirmation received. Proceeding with data generation...")
    print()

def create_sample_events(fake, count=15):
    """Create a mix of past and upcoming events"""
    print("📅 Creating sample events...")
    created_events = []
    for i in range(count):
        # Roughly half in the past
        if i < count // 2:
            event_date = fake.date_between(start_date='-3M', end_date='-1d')
        else:
            event_date = fake.date_between(start_date='+1d', end_date='+3M')
        event_time = fake.time_object() if random.random() > 0.2 else None

        event = Event.create(
            title=f"{random.choice(EVENT_KINDS)}: {fake.catch_phrase()}",
            description=fake.paragraph(nb_sentences=4),
            event_date=event_date,
            event_time=event_time.replace(second=0, microsecond=0) if event_time else None,
            location=random.choice(LOCATIONS),
        )
        created_events.append(event)
    print(f"   ✅ Created {len(created_events)} events")
    return created_events

def create_sample_rsvps(fake, events):
    """Give each event a handful of RSVPs from distinct fake sessions"""
    print("🎟️  Creating sample RSVPs...")
    total_rsvps = 0
    for event in events:
        for _ in range(random.randint(0, 8)):
            RSVP.create(
                event=event,
                name=fake.first_name(),
                session_id=new_session_id(),
                created_at=datetime.now() - timedelta(days=random.randint(1, 30)),
            )
            total_rsvps += 1
    print(f"   ✅ Created {total_rsvps} RSVPs")

def main():
    """Main execution function"""
    print("🌟 EVENT PLANNER SAMPLE DATA GENERATOR")
    print("=" * 50)
    print()

    config = Config.from_env()
    db = connect_database(config)
    try:
        print("🗄️  Initializing database...")
        init_database(db, seed=False)
        print("   ✅ Database ready")
        print()

        db.connect(reuse_if_open=True)
        get_user_confirmation(config)

        fake = Faker()
        with database.atomic():
            events = create_sample_events(fake)
            create_sample_rsvps(fake, events)

        print("\n🎉 SAMPLE DATA GENERATION COMPLETE!")
    except Exception as e:
        print(f"\n❌ Error during data generation: {e}")
        sys.exit(1)
    finally:
        close_database(db)

if __name__ == "__main__":
    main()
