"""
Database configuration and initialization
"""

import logging
from datetime import date, time, timedelta

from peewee import DatabaseProxy, PeeweeException, PostgresqlDatabase
from playhouse.db_url import connect
from playhouse.pool import PooledPostgresqlDatabase

logger = logging.getLogger(__name__)

# Bound to a concrete database by the application factory
database = DatabaseProxy()

ROW_LEVEL_SECURITY_SQL = """
    ALTER TABLE events ENABLE ROW LEVEL SECURITY;
    ALTER TABLE rsvps ENABLE ROW LEVEL SECURITY;

    DROP POLICY IF EXISTS "Allow all operations for service role on events" ON events;
    DROP POLICY IF EXISTS "Allow all operations for service role on rsvps" ON rsvps;

    CREATE POLICY "Allow all operations for service role on events"
        ON events FOR ALL
        USING (true)
        WITH CHECK (true);

    CREATE POLICY "Allow all operations for service role on rsvps"
        ON rsvps FOR ALL
        USING (true)
        WITH CHECK (true);
"""

SEED_EVENTS = [
    {
        'title': 'Friday Game Night',
        'description': "Bring your co-op pick. We'll rotate between party games and a co-op run.",
        'days_ahead': 2,
        'event_time': time(20, 0),
        'location': 'Discord: #hangout',
    },
    {
        'title': 'Movie Club: Sci-Fi Night',
        'description': 'Voting opens at 7pm. We start the stream at 8pm sharp. Popcorn required.',
        'days_ahead': 6,
        'event_time': time(20, 0),
        'location': 'Discord: #screening-room',
    },
    {
        'title': 'Sunday Chill & Catch-up',
        'description': 'Low-key voice chat to talk about the week and plan upcoming stuff.',
        'days_ahead': 10,
        'event_time': time(18, 30),
        'location': 'Discord: #lounge',
    },
]


def _pooled_url(url):
    scheme, sep, rest = url.partition('://')
    if sep and scheme in ('postgres', 'postgresql'):
        return f"postgresql+pool://{rest}"
    return url


def connect_database(config):
    """Create the database described by config.database_url (not yet connected)"""
    url = config.database_url
    if not url:
        logger.warning("DATABASE_URL is not set. Set it to your PostgreSQL connection string.")
        # Deferred database: every connection attempt fails until configured
        return PooledPostgresqlDatabase(None)

    url = _pooled_url(url)
    if url.startswith('sqlite'):
        return connect(url, pragmas={'foreign_keys': 1})

    params = {}
    if config.database_ssl and 'sslmode=' not in url:
        params['sslmode'] = 'require'
    elif not config.database_ssl:
        params['sslmode'] = 'disable'
    return connect(url, **params)


def bind_database(db):
    """Point the shared model proxy at db"""
    database.initialize(db)
    return db


def close_database(db):
    """Release every pooled connection held by db"""
    if hasattr(db, 'close_all'):
        db.close_all()
    elif not db.is_closed():
        db.close()


def apply_row_level_security(db):
    """Enable RLS with allow-all policies on PostgreSQL; never fatal"""
    if not isinstance(db, PostgresqlDatabase):
        return False
    try:
        with db.atomic():
            db.execute_sql(ROW_LEVEL_SECURITY_SQL)
    except PeeweeException as e:
        logger.warning("RLS policy setup warning (this is usually safe to ignore): %s", e)
        return False
    return True


def seed_events(today=None):
    """Insert the example events when the events table is empty"""
    from eventplanner.models.event import Event

    if Event.select().exists():
        return 0

    today = today or date.today()
    with database.atomic():
        for seed in SEED_EVENTS:
            Event.create(
                title=seed['title'],
                description=seed['description'],
                event_date=today + timedelta(days=seed['days_ahead']),
                event_time=seed['event_time'],
                location=seed['location'],
            )
    logger.info("Seeded %d example events", len(SEED_EVENTS))
    return len(SEED_EVENTS)


def init_database(db, seed=True, today=None):
    """Create tables, apply access policies and seed example data.

    Errors from table creation or seeding propagate: the caller treats them
    as fatal. Policy setup failures are only logged.
    """
    from eventplanner.models.event import Event
    from eventplanner.models.rsvp import RSVP

    bind_database(db)
    db.connect(reuse_if_open=True)
    try:
        db.create_tables([Event, RSVP], safe=True)
        apply_row_level_security(db)
        if seed:
            seed_events(today)
    finally:
        db.close()
    logger.info("Database initialized")
