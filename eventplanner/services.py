"""
Event and RSVP operations

Query helpers shared by the route blueprints and manage_db.py. Store errors
(peewee exceptions) propagate to the caller.
"""

from datetime import date, datetime, time

from peewee import IntegrityError, fn

from eventplanner.database import database
from eventplanner.models.event import Event
from eventplanner.models.rsvp import RSVP

UPCOMING_LIMIT = 6


class ValidationError(ValueError):
    """Submitted form data cannot be stored"""


class DuplicateRSVP(Exception):
    """The session already has an RSVP for this event"""


def normalize_date_value(value):
    """Reduce a date, datetime or ISO timestamp string to YYYY-MM-DD"""
    if not value:
        return value
    if isinstance(value, (date, datetime)):
        return value.isoformat()[:10]
    if isinstance(value, str) and 'T' in value:
        return value[:10]
    return value


def normalize_time_value(value):
    if not value:
        return None
    if isinstance(value, time):
        return value.strftime('%H:%M')
    return str(value)[:5]


def normalize_event(event):
    """Plain dict for templates and the calendar JSON"""
    return {
        'id': event.id,
        'title': event.title,
        'description': event.description,
        'event_date': normalize_date_value(event.event_date),
        'event_time': normalize_time_value(event.event_time),
        'location': event.location,
    }


def _ordered(query):
    return query.order_by(Event.event_date.asc(), Event.event_time.asc(nulls='LAST'), Event.id)


def list_events():
    return [normalize_event(e) for e in _ordered(Event.select())]


def list_upcoming(today=None, limit=UPCOMING_LIMIT):
    today = today or date.today()
    query = _ordered(Event.select().where(Event.event_date >= today)).limit(limit)
    return [normalize_event(e) for e in query]


def rsvp_counts():
    """Map event id -> number of RSVPs; events without RSVPs are absent"""
    query = (RSVP
             .select(RSVP.event, fn.COUNT(RSVP.id))
             .group_by(RSVP.event)
             .tuples())
    return {event_id: count for event_id, count in query}


def _parse_date(value):
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError('Invalid date') from None


def _parse_time(value):
    for fmt in ('%H:%M', '%H:%M:%S'):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValidationError('Invalid time')


def create_event(title, description, event_date, event_time=None, location=None):
    """Validate and insert an event; returns the new Event.

    Text inputs are trimmed; empty optional fields are stored as NULL.
    """
    title = (title or '').strip()
    description = (description or '').strip()
    event_date = (event_date or '').strip()
    event_time = (event_time or '').strip()
    location = (location or '').strip()

    if not title or not description or not event_date:
        raise ValidationError('Title, description, and date required')

    return Event.create(
        title=title,
        description=description,
        event_date=_parse_date(event_date),
        event_time=_parse_time(event_time) if event_time else None,
        location=location or None,
    )


def get_event(event_id):
    """Event by id, or None"""
    return Event.get_or_none(Event.id == event_id)


def list_rsvps(event_id):
    return list(RSVP
                .select(RSVP.id, RSVP.name, RSVP.created_at)
                .where(RSVP.event == event_id)
                .order_by(RSVP.created_at.asc(), RSVP.id.asc()))


def has_rsvped(event_id, session_id):
    if not session_id:
        return False
    return (RSVP
            .select()
            .where((RSVP.event == event_id) & (RSVP.session_id == session_id))
            .exists())


def create_rsvp(event_id, name, session_id):
    """Insert an RSVP, allowing one per (event, session).

    The existence check gives the common case a clean error; the unique
    index on (event_id, session_id) catches concurrent duplicates.
    """
    name = (name or '').strip()
    if not name:
        raise ValidationError('Name required')
    if has_rsvped(event_id, session_id):
        raise DuplicateRSVP('Only one RSVP per event')
    try:
        with database.atomic():
            return RSVP.create(event=event_id, name=name, session_id=session_id)
    except IntegrityError:
        raise DuplicateRSVP('Only one RSVP per event') from None


def delete_event(event_id):
    """Delete an event with all its RSVPs in one transaction.

    Returns False when the event does not exist.
    """
    with database.atomic():
        if not Event.select().where(Event.id == event_id).exists():
            return False
        RSVP.delete().where(RSVP.event == event_id).execute()
        Event.delete().where(Event.id == event_id).execute()
    return True


def get_rsvp(rsvp_id):
    """RSVP by id, or None"""
    return RSVP.get_or_none(RSVP.id == rsvp_id)


def delete_rsvp(rsvp_id):
    return RSVP.delete().where(RSVP.id == rsvp_id).execute() > 0


def clear_rsvps(event_id):
    """Remove every RSVP of an event; returns how many rows went"""
    return RSVP.delete().where(RSVP.event == event_id).execute()
