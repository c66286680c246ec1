"""
RSVP model for event attendance
"""

from datetime import datetime
from peewee import TextField, DateTimeField, ForeignKeyField, SQL
from eventplanner.models import BaseModel
from eventplanner.models.event import Event

class RSVP(BaseModel):
    """A named response from one browser session"""
    event = ForeignKeyField(Event, backref='rsvps', on_delete='CASCADE')
    name = TextField()
    session_id = TextField(null=True)  # NULL for rows added by hand
    created_at = DateTimeField(default=datetime.now, constraints=[SQL('DEFAULT CURRENT_TIMESTAMP')])
    
    class Meta:
        table_name = 'rsvps'
        indexes = (
            # One RSVP per session per event; NULL session ids are not constrained
            (('event', 'session_id'), True),
        )
    
    def __str__(self):
        return f"{self.name} - event {self.event_id}"
