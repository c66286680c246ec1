"""
Event model for planned gatherings
"""

from peewee import TextField, DateField, TimeField
from eventplanner.models import BaseModel

class Event(BaseModel):
    """A planned event; time and location are optional"""
    title = TextField()
    description = TextField()
    event_date = DateField()
    event_time = TimeField(null=True)  # Events without a time sort last within a day
    location = TextField(null=True)
    
    class Meta:
        table_name = 'events'
    
    def __str__(self):
        return f"{self.title} - {self.event_date}"
    
    def __repr__(self):
        return f"<Event: {self.id}>"
