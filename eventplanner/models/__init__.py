"""
Base model for all database models
"""

from peewee import Model
from eventplanner.database import database

class BaseModel(Model):
    """Base model class that all models should inherit from"""
    
    class Meta:
        database = database
