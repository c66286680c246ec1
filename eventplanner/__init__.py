"""
Event planner: events, calendar and session-scoped RSVPs
"""

__version__ = '1.0.0'
