"""
Route registration for the event planner

This module registers all blueprint routes with the Flask application.
"""

def register_routes(app):
    """Register all application blueprints"""
    
    # Import blueprints
    from . import pages, events, rsvps
    
    app.register_blueprint(pages.bp)
    app.register_blueprint(events.bp)
    app.register_blueprint(rsvps.bp)
