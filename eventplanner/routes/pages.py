"""
Home page routes

Shows upcoming events, the full list with RSVP counts, and the month
calendar.
"""

from datetime import date

from flask import Blueprint, render_template, request, current_app, jsonify
from peewee import PeeweeException

from eventplanner import services
from eventplanner.month_grid import parse_month, render_month

bp = Blueprint('pages', __name__)


@bp.route('/')
def index():
    today = date.today()
    try:
        events = services.list_events()
        upcoming = services.list_upcoming(today)
        counts = services.rsvp_counts()
    except PeeweeException:
        current_app.logger.error("Failed to load events", exc_info=True)
        return "Failed to load events.", 500

    month = render_month(events, parse_month(request.args.get('month'), today), today)
    return render_template("index.html",
                           events=events,
                           upcoming=upcoming,
                           counts=counts,
                           month=month)


@bp.route('/health')
def health():
    """Simple liveness check"""
    return jsonify({'status': 'ok'})
