"""
Event routes

Handles event creation, the detail page, RSVPs and admin deletion.
"""

from flask import Blueprint, render_template, request, redirect, url_for, current_app
from peewee import PeeweeException

from eventplanner import services
from eventplanner.decorators import admin_required, admin_token_from_request
from eventplanner.services import ValidationError, DuplicateRSVP
from eventplanner.session import get_session_id

bp = Blueprint('events', __name__, url_prefix='/events')


@bp.route('/new')
def new_event():
    """New event form"""
    return render_template('events/new_event.html', error=request.args.get('error'))


@bp.route('', methods=['POST'])
def create_event():
    """Create a new event from the submitted form"""
    try:
        event = services.create_event(
            title=request.form.get('title'),
            description=request.form.get('description'),
            event_date=request.form.get('event_date'),
            event_time=request.form.get('event_time'),
            location=request.form.get('location'),
        )
    except ValidationError as e:
        return redirect(url_for('events.new_event', error=str(e)))
    except PeeweeException:
        current_app.logger.error("Failed to create event", exc_info=True)
        return "Failed to create event.", 500

    current_app.logger.info(f"Created event {event.id}: {event.title}")
    return redirect(url_for('events.event_detail', event_id=event.id))


@bp.route('/<int:event_id>')
def event_detail(event_id):
    """Show an event with its RSVPs"""
    session_id = get_session_id()
    try:
        event = services.get_event(event_id)
        if event is None:
            return "Event not found.", 404
        rsvps = services.list_rsvps(event_id)
        already_rsvped = services.has_rsvped(event_id, session_id)
    except PeeweeException:
        current_app.logger.error(f"Failed to load event {event_id}", exc_info=True)
        return "Failed to load event.", 500

    return render_template('events/event.html',
                           event=services.normalize_event(event),
                           rsvps=rsvps,
                           error=request.args.get('error'),
                           already_rsvped=already_rsvped,
                           admin_error=request.args.get('admin_error'),
                           admin_token=admin_token_from_request())


@bp.route('/<int:event_id>/rsvp', methods=['POST'])
def rsvp(event_id):
    """Record an RSVP for the current browser session"""
    session_id = get_session_id()
    try:
        if services.get_event(event_id) is None:
            return "Event not found.", 404
        services.create_rsvp(event_id, request.form.get('name'), session_id)
    except (ValidationError, DuplicateRSVP) as e:
        return redirect(url_for('events.event_detail', event_id=event_id, error=str(e)))
    except PeeweeException:
        current_app.logger.error(f"Failed to RSVP to event {event_id}", exc_info=True)
        return "Failed to RSVP.", 500

    return redirect(url_for('events.event_detail', event_id=event_id))


@bp.route('/<int:event_id>/delete', methods=['POST'])
@admin_required
def delete_event(event_id):
    """Delete an event and all of its RSVPs"""
    try:
        deleted = services.delete_event(event_id)
    except PeeweeException:
        current_app.logger.error(f"Failed to delete event {event_id}", exc_info=True)
        return "Failed to delete event.", 500

    if not deleted:
        return "Event not found.", 404
    current_app.logger.info(f"Deleted event {event_id}")
    return redirect(url_for('pages.index'))
