"""
RSVP management routes
"""

from flask import Blueprint, redirect, url_for, current_app
from peewee import PeeweeException

from eventplanner import services
from eventplanner.decorators import ADMIN_ERROR, is_admin, admin_token_from_request

bp = Blueprint('rsvps', __name__, url_prefix='/rsvps')


@bp.route('/<int:rsvp_id>/delete', methods=['POST'])
def delete_rsvp(rsvp_id):
    """Remove an RSVP (admin only) and return to its event"""
    try:
        rsvp = services.get_rsvp(rsvp_id)
        if rsvp is None:
            return "RSVP not found.", 404
        event_id = rsvp.event_id

        if not is_admin():
            current_app.logger.warning(f"Rejected admin removal of RSVP {rsvp_id}")
            return redirect(url_for('events.event_detail', event_id=event_id, admin_error=ADMIN_ERROR))

        services.delete_rsvp(rsvp_id)
    except PeeweeException:
        current_app.logger.error(f"Failed to remove RSVP {rsvp_id}", exc_info=True)
        return "Failed to remove RSVP.", 500

    current_app.logger.info(f"Removed RSVP {rsvp_id} from event {event_id}")
    # Keep the token on the page so further removals need no prompt
    return redirect(url_for('events.event_detail', event_id=event_id, admin=admin_token_from_request()))
