"""
Admin capability checks

Admin actions are gated by a single shared token (ADMIN_TOKEN). It is a
capability, not a login: whoever submits the token may delete events and
RSVPs. An unset token disables admin actions entirely.
"""

import hmac
from functools import wraps

from flask import current_app, redirect, request, url_for

ADMIN_ERROR = 'Wrong credential. Are you sure you are authorized to do this?'


def check_admin_token(candidate, secret):
    """True iff candidate matches the configured secret; fails closed without one"""
    if not secret:
        return False
    candidate = (candidate or '').strip()
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode('utf-8'), secret.encode('utf-8'))


def admin_token_from_request():
    """Token submitted as ?admin=... or as the admin form field, trimmed"""
    token = request.args.get('admin') or request.form.get('admin') or ''
    return token.strip()


def is_admin():
    """Check the current request's admin token against the app configuration"""
    config = current_app.config['EVENTPLANNER']
    return check_admin_token(admin_token_from_request(), config.admin_token)


def admin_required(f):
    """Decorator for event-scoped admin actions.

    Failed checks redirect to the event page with an inline admin_error
    instead of answering 403.
    """
    @wraps(f)
    def decorated_function(event_id, *args, **kwargs):
        if not is_admin():
            current_app.logger.warning(f"Rejected admin action on event {event_id}")
            return redirect(url_for('events.event_detail', event_id=event_id, admin_error=ADMIN_ERROR))
        return f(event_id, *args, **kwargs)
    return decorated_function
