"""
Browser session identity

Each browser gets an opaque random id in the rsvp_session cookie. There is no
server-side session store: the id only correlates RSVP rows with the browser
that created them.
"""

import secrets
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
from urllib.parse import unquote

from flask import after_this_request, g, request

SESSION_COOKIE = 'rsvp_session'
SESSION_ID_BYTES = 16


@dataclass(frozen=True)
class SessionCookie:
    """Set-Cookie directive for a freshly issued session id"""
    value: str
    name: str = SESSION_COOKIE
    path: str = '/'
    httponly: bool = True
    samesite: str = 'Lax'

    def apply(self, response):
        # No max_age/expires: a browser-session cookie
        response.set_cookie(self.name, self.value, path=self.path,
                            httponly=self.httponly, samesite=self.samesite)
        return response


def new_session_id():
    return secrets.token_hex(SESSION_ID_BYTES)


def resolve_session_id(cookies: Mapping[str, str]) -> Tuple[str, Optional[SessionCookie]]:
    """Return the session id carried by cookies, or a new one plus the cookie to set"""
    session_id = unquote(cookies.get(SESSION_COOKIE) or '')
    if session_id:
        return session_id, None
    session_id = new_session_id()
    return session_id, SessionCookie(session_id)


def get_session_id():
    """Session id for the current request, issuing the cookie when missing"""
    if 'session_id' in g:
        return g.session_id

    session_id, cookie = resolve_session_id(request.cookies)
    if cookie is not None:
        after_this_request(cookie.apply)
    g.session_id = session_id
    return session_id
