"""
auth/session.py -- Session token carried in a browser cookie.

The relay keeps no server-side session store. The opaque token issued by the
upstream /auth endpoint lives only in the client's cookie and is read back on
every request, so the browser is the sole holder of session state.

Policy: first session wins. issue_token() never overwrites a cookie the client
already sent, even if the upstream hands out a different token on a repeat
login. The cookie stays until log-out clears it.

Cookie attributes:
  httponly=True: JS cannot read the token.
  samesite="lax": not sent on cross-site POST.
  secure: only over HTTPS when SECURE_COOKIES=true.
  no max_age: a browser-session cookie. Token validity is the upstream's call.

Layer rule: no imports from api/ or web/.
"""

from __future__ import annotations

import logging
from typing import Optional

from starlette.requests import Request
from starlette.responses import Response

from core.config import get_settings

logger = logging.getLogger("todorelay.session")


def read_token(request: Request) -> Optional[str]:
    """Return the session token from the request cookie, or None if absent.

    The value is not validated or interpreted.
    """
    return request.cookies.get(get_settings().session_cookie_name)


def has_token(request: Request) -> bool:
    return get_settings().session_cookie_name in request.cookies


def issue_token(request: Request, response: Response, token: str) -> bool:
    """Set the session cookie on response unless the request already carried one.

    Returns True when a Set-Cookie header was added, False when an existing
    session cookie was left untouched.
    """
    if has_token(request):
        logger.info("Session cookie already exists; keeping the existing session")
        return False

    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        path="/",
    )
    return True


def clear_token(response: Response) -> None:
    """Expire the session cookie, ending the session."""
    settings = get_settings()
    response.delete_cookie(
        settings.session_cookie_name,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )
