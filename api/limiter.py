"""
api/limiter.py -- Shared slowapi rate limiter for the login and register forms.

api/main.py mounts SlowAPIMiddleware and the 429 handler. web/routes.py
applies the per-route limit to POST /auth and POST /register:

    @router.post("/auth")
    @limiter.limit(_auth_rate_limit)
    def authenticate(request: Request, ...): ...

@limiter.limit must sit directly above the def, below @router.post, so the
rate-limited wrapper is the function FastAPI registers. The limit is a
callable reading Settings.auth_rate_limit (AUTH_RATE_LIMIT) on every check,
and the middleware alone does not evaluate such per-route limits.

Clients are keyed by remote address. Behind a reverse proxy that address is
only the real client when uvicorn trusts the proxy's X-Forwarded-For header
(Settings.forwarded_allow_ips, passed through by main.py).

One shared instance keeps one in-memory counter store for all routes.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address, storage_uri="memory://")
