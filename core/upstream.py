"""
core/upstream.py -- HTTP client for the upstream to-do API.

One UpstreamClient is created per process (in the API lifespan) and shared by
every request handler. It holds a requests.Session for connection pooling and
nothing else: the caller's token is passed explicitly on each call and never
stored on the client or the session.

Upstream contract:
  GET    /user                 -> [UserRecord]
  POST   /user      {username} -> UserRecord
  POST   /auth      {username} -> {"token": str}
  GET    /todo-item            -> [TodoItem]              (Authorization)
  POST   /todo-item {content}  -> TodoItem                (Authorization)
  PUT    /todo-item/{id} {completed: true}                (Authorization)
  DELETE /todo-item/{id} {deleted: true}                  (Authorization)

The Authorization header carries the raw token value -- no "Bearer " prefix.
That is what the upstream expects.

Each call is attempted exactly once. Failures raise a subclass of
core.errors.UpstreamError; retrying or degrading is the caller's decision.
"""

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Optional
from urllib.parse import quote

import requests

from core.errors import MalformedUpstreamPayload, UpstreamRejected, UpstreamUnavailable
from core.models import TodoItem, UserRecord

logger = logging.getLogger("todorelay.upstream")

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


def _new_session() -> requests.Session:
    session = requests.Session()
    # Known API, 3 hops is generous. Protects against redirect loops.
    session.max_redirects = 3
    # The session is shared across all browser clients. A cookie set by the
    # upstream must never ride along on another client's request.
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    return session


def _item_path(item_id: Any) -> str:
    return "/todo-item/" + quote(str(item_id), safe="")


class UpstreamClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or _new_session()

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Generic call
    # ------------------------------------------------------------------

    def call(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        """Issue one request to base_url + path and return the decoded JSON body.

        Returns None when the upstream answers 2xx with an empty body.

        Raises:
            ValueError:               method is not GET/POST/PUT/DELETE.
            UpstreamUnavailable:      network failure, timeout, redirect loop.
            UpstreamRejected:         non-2xx status.
            MalformedUpstreamPayload: body is not valid JSON.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported upstream method: {method}")

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = token

        try:
            resp = self._session.request(
                method,
                self.base_url + path,
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamUnavailable(str(exc) or type(exc).__name__, method=method, path=path) from exc

        logger.debug("%s %s -> %d", method, path, resp.status_code)

        if not 200 <= resp.status_code < 300:
            raise UpstreamRejected(
                f"status {resp.status_code}",
                method=method,
                path=path,
                status_code=resp.status_code,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedUpstreamPayload("response body is not JSON", method=method, path=path) from exc

    # ------------------------------------------------------------------
    # Users and auth
    # ------------------------------------------------------------------

    def list_users(self) -> list[UserRecord]:
        data = self.call("GET", "/user")
        if not isinstance(data, list):
            raise MalformedUpstreamPayload("expected a list of users", method="GET", path="/user")
        return data

    def create_user(self, username: str) -> Any:
        return self.call("POST", "/user", {"username": username})

    def authenticate(self, username: str) -> str:
        """Exchange a username for an opaque session token."""
        data = self.call("POST", "/auth", {"username": username})
        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise MalformedUpstreamPayload("auth response has no token", method="POST", path="/auth")
        return token

    # ------------------------------------------------------------------
    # To-do items
    # ------------------------------------------------------------------

    def list_items(self, token: Optional[str]) -> list[TodoItem]:
        """Return the raw (unfiltered) item collection for the token's user."""
        data = self.call("GET", "/todo-item", token=token)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise MalformedUpstreamPayload("expected a list of items", method="GET", path="/todo-item")
        return data

    def create_item(self, token: Optional[str], content: str) -> Any:
        return self.call("POST", "/todo-item", {"content": content}, token=token)

    def complete_item(self, token: Optional[str], item_id: Any) -> Any:
        # Same body every time, so repeating the call leaves the item completed.
        return self.call("PUT", _item_path(item_id), {"completed": True}, token=token)

    def delete_item(self, token: Optional[str], item_id: Any) -> Any:
        return self.call("DELETE", _item_path(item_id), {"deleted": True}, token=token)
