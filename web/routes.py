"""
web/routes.py -- Browser-facing relay routes for the to-do app.

Each route turns one form submission or page load into at most one call to
the upstream to-do API, carrying the session token from the browser cookie,
and hands the result to a Jinja2 template or a redirect.

Routes:
  GET  /                 -- home page (register + log in forms)
  GET  /users            -- all upstream users
  GET  /successful       -- registration success page (all upstream users)
  POST /register         -- create upstream user, 303 -> /successful
  POST /auth             -- log in, set session cookie if none exists
  GET  /all-items        -- the session user's items, soft-deleted hidden
  POST /insert-new-item  -- create item, 303 -> /all-items
  POST /update-item      -- mark item completed, 204 (no navigation)
  POST /delete-item      -- soft-delete item, 303 -> /all-items
  POST /log-out          -- clear session cookie, 303 -> /

Failure policy:
  Reads degrade. If the upstream call fails the page still renders, with the
  data key left out of the template context.

  Writes are absorbed. The failure is logged and the browser gets
  204 No Content, which keeps it on the current page. The error kind goes in
  the X-Upstream-Error header. Known limitation: the user sees no feedback
  when a write fails.

  Log in failure still renders the authenticated page, without a cookie.

No route retries an upstream call.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from api.limiter import limiter
from auth.session import clear_token, issue_token, read_token
from core.config import get_settings
from core.errors import UpstreamError
from core.filters import filter_deleted
from core.upstream import UpstreamClient

logger = logging.getLogger("todorelay.web")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter()

UPSTREAM_ERROR_HEADER = "X-Upstream-Error"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _upstream(request: Request) -> UpstreamClient:
    return request.app.state.upstream


def _auth_rate_limit() -> str:
    return get_settings().auth_rate_limit


def _absorb(operation: str, exc: UpstreamError) -> Response:
    """Log a failed write and leave the browser where it is."""
    logger.warning("%s failed (%s): %s", operation, exc.kind, exc)
    return Response(status_code=204, headers={UPSTREAM_ERROR_HEADER: exc.kind})


def _render_users(request: Request, template: str) -> HTMLResponse:
    context: dict = {}
    try:
        context["users"] = _upstream(request).list_users()
    except UpstreamError as exc:
        logger.warning("User list unavailable (%s): %s", exc.kind, exc)
    return templates.TemplateResponse(request, template, context)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "home.html")


@router.get("/users", response_class=HTMLResponse)
def user_list(request: Request) -> HTMLResponse:
    """Render every user registered with the upstream API."""
    return _render_users(request, "user_list.html")


@router.get("/successful", response_class=HTMLResponse)
def registration_successful(request: Request) -> HTMLResponse:
    """Landing page after POST /register. Shows the refreshed user list."""
    return _render_users(request, "successful.html")


# ---------------------------------------------------------------------------
# Registration and log in
# ---------------------------------------------------------------------------


@router.post("/register")
@limiter.limit(_auth_rate_limit)
def register(request: Request, username: str = Form(..., alias="newUser")) -> Response:
    try:
        _upstream(request).create_user(username)
    except UpstreamError as exc:
        return _absorb("Register", exc)
    return RedirectResponse("/successful", status_code=303)


@router.post("/auth", response_class=HTMLResponse)
@limiter.limit(_auth_rate_limit)
def authenticate(request: Request, username: str = Form(..., alias="logUser")) -> HTMLResponse:
    """Log in as username and start a session.

    The upstream is asked for a token on every log in, but the cookie is only
    set when the browser has none yet. An existing session cookie is left in
    place even if the new token differs.
    """
    try:
        token = _upstream(request).authenticate(username)
    except UpstreamError as exc:
        logger.warning("Authenticate failed (%s): %s", exc.kind, exc)
        resp = templates.TemplateResponse(request, "authenticate.html")
        resp.headers[UPSTREAM_ERROR_HEADER] = exc.kind
        return resp

    resp = templates.TemplateResponse(request, "authenticate.html")
    issue_token(request, resp, token)
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.post("/log-out")
def log_out(request: Request) -> RedirectResponse:
    """Clear the session cookie and go home. No upstream call."""
    resp = RedirectResponse("/", status_code=303)
    clear_token(resp)
    return resp


# ---------------------------------------------------------------------------
# To-do items
# ---------------------------------------------------------------------------


@router.get("/all-items", response_class=HTMLResponse)
def all_items(request: Request) -> HTMLResponse:
    """Render the session user's items with soft-deleted ones removed.

    An upstream failure renders the page without "items", so an unreachable
    upstream looks the same as an empty list.
    """
    context: dict = {}
    try:
        items = _upstream(request).list_items(read_token(request))
    except UpstreamError as exc:
        logger.warning("Item list unavailable (%s): %s", exc.kind, exc)
    else:
        context["items"] = filter_deleted(items)
    return templates.TemplateResponse(request, "individual_list.html", context)


@router.post("/insert-new-item")
def insert_new_item(request: Request, content: str = Form(..., alias="newText")) -> Response:
    try:
        _upstream(request).create_item(read_token(request), content)
    except UpstreamError as exc:
        return _absorb("Create item", exc)
    return RedirectResponse("/all-items", status_code=303)


@router.post("/update-item")
def update_item(request: Request, item_id: str = Form(..., alias="inputid")) -> Response:
    """Mark an item completed. Acknowledged with 204 so the page does not move."""
    try:
        _upstream(request).complete_item(read_token(request), item_id)
    except UpstreamError as exc:
        return _absorb("Complete item", exc)
    return Response(status_code=204)


@router.post("/delete-item")
def delete_item(request: Request, item_id: str = Form(..., alias="buttonid")) -> Response:
    try:
        _upstream(request).delete_item(read_token(request), item_id)
    except UpstreamError as exc:
        return _absorb("Delete item", exc)
    return RedirectResponse("/all-items", status_code=303)
