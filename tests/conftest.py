"""
tests/conftest.py -- Shared test fixtures for to-do relay integration tests.

This module provides:
  - _patch_lifespan(): wires a mocked Upstream Client into app.state,
    bypassing the real startup so no test touches the network
  - upstream: MagicMock standing in for core.upstream.UpstreamClient
  - web_client: TestClient with follow_redirects=False for web route tests

Design: the mock is built with spec=UpstreamClient so a typo in a method name
fails loudly instead of silently returning another MagicMock.

AUTH_RATE_LIMIT is raised before any app import. The limiter keeps its
counters in process memory, and many tests POST /auth from the same client
address.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import asynccontextmanager
from unittest.mock import MagicMock

# Must be set before get_settings() is first called.
os.environ.setdefault("AUTH_RATE_LIMIT", "1000/minute")

import pytest
from fastapi.testclient import TestClient

from asgi import app
from core.upstream import UpstreamClient


def _patch_lifespan(upstream: MagicMock):
    """Return an async context manager that replaces the real lifespan."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.upstream = upstream
        yield

    return test_lifespan


@pytest.fixture
def upstream() -> MagicMock:
    return MagicMock(spec=UpstreamClient)


@pytest.fixture
def web_client(upstream: MagicMock) -> Generator[TestClient, None, None]:
    """Yield a TestClient whose app talks to the `upstream` mock.

    follow_redirects=False is essential for web route tests: we assert on
    redirect *locations* and Set-Cookie headers, which are invisible once
    the client follows the redirect and returns the final 200 response.
    """
    app.router.lifespan_context = _patch_lifespan(upstream)

    with TestClient(app, follow_redirects=False, raise_server_exceptions=True) as client:
        yield client
