"""
tests/test_health.py -- Integration tests for GET /api/v1/health.

Covers:
  - 200 response with status and version fields
  - No session cookie required
  - The upstream API is never consulted
  - Router 404/405 errors use the ErrorResponse envelope
"""

from __future__ import annotations


def test_health_returns_200_with_version(web_client):
    resp = web_client.get("/api/v1/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_health_no_upstream_call(web_client, upstream):
    web_client.get("/api/v1/health")
    assert upstream.method_calls == []


def test_unknown_path_returns_404_envelope(web_client):
    resp = web_client.get("/no-such-page")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "http_404"


def test_wrong_method_returns_405_envelope(web_client):
    resp = web_client.get("/auth")
    assert resp.status_code == 405
    assert resp.json()["error"]["code"] == "http_405"
