"""Unit tests for main.py -- CLI arguments passed through to uvicorn.run."""

from unittest.mock import patch

import main


def _run_kwargs(argv):
    with patch("main.uvicorn.run") as run:
        main.main(argv)
    run.assert_called_once()
    return run.call_args


def test_serves_asgi_app_with_proxy_headers():
    call = _run_kwargs([])
    assert call.args == ("asgi:app",)
    assert call.kwargs["proxy_headers"] is True


def test_forwarded_allow_ips_defaults_to_settings():
    call = _run_kwargs([])
    assert call.kwargs["forwarded_allow_ips"] == main.get_settings().forwarded_allow_ips


def test_forwarded_allow_ips_flag():
    call = _run_kwargs(["--forwarded-allow-ips", "*"])
    assert call.kwargs["forwarded_allow_ips"] == "*"


def test_host_and_port_flags():
    call = _run_kwargs(["--host", "127.0.0.1", "--port", "8080"])
    assert call.kwargs["host"] == "127.0.0.1"
    assert call.kwargs["port"] == 8080
