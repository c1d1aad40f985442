"""
core/errors.py -- Error taxonomy for calls to the upstream to-do API.

Every failure the Upstream Client can hit collapses into one of three kinds:

  UpstreamUnavailable       -- connection failure, timeout, redirect loop
  UpstreamRejected          -- upstream answered with a non-2xx status
  MalformedUpstreamPayload  -- body is not JSON or not the expected shape

Route handlers catch the UpstreamError base class and decide per operation
whether to degrade (reads) or absorb (writes). The `kind` string is what gets
logged and echoed in the X-Upstream-Error response header.

No side effects on import.
"""

from __future__ import annotations

from typing import Optional


class UpstreamError(Exception):
    """Base class for all upstream call failures."""

    kind = "upstream_error"

    def __init__(self, message: str, method: str = "", path: str = "") -> None:
        super().__init__(message)
        self.method = method
        self.path = path

    def __str__(self) -> str:
        target = f"{self.method} {self.path}".strip()
        message = super().__str__()
        return f"{target}: {message}" if target else message


class UpstreamUnavailable(UpstreamError):
    kind = "upstream_unavailable"


class UpstreamRejected(UpstreamError):
    kind = "upstream_rejected"

    def __init__(
        self,
        message: str,
        method: str = "",
        path: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, method=method, path=path)
        self.status_code = status_code


class MalformedUpstreamPayload(UpstreamError):
    kind = "malformed_payload"
