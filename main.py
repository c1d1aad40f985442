#!/usr/bin/env python3
"""
To-Do Relay -- browser front end for the upstream to-do list API.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 127.0.0.1 --reload

Environment variables:
  PORT                      Listening port. Unset or empty -> 3000.
  HOST                      Listening interface. Default 0.0.0.0.
  FORWARDED_ALLOW_IPS       Proxy IPs trusted for client address. Default 127.0.0.1.
  TODO_API_URL              Upstream base URL.
  UPSTREAM_TIMEOUT_SECONDS  Per-call upstream timeout. Default 10.
  DEBUG                     true for DEBUG-level logging.
"""

import argparse
from typing import Optional

import uvicorn

from core.config import get_settings


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Serve the to-do relay web app.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Interface to bind (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port}, from PORT)",
    )
    parser.add_argument(
        "--forwarded-allow-ips",
        default=settings.forwarded_allow_ips,
        help="Comma-separated proxy IPs trusted for X-Forwarded-For, or \"*\" "
        f"(default: {settings.forwarded_allow_ips})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    args = parser.parse_args(argv)

    print(f"  To-do relay listening on http://{args.host}:{args.port}")
    uvicorn.run(
        "asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        proxy_headers=True,
        forwarded_allow_ips=args.forwarded_allow_ips,
    )


if __name__ == "__main__":
    main()
