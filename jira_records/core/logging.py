from __future__ import annotations

import logging
import sys
import time
from typing import Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
REQUEST_LOGGER = "jira_records.request"


def configure_logging(level: str = "INFO") -> None:
    """Send all logs to stdout at the given level; safe to call more than once."""
    root = logging.getLogger()
    if not any(getattr(handler, "_jira_records", False) for handler in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._jira_records = True
        root.addHandler(handler)
    root.setLevel(level.upper())
    # httpx logs every outbound request at INFO
    logging.getLogger("httpx").setLevel(max(root.level, logging.WARNING))


def decode_outcome(request: Request) -> str:
    """Summarize what the request decoded, as recorded on request.state by routes and error handlers."""
    error = getattr(request.state, "decode_error", None)
    if error is not None:
        return f"rejected={error}"
    issues = getattr(request.state, "decoded_issues", None)
    if issues is not None:
        return f"issues={issues}"
    return "no-decode"


class DecodeLoggingMiddleware(BaseHTTPMiddleware):
    """One INFO line per request: status, body size, latency and decode outcome."""

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            logging.getLogger(REQUEST_LOGGER).info(
                "%s %s -> %s bytes=%s %s (%.2f ms)",
                request.method,
                request.url.path,
                getattr(response, "status_code", "n/a"),
                request.headers.get("content-length", "0"),
                decode_outcome(request),
                (time.perf_counter() - start) * 1000.0,
            )


def install_request_logging(app: FastAPI) -> None:
    app.add_middleware(DecodeLoggingMiddleware)
