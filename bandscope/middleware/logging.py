"""Structured logging helpers and request logging middleware."""

import json
import logging
import os
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


LOG = logging.getLogger("bandscope")
if not LOG.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    LOG.addHandler(handler)
LOG.setLevel(os.getenv("BANDSCOPE_LOG_LEVEL", "INFO").upper())


def log_info(event: str, **kwargs: object) -> None:
    """Log an informational event as structured JSON."""
    log = {"level": "info", "event": event, **kwargs}
    LOG.info(json.dumps(log, default=str))


def log_warning(event: str, **kwargs: object) -> None:
    """Log a warning event as structured JSON."""
    log = {"level": "warning", "event": event, **kwargs}
    LOG.warning(json.dumps(log, default=str))


def log_error(event: str, **kwargs: object) -> None:
    """Log an error event as structured JSON."""
    log = {"level": "error", "event": event, **kwargs}
    LOG.error(json.dumps(log, default=str))


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one structured line per HTTP request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get("x-request-id", str(uuid.uuid4()))
        start = time.time()

        response = await call_next(request)

        dur_ms = int((time.time() - start) * 1000)
        log_info(
            "http_request",
            request_id=rid,
            method=request.method,
            path=request.url.path,
            query=dict(request.query_params),
            status=response.status_code,
            duration_ms=dur_ms,
        )
        response.headers["x-request-id"] = rid
        return response
