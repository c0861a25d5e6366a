"""
Backlog API - Access Logging Middleware
=======================================

What:  One access-log line per request on the `backlog_api.access` logger.
How:   Times the downstream call. The level follows the response status
       (see `level_for_status`), so a WARNING log level keeps only failures.

Line format:
    GET /backlog-items/0b6f... -> 404 (2.3 ms) rid=1a2b3c4d client=127.0.0.1

Bodies are never logged. Paths in QUIET_PATHS (load balancer health checks)
produce no line at all.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from backlog_api.middleware.request_id import request_id_var

logger = logging.getLogger("backlog_api.access")

QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.log(
            level_for_status(response.status_code),
            "%s %s -> %d (%.1f ms) rid=%s client=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            # no client under some ASGI test transports
            request.client.host if request.client else "-",
        )
        return response
