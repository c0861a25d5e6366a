"""
Backlog API - Request ID Middleware
===================================

What:  Tags every request with a correlation ID and echoes it in the
       X-Request-ID response header.
How:   Reuses a client-supplied X-Request-ID when it is short and printable,
       otherwise generates an 8-character hex ID. The ID is stored in a
       ContextVar for loggers and error handlers, and on request.state for
       route handlers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own value.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client IDs end up in log lines and error bodies.
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(header_value: Optional[str]) -> str:
    if header_value and _ACCEPTED_ID.fullmatch(header_value):
        return header_value
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a correlation ID to each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
