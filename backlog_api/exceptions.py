"""
Backlog API - Exception Hierarchy
=================================

What:  Application exceptions, each mapped to an HTTP status by the global
       handlers registered in main.py.
Who:   Raised by services; caught by the handlers in `register_exception_handlers`.

Exception Hierarchy:
    BacklogApiError (base)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Malformed requests (unparsable JSON, wrong field types, a path id that is
not a UUID) never reach these classes; FastAPI raises RequestValidationError,
which main.py maps to 400.
"""

from typing import Any, Dict, Optional


class BacklogApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing description (safe to return in a response)
        context:  Debug details (logged, not always returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(BacklogApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET /backlog-items/{id} with an id that has no row.
    HTTP:    404 Not Found

    The repository returns None for a miss; the service layer turns that
    None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(BacklogApiError):
    """
    Raised when a storage operation fails (connection loss, constraint
    violation, deadlock).

    HTTP:    500 Internal Server Error

    The response message is always generic; `context` is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
