"""
Backlog API - Backlog Item Route Handlers
=========================================

What:  The five /backlog-items endpoints.
How:   Plain async handlers delegate to BacklogItemService. ROUTE_TABLE lists
       (method, path, handler, options); `build_router()` registers every
       entry on an APIRouter when the application is created.

Route Table:
    GET     /backlog-items        list_items    200 [items]
    GET     /backlog-items/{id}   show_item     200 item | 404
    POST    /backlog-items        create_item   201 item | 400
    PUT     /backlog-items/{id}   update_item   200 item | 400
    DELETE  /backlog-items/{id}   delete_item   200 empty
"""

import logging
from typing import Any, Callable, Dict, List, Tuple
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backlog_api.database import get_db_session
from backlog_api.schemas.backlog_item import (
    BacklogItemResponse,
    BacklogItemWrite,
    ErrorResponse,
)
from backlog_api.services.backlog_item_service import backlog_item_service

logger = logging.getLogger(__name__)

PREFIX = "/backlog-items"


# ══════════════════════════════════════════════════════════════════════════
# Handlers
# ══════════════════════════════════════════════════════════════════════════


async def list_items(
    db: AsyncSession = Depends(get_db_session),
) -> List[BacklogItemResponse]:
    """Return every backlog item (possibly an empty array)."""
    return await backlog_item_service.list_items(db)


async def show_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> BacklogItemResponse:
    """
    Return one backlog item.

    A miss raises NotFoundError, which the global handler turns into 404.
    A path segment that is not a UUID is rejected with 400 before this runs.
    """
    return await backlog_item_service.get_item(db, item_id)


async def create_item(
    payload: BacklogItemWrite,
    db: AsyncSession = Depends(get_db_session),
) -> BacklogItemResponse:
    """Create a backlog item. Any `id` in the body is ignored."""
    return await backlog_item_service.create_item(db, payload)


async def update_item(
    item_id: UUID,
    payload: BacklogItemWrite,
    db: AsyncSession = Depends(get_db_session),
) -> BacklogItemResponse:
    """Replace the item at the path id. Any `id` in the body is ignored."""
    return await backlog_item_service.update_item(db, item_id, payload)


async def delete_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """Delete the item at the path id. Succeeds whether or not it existed."""
    await backlog_item_service.delete_item(db, item_id)
    return Response(status_code=200)


# ══════════════════════════════════════════════════════════════════════════
# Route Table
# ══════════════════════════════════════════════════════════════════════════

_ERROR_400 = {400: {"description": "Malformed request", "model": ErrorResponse}}
_ERROR_404 = {404: {"description": "Backlog item not found", "model": ErrorResponse}}
_ERROR_500 = {500: {"description": "Server error", "model": ErrorResponse}}

RouteSpec = Tuple[str, str, Callable[..., Any], Dict[str, Any]]

ROUTE_TABLE: List[RouteSpec] = [
    (
        "GET", "", list_items,
        {
            "response_model": List[BacklogItemResponse],
            "responses": {**_ERROR_500},
            "summary": "List all backlog items",
        },
    ),
    (
        "GET", "/{item_id}", show_item,
        {
            "response_model": BacklogItemResponse,
            "responses": {**_ERROR_400, **_ERROR_404, **_ERROR_500},
            "summary": "Get a single backlog item by ID",
        },
    ),
    (
        "POST", "", create_item,
        {
            "status_code": 201,
            "response_model": BacklogItemResponse,
            "responses": {**_ERROR_400, **_ERROR_500},
            "summary": "Create a backlog item",
        },
    ),
    (
        "PUT", "/{item_id}", update_item,
        {
            "response_model": BacklogItemResponse,
            "responses": {**_ERROR_400, **_ERROR_500},
            "summary": "Replace a backlog item",
        },
    ),
    (
        "DELETE", "/{item_id}", delete_item,
        {
            "status_code": 200,
            "response_class": Response,
            "responses": {200: {"description": "Deleted (or already absent)"}, **_ERROR_500},
            "summary": "Delete a backlog item",
        },
    ),
]


def build_router() -> APIRouter:
    """Register every ROUTE_TABLE entry on a fresh router under /backlog-items."""
    router = APIRouter(prefix=PREFIX, tags=["Backlog Items"])
    for method, path, handler, options in ROUTE_TABLE:
        router.add_api_route(path, handler, methods=[method], **options)
        logger.debug("Registered route %s %s%s", method, PREFIX, path)
    return router
