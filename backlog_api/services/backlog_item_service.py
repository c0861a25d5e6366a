"""
Backlog API - BacklogItem Service
=================================

What:  The five backlog operations (list, show, create, update, delete) on top
       of BacklogItemRepository.
How:   Each call builds a repository over the request's session, performs one
       storage operation, and returns response schemas.
Who:   Route handlers in routes/backlog_items.py.

Write operations commit before returning. A commit failure is a DatabaseError
like any other storage failure.

Error translation:
    repository returns None       → NotFoundError  (404)
    SQLAlchemyError from storage  → DatabaseError  (500, details logged only)

The service holds no per-request state; a single module-level instance is shared.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backlog_api.exceptions import DatabaseError, NotFoundError
from backlog_api.models.backlog_item import BacklogItem
from backlog_api.repositories.backlog_item_repository import BacklogItemRepository
from backlog_api.schemas.backlog_item import BacklogItemResponse, BacklogItemWrite

logger = logging.getLogger(__name__)


class BacklogItemService:
    """
    Business operations for backlog items.

    Responsibilities:
        - list_items(): all rows
        - get_item(): single row, NotFoundError on a miss
        - create_item(): insert with a server-generated id
        - update_item(): overwrite (or insert) the row named by the path id
        - delete_item(): idempotent removal
    """

    async def list_items(self, db: AsyncSession) -> List[BacklogItemResponse]:
        try:
            items = await BacklogItemRepository(db).find_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing backlog items: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve backlog items. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [BacklogItemResponse.model_validate(item) for item in items]

    async def get_item(self, db: AsyncSession, item_id: UUID) -> BacklogItemResponse:
        """
        Retrieve a single backlog item by ID.

        Raises:
            NotFoundError: no row has `item_id` (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            item = await BacklogItemRepository(db).find_by_id(item_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching backlog item %s: %s", item_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the backlog item. Please try again.",
                context={"item_id": str(item_id)},
            )

        if item is None:
            logger.debug("Backlog item %s not found", item_id)
            raise NotFoundError(resource="backlog item", resource_id=str(item_id))

        return BacklogItemResponse.model_validate(item)

    async def create_item(
        self, db: AsyncSession, payload: BacklogItemWrite
    ) -> BacklogItemResponse:
        """Insert a new item; the id is always generated server-side."""
        item = BacklogItem(
            id=None,
            title=payload.title,
            type=payload.type,
            status=payload.status,
        )
        saved = await self._save(db, item)
        return BacklogItemResponse.model_validate(saved)

    async def update_item(
        self, db: AsyncSession, item_id: UUID, payload: BacklogItemWrite
    ) -> BacklogItemResponse:
        """
        Replace title, type and status of the item at `item_id`.

        `item_id` comes from the URL path and is the only id used; the row is
        created with that id when it does not exist yet.
        """
        item = BacklogItem(
            id=item_id,
            title=payload.title,
            type=payload.type,
            status=payload.status,
        )
        saved = await self._save(db, item)
        return BacklogItemResponse.model_validate(saved)

    async def delete_item(self, db: AsyncSession, item_id: UUID) -> None:
        """Remove the item at `item_id`; deleting an absent item succeeds."""
        try:
            await BacklogItemRepository(db).delete_by_id(item_id)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting backlog item %s: %s", item_id, str(e))
            raise DatabaseError(
                message="Could not delete the backlog item. Please try again.",
                context={"item_id": str(item_id)},
            )

    async def _save(self, db: AsyncSession, item: BacklogItem) -> BacklogItem:
        try:
            saved = await BacklogItemRepository(db).save(item)
            await db.commit()
            return saved
        except SQLAlchemyError as e:
            logger.error("Database error saving backlog item: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the backlog item. Please try again.",
                context={"item_id": str(item.id), "error_type": type(e).__name__},
            )


backlog_item_service = BacklogItemService()
