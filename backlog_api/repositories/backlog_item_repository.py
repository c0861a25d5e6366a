"""
Backlog API - BacklogItem Repository
====================================

What:  Persistence gateway for `BacklogItem`: find-all, find-by-id, save,
       delete-by-id.
How:   Wraps one AsyncSession. Writes are flushed, not committed;
       BacklogItemService commits after each write operation.
Who:   BacklogItemService.

save() is an explicit upsert keyed on the primary key:

    item.id is None          → generate uuid4, INSERT
    item.id set, row exists  → overwrite title/type/status
    item.id set, row absent  → INSERT with the given id
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backlog_api.models.backlog_item import BacklogItem

logger = logging.getLogger(__name__)


class BacklogItemRepository:
    """CRUD access to the `backlog_items` table through one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[BacklogItem]:
        """Every row, in no particular order. Empty list for an empty table."""
        result = await self.session.execute(select(BacklogItem))
        return list(result.scalars().all())

    async def find_by_id(self, item_id: uuid.UUID) -> Optional[BacklogItem]:
        """The row with `item_id`, or None."""
        return await self.session.get(BacklogItem, item_id)

    async def save(self, item: BacklogItem) -> BacklogItem:
        """
        Insert or update `item` and return the persisted entity.

        The returned object is the instance tracked by the session, which is
        `item` itself except when an existing row was overwritten.
        """
        if item.id is None:
            item.id = uuid.uuid4()
            self.session.add(item)
            await self.session.flush()
            logger.info("Inserted backlog item %s", item.id)
            return item

        existing = await self.session.get(BacklogItem, item.id)
        if existing is None:
            self.session.add(item)
            await self.session.flush()
            logger.info("Inserted backlog item %s (caller-supplied id)", item.id)
            return item

        existing.title = item.title
        existing.type = item.type
        existing.status = item.status
        await self.session.flush()
        logger.info("Updated backlog item %s", existing.id)
        return existing

    async def delete_by_id(self, item_id: uuid.UUID) -> None:
        """Remove the row with `item_id`. A missing row is not an error."""
        item = await self.session.get(BacklogItem, item_id)
        if item is None:
            logger.debug("Delete of absent backlog item %s ignored", item_id)
            return
        await self.session.delete(item)
        await self.session.flush()
        logger.info("Deleted backlog item %s", item_id)
