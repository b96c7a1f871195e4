"""Dashboard notification queries and read-state updates."""

import logging
from typing import List, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Read side of the notifications collection.

    Notifications are created and removed by the notification hooks; this
    service lists them for the dashboard and tracks their ``read`` flag.
    Storage errors are logged and reported as empty results or ``False``,
    the dashboard never sees an exception from here.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self):
        return (
            select(Notification)
            .options(selectinload(Notification.order), selectinload(Notification.product))
            .order_by(Notification.created.desc(), Notification.id.desc())
        )

    async def get_all(self) -> List[Notification]:
        """All notifications, newest first."""
        try:
            result = await self.db.execute(self._base_query())
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching notifications: {e}")
            return []

    async def get_recent(self, limit: int = 10) -> List[Notification]:
        try:
            result = await self.db.execute(self._base_query().limit(limit))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching recent notifications: {e}")
            return []

    async def get_unread(self, limit: int = 10) -> List[Notification]:
        try:
            stmt = self._base_query().where(Notification.read.is_(False)).limit(limit)
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching unread notifications: {e}")
            return []

    async def get_unread_count(self) -> int:
        try:
            stmt = select(func.count()).select_from(Notification).where(Notification.read.is_(False))
            result = await self.db.execute(stmt)
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error getting unread count: {e}")
            return 0

    async def mark_as_read(self, notification_id: str) -> bool:
        return await self.mark_multiple_as_read([notification_id])

    async def mark_multiple_as_read(self, notification_ids: Sequence[str]) -> bool:
        """
        Flag the given notifications as read.

        Returns False if any id does not exist or the update fails.
        """
        ids = list(dict.fromkeys(notification_ids))
        if not ids:
            return True
        try:
            result = await self.db.execute(
                update(Notification).where(Notification.id.in_(ids)).values(read=True)
            )
            if result.rowcount != len(ids):
                await self.db.rollback()
                logger.warning(f"Some notifications not found when marking read: {ids}")
                return False
            await self.db.commit()
            return True
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error marking notifications as read: {e}")
            return False

    async def delete(self, notification_id: str) -> bool:
        return await self.delete_many([notification_id])

    async def delete_many(self, notification_ids: Sequence[str]) -> bool:
        ids = list(dict.fromkeys(notification_ids))
        if not ids:
            return True
        try:
            result = await self.db.execute(delete(Notification).where(Notification.id.in_(ids)))
            if result.rowcount != len(ids):
                await self.db.rollback()
                logger.warning(f"Some notifications not found when deleting: {ids}")
                return False
            await self.db.commit()
            return True
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting notifications: {e}")
            return False
