from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import async_session
from storefront.integrations.hooks import HookRegistry
from storefront.services.record_store import SQLAlchemyRecordStore


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


def get_hooks(request: Request) -> HookRegistry:
    """The hook registry built at startup."""
    return request.app.state.hooks


async def get_record_store(
    db: AsyncSession = Depends(get_db),
    hooks: HookRegistry = Depends(get_hooks),
) -> SQLAlchemyRecordStore:
    """Record store bound to the request session and the app's hooks."""
    return SQLAlchemyRecordStore(db, hooks)
