"""Dashboard notifications: listing, unread count, read flags and removal."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.dependencies import get_db
from storefront.schemas.notification import NotificationIds, NotificationRead, UnreadCount
from storefront.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=List[NotificationRead])
async def list_notifications(
    unread: bool = Query(False, description="Only unread notifications"),
    limit: Optional[int] = Query(None, ge=1, le=200, description="Most recent N"),
    db: AsyncSession = Depends(get_db),
):
    service = NotificationService(db)
    if unread:
        return await service.get_unread(limit or 10)
    if limit:
        return await service.get_recent(limit)
    return await service.get_all()


@router.get("/unread-count", response_model=UnreadCount)
async def unread_count(db: AsyncSession = Depends(get_db)):
    return UnreadCount(unread=await NotificationService(db).get_unread_count())


@router.post("/read")
async def mark_notifications_read(body: NotificationIds, db: AsyncSession = Depends(get_db)):
    if not await NotificationService(db).mark_multiple_as_read(body.ids):
        raise HTTPException(status_code=404, detail="One or more notifications not found")
    return {"status": "ok", "updated": len(set(body.ids))}


@router.post("/{notification_id}/read")
async def mark_notification_read(notification_id: str, db: AsyncSession = Depends(get_db)):
    if not await NotificationService(db).mark_as_read(notification_id):
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")
    return {"status": "ok"}


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(notification_id: str, db: AsyncSession = Depends(get_db)):
    if not await NotificationService(db).delete(notification_id):
        raise HTTPException(status_code=404, detail=f"Notification {notification_id} not found")
