# staffgap/api/endpoints/notifications.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from staffgap.api.deps import get_current_user, get_portal
from staffgap.core.portal import Portal
from staffgap.models.notification import Notification
from staffgap.models.user import User

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("/", response_model=List[Notification])
async def my_notifications(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return portal.notifications.for_user(current_user.id)


@router.get("/unread-count")
async def unread_count(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return {"unread": portal.notifications.unread_count(current_user.id)}


@router.post("/{notification_id}/read", response_model=Notification)
async def mark_as_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    notification = portal.notifications.get(notification_id)

    # other users' notifications are reported as missing
    if not notification or notification.user_id != current_user.id:
        raise HTTPException(status_code=404, detail="Notification not found")

    return portal.notifications.mark_as_read(notification_id)


@router.post("/read-all")
async def mark_all_as_read(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return {"updated": portal.notifications.mark_all_as_read(current_user.id)}
