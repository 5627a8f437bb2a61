# staffgap/api/endpoints/announcements.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from staffgap.api.deps import get_current_user, get_portal, require_admin
from staffgap.core.portal import Portal
from staffgap.models.announcement import Announcement
from staffgap.models.user import User
from staffgap.schemas.announcement import AnnouncementCreate

router = APIRouter(prefix="/api/announcements", tags=["Announcements"])


@router.get("/", response_model=List[Announcement])
async def list_announcements(
    limit: Optional[int] = Query(None, ge=1),
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return portal.announcements.list_announcements(limit=limit)


@router.post("/", response_model=Announcement, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    data: AnnouncementCreate,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    if not data.title.strip() or not data.content.strip():
        raise HTTPException(status_code=400, detail="Title and content are required")

    announcement = portal.announcements.add(data.title.strip(), data.content.strip(), current_user.name)
    portal.audit.log_activity(current_user.name, current_user.role, "CREATE_ANNOUNCEMENT", f"Posted: {announcement.title}")
    return announcement


@router.delete("/{announcement_id}")
async def delete_announcement(
    announcement_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    if not portal.announcements.delete(announcement_id):
        raise HTTPException(status_code=404, detail="Announcement not found")

    portal.audit.log_activity(current_user.name, current_user.role, "DELETE_ANNOUNCEMENT", f"Deleted announcement {announcement_id}")
    return {"detail": "Announcement deleted"}
