# staffgap/services/announcement_service.py

from typing import Iterable, Optional

from loguru import logger

from staffgap.models.announcement import Announcement
from staffgap.models.submission import utc_now


class AnnouncementStore:
    """University-wide announcements, newest first."""

    def __init__(self, announcements: Iterable[Announcement] = ()):
        self._announcements: list[Announcement] = [a.model_copy() for a in announcements]

    def list_announcements(self, limit: Optional[int] = None) -> list[Announcement]:
        items = list(self._announcements)
        return items if limit is None else items[:limit]

    def get(self, announcement_id: int) -> Optional[Announcement]:
        return next((a for a in self._announcements if a.id == announcement_id), None)

    def add(self, title: str, content: str, author_name: str) -> Announcement:
        announcement = Announcement(
            id=max((a.id for a in self._announcements), default=0) + 1,
            title=title,
            content=content,
            author_name=author_name,
            timestamp=utc_now(),
        )
        self._announcements.insert(0, announcement)
        logger.info(f"Announcement {announcement.id} posted by {author_name}")
        return announcement

    def delete(self, announcement_id: int) -> bool:
        before = len(self._announcements)
        self._announcements = [a for a in self._announcements if a.id != announcement_id]
        return len(self._announcements) < before
