# staffgap/services/notification_service.py

from typing import Iterable, Optional

from staffgap.models.notification import Notification


class NotificationStore:
    # Notifications only come from seed data; callers can only mark them read.

    def __init__(self, notifications: Iterable[Notification] = ()):
        self._notifications: list[Notification] = [n.model_copy() for n in notifications]

    def for_user(self, user_id: int) -> list[Notification]:
        mine = [n for n in self._notifications if n.user_id == user_id]
        return sorted(mine, key=lambda n: n.timestamp, reverse=True)

    def unread_count(self, user_id: int) -> int:
        return sum(1 for n in self._notifications if n.user_id == user_id and not n.is_read)

    def get(self, notification_id: int) -> Optional[Notification]:
        return next((n for n in self._notifications if n.id == notification_id), None)

    def mark_as_read(self, notification_id: int) -> Optional[Notification]:
        notification = self.get(notification_id)
        if notification:
            notification.is_read = True
        return notification

    def mark_all_as_read(self, user_id: int) -> int:
        changed = 0
        for notification in self._notifications:
            if notification.user_id == user_id and not notification.is_read:
                notification.is_read = True
                changed += 1
        return changed
