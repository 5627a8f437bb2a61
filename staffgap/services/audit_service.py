# staffgap/services/audit_service.py

from typing import Iterable, Optional

from loguru import logger

from staffgap.models.audit import HistoryLog
from staffgap.models.enums import UserRole
from staffgap.models.submission import utc_now


class AuditStore:
    """System history shown on the Admin dashboard, newest first."""

    def __init__(self, logs: Iterable[HistoryLog] = ()):
        self._logs: list[HistoryLog] = [log.model_copy() for log in logs]

    def log_activity(self, user: str, role: UserRole, action: str, details: str) -> HistoryLog:
        entry = HistoryLog(
            id=max((log.id for log in self._logs), default=0) + 1,
            user=user,
            role=role,
            action=action,
            details=details,
            timestamp=utc_now(),
        )
        self._logs.insert(0, entry)
        logger.debug(f"AUDIT {action} by {user}: {details}")
        return entry

    def recent(self, limit: Optional[int] = None) -> list[HistoryLog]:
        logs = sorted(self._logs, key=lambda log: log.timestamp, reverse=True)
        return logs if limit is None else logs[:limit]
