from datetime import datetime

from sqlmodel import SQLModel, Field

from staffgap.models.enums import UserRole
from staffgap.models.submission import utc_now


class HistoryLog(SQLModel):
    id: int
    user: str
    role: UserRole
    action: str
    details: str
    timestamp: datetime = Field(default_factory=utc_now)
