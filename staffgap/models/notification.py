from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from staffgap.models.submission import utc_now


class Notification(SQLModel):
    id: int
    user_id: int
    title: str
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    is_read: bool = False

    # dashboard page the client should open, e.g. "Review Submissions"
    link: Optional[str] = None
