from datetime import datetime

from sqlmodel import SQLModel, Field

from staffgap.models.submission import utc_now


class Announcement(SQLModel):
    id: int
    title: str
    content: str
    timestamp: datetime = Field(default_factory=utc_now)
    author_name: str
