from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from staffgap.models.enums import UserRole, TicketCategory, TicketPriority, TicketStatus
from staffgap.models.submission import utc_now


class SupportTicket(SQLModel):
    id: int
    subject: str
    requester_name: str
    requester_role: UserRole
    requester_department: Optional[str] = None
    category: TicketCategory
    priority: TicketPriority = TicketPriority.Medium
    status: TicketStatus = TicketStatus.Open
    created_at: datetime = Field(default_factory=utc_now)
    last_updated_at: datetime = Field(default_factory=utc_now)
    description: str
