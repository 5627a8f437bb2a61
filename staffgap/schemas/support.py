from pydantic import BaseModel

from staffgap.models.enums import TicketStatus


class TicketStatusUpdate(BaseModel):
    status: TicketStatus
