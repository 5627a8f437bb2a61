# staffgap/services/support_service.py

from typing import Iterable, Optional

from loguru import logger

from staffgap.models.enums import TicketStatus
from staffgap.models.submission import utc_now
from staffgap.models.support import SupportTicket

OPEN_STATUSES = {TicketStatus.Open, TicketStatus.InProgress}


class SupportStore:

    def __init__(self, tickets: Iterable[SupportTicket] = ()):
        self._tickets: list[SupportTicket] = [t.model_copy() for t in tickets]

    def list_tickets(self, status: Optional[TicketStatus] = None) -> list[SupportTicket]:
        return [t for t in self._tickets if status is None or t.status == status]

    def open_tickets(self) -> list[SupportTicket]:
        return [t for t in self._tickets if t.status in OPEN_STATUSES]

    def get(self, ticket_id: int) -> Optional[SupportTicket]:
        return next((t for t in self._tickets if t.id == ticket_id), None)

    def update_status(self, ticket_id: int, status: TicketStatus) -> Optional[SupportTicket]:
        ticket = self.get(ticket_id)
        if not ticket:
            return None

        ticket.status = TicketStatus(status)
        ticket.last_updated_at = utc_now()
        logger.info(f"Support ticket {ticket_id} moved to {ticket.status.value}")
        return ticket
