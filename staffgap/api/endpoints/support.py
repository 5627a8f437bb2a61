# staffgap/api/endpoints/support.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from staffgap.api.deps import faculty_in_scope, get_portal, require_admin
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.enums import TicketStatus
from staffgap.models.support import SupportTicket
from staffgap.models.user import User, UserRole
from staffgap.schemas.contact import Contact
from staffgap.schemas.support import TicketStatusUpdate
from staffgap.services.contact_service import contacts_for

router = APIRouter(prefix="/api/support", tags=["Support"])


@router.get("/tickets", response_model=List[SupportTicket])
async def list_tickets(
    status: Optional[TicketStatus] = Query(None),
    open_only: bool = Query(False),
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    if open_only:
        return portal.support.open_tickets()
    return portal.support.list_tickets(status=status)


@router.patch("/tickets/{ticket_id}", response_model=SupportTicket)
async def update_ticket_status(
    ticket_id: int,
    data: TicketStatusUpdate,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    ticket = portal.support.update_status(ticket_id, data.status)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")

    portal.audit.log_activity(
        current_user.name, current_user.role, "UPDATE_TICKET",
        f"Ticket #{ticket_id} marked {data.status.value}",
    )
    return ticket


# -------------------------------------------------------------------
# Faculty contact directory (Dean's office + HODs)
# -------------------------------------------------------------------
@router.get("/contacts", response_model=List[Contact])
async def faculty_contacts(
    faculty_id: Optional[int] = Query(None),
    current_user: User = Depends(RequireFeature("contactDirectory")),
    portal: Portal = Depends(get_portal),
):
    if current_user.role == UserRole.ADMIN:
        faculty_id = faculty_in_scope(portal, current_user, faculty_id)
    return contacts_for(portal, current_user, faculty_id)
