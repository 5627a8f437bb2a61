# staffgap/api/endpoints/logs.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from staffgap.api.deps import get_portal, require_admin
from staffgap.core.portal import Portal
from staffgap.models.audit import HistoryLog
from staffgap.models.user import User

router = APIRouter(prefix="/api/logs", tags=["Audit Logs"])


@router.get("/", response_model=List[HistoryLog])
async def get_logs(
    limit: Optional[int] = Query(50, ge=1, le=500),
    action: Optional[str] = Query(None, description="Filter by action, e.g. CREATE_USER"),
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    logs = portal.audit.recent()
    if action:
        logs = [entry for entry in logs if entry.action == action.upper()]
    return logs[:limit]
