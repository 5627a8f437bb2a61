# staffgap/api/endpoints/dashboard.py

from fastapi import APIRouter, Depends

from staffgap.api.deps import get_current_user, get_portal
from staffgap.core.portal import Portal
from staffgap.models.user import User
from staffgap.schemas.dashboard import DashboardView
from staffgap.services.dashboard_service import build_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/", response_model=DashboardView)
async def my_dashboard(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return build_dashboard(portal, current_user)
