# staffgap/api/endpoints/policy.py

from typing import Dict, List

from fastapi import APIRouter, Depends

from staffgap.api.deps import get_current_user, get_portal, raise_for_result, require_admin
from staffgap.core.constants import CONTROLLABLE_FEATURES
from staffgap.core.portal import Portal
from staffgap.models.enums import AcademicRank, UserRole
from staffgap.models.user import User
from staffgap.schemas.common import OperationResult
from staffgap.schemas.policy import FeatureRead, PermissionUpdate, RequirementsUpdate

router = APIRouter(prefix="/api/policy", tags=["Policy"])


# ---------------------------------------------------------
# NUC REQUIREMENT TABLE
# ---------------------------------------------------------
@router.get("/requirements", response_model=Dict[AcademicRank, int])
async def get_requirements(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return portal.policy.requirements


@router.put("/requirements", response_model=OperationResult)
async def update_requirements(
    data: RequirementsUpdate,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    result = raise_for_result(portal.policy.update_requirements(data.requirements))
    portal.audit.log_activity(current_user.name, current_user.role, "UPDATE_REQUIREMENTS", "Updated NUC requirements")
    return result


# ---------------------------------------------------------
# FEATURE PERMISSIONS
# ---------------------------------------------------------
@router.get("/permissions", response_model=List[FeatureRead])
async def get_permissions(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    table = portal.policy.permissions
    return [
        FeatureRead(
            **feature,
            hod=table[feature["key"]][UserRole.HOD],
            dean=table[feature["key"]][UserRole.DEAN],
        )
        for feature in CONTROLLABLE_FEATURES
    ]


@router.put("/permissions", response_model=OperationResult)
async def set_permission(
    data: PermissionUpdate,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    result = raise_for_result(portal.policy.set_permission(data.feature, data.role, data.enabled))
    portal.audit.log_activity(
        current_user.name, current_user.role, "UPDATE_PERMISSIONS",
        f"{'Enabled' if data.enabled else 'Disabled'} {data.feature} for {data.role.value}",
    )
    return result
