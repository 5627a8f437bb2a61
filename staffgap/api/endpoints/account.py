# staffgap/api/endpoints/account.py

from fastapi import APIRouter, Depends, HTTPException

from staffgap.api.deps import get_portal
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.user import User
from staffgap.schemas.auth import ChangePasswordRequest
from staffgap.schemas.user import ProfileUpdate, UserRead

router = APIRouter(prefix="/api/account", tags=["Account"])


# ---------------------------------------------------------
# UPDATE OWN PROFILE
# ---------------------------------------------------------
@router.patch("/profile", response_model=UserRead)
async def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(RequireFeature("settings")),
    portal: Portal = Depends(get_portal),
):
    user = portal.identity.update_user_profile(current_user.id, **data.model_dump(exclude_unset=True))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# ---------------------------------------------------------
# CHANGE OWN PASSWORD
# ---------------------------------------------------------
@router.post("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    current_user: User = Depends(RequireFeature("settings")),
    portal: Portal = Depends(get_portal),
):
    if not data.new_password:
        raise HTTPException(status_code=400, detail="New password cannot be empty")

    if not portal.identity.change_password(current_user.id, data.old_password, data.new_password):
        raise HTTPException(status_code=400, detail="Incorrect current password")

    portal.audit.log_activity(current_user.name, current_user.role, "UPDATE_PASSWORD", "Changed own password")
    return {"detail": "Password updated successfully"}
