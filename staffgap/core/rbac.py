# staffgap/core/rbac.py

from fastapi import Depends, HTTPException, status

from staffgap.api.deps import get_current_user, get_portal
from staffgap.core.portal import Portal
from staffgap.models.user import User, UserRole


def AllowRoles(*allowed_roles):
    """
    Flexible RBAC:
    - Accepts UserRole values or raw strings
    - Case-insensitive
    - Admin bypasses everything
    """

    def normalize(role) -> str:
        if isinstance(role, UserRole):
            return role.value.lower().strip()
        return str(role).lower().strip()

    normalized_allowed = {normalize(r) for r in allowed_roles}

    async def role_checker(current_user: User = Depends(get_current_user)):
        user_role = normalize(current_user.role)

        # Admin bypass
        if user_role == "admin":
            return current_user

        if user_role not in normalized_allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied for role '{current_user.role.value}'"
            )

        return current_user

    return role_checker


def RequireFeature(feature: str):
    """
    Capability check against the Admin-editable permission table.
    Admin always passes; HOD/Dean pass only while the feature is enabled for their role.
    """

    async def feature_checker(
        current_user: User = Depends(get_current_user),
        portal: Portal = Depends(get_portal),
    ):
        if not portal.policy.is_allowed(current_user.role, feature):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied for role '{current_user.role.value}'"
            )
        return current_user

    return feature_checker
