# staffgap/api/deps.py

from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from staffgap.core.portal import Portal
from staffgap.core.security import decode_token
from staffgap.models.department import Department
from staffgap.models.user import User, UserRole
from staffgap.schemas.common import OperationResult


# ------------------------------------------------------------
# HTTP Bearer Authentication
# ------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=True)


# ------------------------------------------------------------
# Portal stores (built at startup, see staffgap.main)
# ------------------------------------------------------------
async def get_portal(request: Request) -> Portal:
    portal = getattr(request.app.state, "portal", None)
    if portal is None:
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, "Portal is not initialised")
    return portal


# ------------------------------------------------------------
# Get current logged-in user from JWT
# ------------------------------------------------------------
async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    portal: Portal = Depends(get_portal),
) -> User:

    try:
        payload = decode_token(credentials.credentials)
        user_id = int(payload.get("sub"))
    except (jwt.InvalidTokenError, TypeError, ValueError):
        raise HTTPException(401, "Could not validate credentials")

    user = portal.identity.get_user(user_id)

    # soft-deleted accounts lose their sessions
    if not user or user.is_deleted:
        raise HTTPException(401, "User not found")

    return user


# ------------------------------------------------------------
# Role-based access control (CASE-SAFE, enum-safe)
# ------------------------------------------------------------
def role_required(*allowed_roles: UserRole):
    """
    Enforces that the current user has one of the allowed roles.
    No Admin bypass: list UserRole.ADMIN explicitly when it applies.
    """

    def normalize_role(role):
        if isinstance(role, UserRole):
            return role.value.strip().lower()
        return str(role).strip().lower()

    normalized_allowed = set(normalize_role(r) for r in allowed_roles)

    async def checker(current_user: User = Depends(get_current_user)):
        if normalize_role(current_user.role) not in normalized_allowed:
            raise HTTPException(
                status_code=403,
                detail=f"Access denied for role '{current_user.role.value}'"
            )
        return current_user

    return checker


# ------------------------------------------------------------
# Exposed dependencies for routers
# ------------------------------------------------------------
require_admin = role_required(UserRole.ADMIN)


# ------------------------------------------------------------
# Shared checks used by several routers
# ------------------------------------------------------------
def raise_for_result(result: OperationResult) -> OperationResult:
    if not result.success:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, result.message)
    return result


def department_in_scope(portal: Portal, user: User, department_id: int) -> Department:
    """
    404 for unknown or deleted departments, 403 when the department is
    outside the caller's unit (HOD: own department, Dean: own faculty).
    """
    department = portal.directory.get_department(department_id)
    if not department or department.is_deleted:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Department not found")

    if user.role == UserRole.HOD and user.department_id != department.id:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Not authorized for this department")

    if user.role == UserRole.DEAN and user.faculty_id != department.faculty_id:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Not authorized for this faculty")

    return department


def faculty_in_scope(portal: Portal, user: User, faculty_id: Optional[int]) -> Optional[int]:
    """
    Resolve the faculty filter of a faculty-wide query.
    Deans are pinned to their own faculty; Admin may pass any (or none).
    """
    if user.role == UserRole.DEAN:
        if faculty_id is not None and faculty_id != user.faculty_id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "Not authorized for this faculty")
        return user.faculty_id

    if faculty_id is not None and not portal.directory.get_faculty(faculty_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Faculty not found")
    return faculty_id
