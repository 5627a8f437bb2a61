# staffgap/api/endpoints/users.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from staffgap.api.deps import get_portal, raise_for_result, require_admin
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.user import User, UserRole
from staffgap.schemas.auth import RegisterDeanRequest, RegisterHodRequest
from staffgap.schemas.common import OperationResult
from staffgap.schemas.user import UserRead

router = APIRouter(prefix="/api/users", tags=["Users"])


# -------------------------------------------------------------------
# List users (Admin sees everyone, Dean sees the HODs of their faculty)
# -------------------------------------------------------------------
@router.get("/", response_model=List[UserRead])
async def list_users(
    include_deleted: bool = Query(True),
    current_user: User = Depends(RequireFeature("manageStructure")),
    portal: Portal = Depends(get_portal),
):
    users = portal.identity.list_users(include_deleted=include_deleted)
    if current_user.role == UserRole.ADMIN:
        return users

    faculty_departments = {d.id for d in portal.directory.list_departments(faculty_id=current_user.faculty_id)}
    return [u for u in users if u.role == UserRole.HOD and u.department_id in faculty_departments]


# -------------------------------------------------------------------
# Register an HOD (Admin, or the Dean of the department's faculty)
# -------------------------------------------------------------------
@router.post("/hods", response_model=OperationResult, status_code=status.HTTP_201_CREATED)
async def register_hod(
    data: RegisterHodRequest,
    current_user: User = Depends(RequireFeature("manageStructure")),
    portal: Portal = Depends(get_portal),
):
    department = portal.directory.get_department(data.department_id)
    if not department or department.is_deleted:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Department not found")

    if current_user.role == UserRole.DEAN and department.faculty_id != current_user.faculty_id:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Not authorized for this faculty")

    result = raise_for_result(
        portal.identity.register_hod(data.name, data.username, data.password, data.department_id)
    )
    portal.audit.log_activity(
        current_user.name, current_user.role, "CREATE_USER",
        f"Registered new HOD: {data.name} for {department.name}",
    )
    return result


# -------------------------------------------------------------------
# Register a Dean (Admin only)
# -------------------------------------------------------------------
@router.post("/deans", response_model=OperationResult, status_code=status.HTTP_201_CREATED)
async def register_dean(
    data: RegisterDeanRequest,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    faculty = portal.directory.get_faculty(data.faculty_id)
    if not faculty or faculty.is_deleted:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Faculty not found")

    result = raise_for_result(
        portal.identity.register_dean(data.name, data.username, data.password, data.faculty_id)
    )
    portal.audit.log_activity(
        current_user.name, current_user.role, "CREATE_USER",
        f"Registered new dean: {data.name} for {faculty.name}",
    )
    return result


# -------------------------------------------------------------------
# Soft delete / restore (Admin only)
# -------------------------------------------------------------------
@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    user = portal.identity.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if user.id == current_user.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")

    portal.identity.delete_user(user_id)
    portal.audit.log_activity(current_user.name, current_user.role, "DELETE_USER", f"Deleted user: {user.name}")
    return {"detail": "User deleted successfully"}


@router.post("/{user_id}/restore", response_model=UserRead)
async def restore_user(
    user_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    user = portal.identity.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    portal.identity.restore_user(user_id)
    portal.audit.log_activity(current_user.name, current_user.role, "RESTORE_USER", f"Restored user: {user.name}")
    return user
