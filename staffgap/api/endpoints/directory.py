# staffgap/api/endpoints/directory.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from staffgap.api.deps import get_current_user, get_portal, raise_for_result, require_admin
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.department import Department
from staffgap.models.faculty import Faculty
from staffgap.models.user import User, UserRole
from staffgap.schemas.common import OperationResult
from staffgap.schemas.directory import DepartmentCreate, FacultyCreate

router = APIRouter(prefix="/api", tags=["Faculties & Departments"])


# ===================================================================
# FACULTIES
# ===================================================================
@router.get("/faculties", response_model=List[Faculty])
async def list_faculties(
    include_deleted: bool = Query(False),
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return portal.directory.list_faculties(include_deleted=include_deleted)


@router.post("/faculties", response_model=OperationResult, status_code=status.HTTP_201_CREATED)
async def create_faculty(
    data: FacultyCreate,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    result = raise_for_result(portal.directory.add_faculty(data.name))
    portal.audit.log_activity(current_user.name, current_user.role, "CREATE_FACULTY", f"Added new faculty: {data.name.strip()}")
    return result


@router.delete("/faculties/{faculty_id}")
async def delete_faculty(
    faculty_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    faculty = portal.directory.get_faculty(faculty_id)
    if not faculty:
        raise HTTPException(status_code=404, detail="Faculty not found")

    portal.directory.delete_faculty(faculty_id)
    portal.audit.log_activity(current_user.name, current_user.role, "DELETE_FACULTY", f"Deleted faculty: {faculty.name}")
    return {"detail": "Faculty and its departments deleted"}


@router.post("/faculties/{faculty_id}/restore", response_model=Faculty)
async def restore_faculty(
    faculty_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    faculty = portal.directory.get_faculty(faculty_id)
    if not faculty:
        raise HTTPException(status_code=404, detail="Faculty not found")

    portal.directory.restore_faculty(faculty_id)
    portal.audit.log_activity(current_user.name, current_user.role, "RESTORE_FACULTY", f"Restored faculty: {faculty.name}")
    return faculty


# ===================================================================
# DEPARTMENTS
# ===================================================================
@router.get("/departments", response_model=List[Department])
async def list_departments(
    faculty_id: Optional[int] = Query(None),
    include_deleted: bool = Query(False),
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    return portal.directory.list_departments(faculty_id=faculty_id, include_deleted=include_deleted)


@router.post("/departments", response_model=OperationResult, status_code=status.HTTP_201_CREATED)
async def create_department(
    data: DepartmentCreate,
    current_user: User = Depends(RequireFeature("manageStructure")),
    portal: Portal = Depends(get_portal),
):
    faculty = portal.directory.get_faculty(data.faculty_id)
    if not faculty or faculty.is_deleted:
        raise HTTPException(status_code=404, detail="Faculty not found")

    if current_user.role == UserRole.DEAN and current_user.faculty_id != data.faculty_id:
        raise HTTPException(status_code=403, detail="Not authorized for this faculty")

    result = raise_for_result(portal.directory.add_department(data.name, data.faculty_id))
    portal.audit.log_activity(
        current_user.name, current_user.role, "CREATE_DEPARTMENT",
        f"Added new department: {data.name.strip()} to {faculty.name}",
    )
    return result


@router.delete("/departments/{department_id}")
async def delete_department(
    department_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    department = portal.directory.get_department(department_id)
    if not department:
        raise HTTPException(status_code=404, detail="Department not found")

    portal.directory.delete_department(department_id)
    portal.audit.log_activity(current_user.name, current_user.role, "DELETE_DEPARTMENT", f"Deleted department: {department.name}")
    return {"detail": "Department deleted"}


@router.post("/departments/{department_id}/restore", response_model=Department)
async def restore_department(
    department_id: int,
    current_user: User = Depends(require_admin),
    portal: Portal = Depends(get_portal),
):
    department = portal.directory.get_department(department_id)
    if not department:
        raise HTTPException(status_code=404, detail="Department not found")

    portal.directory.restore_department(department_id)
    portal.audit.log_activity(current_user.name, current_user.role, "RESTORE_DEPARTMENT", f"Restored department: {department.name}")
    return department
