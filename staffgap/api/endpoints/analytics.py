# staffgap/api/endpoints/analytics.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from staffgap.api.deps import department_in_scope, faculty_in_scope, get_current_user, get_portal
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.user import User, UserRole
from staffgap.schemas.analytics import (
    FacultyBucketSummary,
    FacultyStaffTotal,
    PerformanceScores,
    RankGap,
    TypeTotal,
)
from staffgap.services import gap_service

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


# -------------------------------------------------------------------
# DEPARTMENT GAP (current submission, any status)
# -------------------------------------------------------------------
@router.get("/departments/{department_id}/gap", response_model=List[RankGap])
async def department_gap(
    department_id: int,
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    department_in_scope(portal, current_user, department_id)

    feature = "departmentAnalytics" if current_user.role == UserRole.HOD else "facultyAnalytics"
    if not portal.policy.is_allowed(current_user.role, feature):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access denied for role '{current_user.role.value}'"
        )

    submission = portal.submissions.get_latest_for_department(department_id)
    return gap_service.compute_gap(submission, portal.policy.requirements)


# -------------------------------------------------------------------
# UNIVERSITY / FACULTY GAP (approved data only)
# -------------------------------------------------------------------
@router.get("/gap", response_model=List[RankGap])
async def aggregate_gap(
    faculty_id: Optional[int] = Query(None),
    academic_year: Optional[str] = Query(None),
    current_user: User = Depends(RequireFeature("facultyAnalytics")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)
    scope = {d.id for d in portal.directory.list_departments(faculty_id=faculty_id)}

    submissions = portal.submissions.list_submissions(department_ids=scope)
    return gap_service.aggregate_gap(submissions, portal.policy.requirements, academic_year)


# -------------------------------------------------------------------
# PERFORMANCE SCORES
# -------------------------------------------------------------------
@router.get("/scores", response_model=PerformanceScores)
async def scores(
    faculty_id: Optional[int] = Query(None),
    top: Optional[int] = Query(None, ge=1),
    current_user: User = Depends(RequireFeature("facultyAnalytics")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)

    faculties = [f for f in portal.directory.list_faculties() if faculty_id is None or f.id == faculty_id]
    departments = portal.directory.list_departments(faculty_id=faculty_id)

    return gap_service.performance_scores(
        faculties,
        departments,
        portal.submissions.latest_by_department(),
        portal.policy.requirements,
        top_n=top,
    )


# -------------------------------------------------------------------
# STAFF BREAKDOWNS (approved data only)
# -------------------------------------------------------------------
@router.get("/staff-by-type", response_model=List[TypeTotal])
async def staff_by_type(
    faculty_id: Optional[int] = Query(None),
    academic_year: Optional[str] = Query(None),
    current_user: User = Depends(RequireFeature("facultyAnalytics")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)
    scope = {d.id for d in portal.directory.list_departments(faculty_id=faculty_id)}

    return gap_service.staff_by_type(portal.submissions.list_submissions(department_ids=scope), academic_year)


@router.get("/staff-by-faculty", response_model=List[FacultyStaffTotal])
async def staff_by_faculty(
    academic_year: Optional[str] = Query(None),
    current_user: User = Depends(RequireFeature("facultyAnalytics")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, None)
    faculties = [f for f in portal.directory.list_faculties() if faculty_id is None or f.id == faculty_id]

    return gap_service.staff_by_faculty(
        faculties,
        portal.directory.list_departments(),
        portal.submissions.submissions,
        academic_year,
    )


# -------------------------------------------------------------------
# NUC ACADEMIC STAFF SUMMARY (rank buckets, approved data only)
# -------------------------------------------------------------------
@router.get("/bucket-summary", response_model=List[FacultyBucketSummary])
async def bucket_summary(
    faculty_id: Optional[int] = Query(None),
    academic_year: Optional[str] = Query(None),
    current_user: User = Depends(RequireFeature("facultyAnalytics")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)
    faculties = [f for f in portal.directory.list_faculties() if faculty_id is None or f.id == faculty_id]

    return gap_service.bucket_summary(
        faculties,
        portal.directory.list_departments(faculty_id=faculty_id),
        portal.submissions.submissions,
        academic_year,
    )
