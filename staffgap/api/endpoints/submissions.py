# staffgap/api/endpoints/submissions.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from staffgap.api.deps import department_in_scope, get_current_user, get_portal
from staffgap.core.constants import DEAN_REVIEW_STATUSES, HOD_WRITABLE_STATUSES
from staffgap.core.portal import Portal
from staffgap.core.rbac import AllowRoles
from staffgap.models.enums import SubmissionStatus
from staffgap.models.submission import Submission
from staffgap.models.user import User, UserRole
from staffgap.schemas.submission import StatusUpdate, SubmissionUpsert
from staffgap.services.dashboard_service import resolve_scope

router = APIRouter(prefix="/api/submissions", tags=["Submissions"])


def _ensure_feature(portal: Portal, user: User, feature: str) -> None:
    if not portal.policy.is_allowed(user.role, feature):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access denied for role '{user.role.value}'"
        )


# -------------------------------------------------------------------
# LIST (scoped to the caller's departments)
# -------------------------------------------------------------------
@router.get("/", response_model=List[Submission])
async def list_submissions(
    status_filter: Optional[SubmissionStatus] = Query(None, alias="status"),
    academic_year: Optional[str] = Query(None),
    latest_only: bool = Query(False),
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    scope_ids = [d.id for d in resolve_scope(portal, current_user)]

    if latest_only:
        latest = portal.submissions.latest_by_department()
        rows = [latest[i] for i in scope_ids if i in latest]
        return [
            s for s in rows
            if (status_filter is None or s.status == status_filter)
            and (academic_year is None or s.academic_year == academic_year)
        ]

    return portal.submissions.list_submissions(
        department_ids=scope_ids,
        status=status_filter,
        academic_year=academic_year,
    )


# -------------------------------------------------------------------
# CURRENT SUBMISSION OF ONE DEPARTMENT
# -------------------------------------------------------------------
@router.get("/departments/{department_id}/latest", response_model=Submission)
async def get_latest(
    department_id: int,
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    department_in_scope(portal, current_user, department_id)

    submission = portal.submissions.get_latest_for_department(department_id)
    if not submission:
        raise HTTPException(status_code=404, detail="No submission for this department")
    return submission


# -------------------------------------------------------------------
# HISTORY OF ONE DEPARTMENT (newest first)
# -------------------------------------------------------------------
@router.get("/departments/{department_id}/history", response_model=List[Submission])
async def get_history(
    department_id: int,
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    department_in_scope(portal, current_user, department_id)
    if current_user.role == UserRole.HOD:
        _ensure_feature(portal, current_user, "submissionHistory")

    return portal.submissions.history_for_department(department_id)


# -------------------------------------------------------------------
# HOD SAVE / SUBMIT (Admin may overwrite anything)
# -------------------------------------------------------------------
@router.put("/departments/{department_id}", response_model=Submission)
async def upsert_submission(
    department_id: int,
    data: SubmissionUpsert,
    current_user: User = Depends(AllowRoles(UserRole.HOD)),
    portal: Portal = Depends(get_portal),
):
    department = department_in_scope(portal, current_user, department_id)

    if current_user.role == UserRole.HOD:
        _ensure_feature(portal, current_user, "dataSubmission")
        if data.status not in HOD_WRITABLE_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"HOD cannot set status '{data.status.value}'"
            )

    submission = portal.submissions.upsert(department_id, data.data, data.status, data.notes)

    action = "SUBMIT_DATA" if data.status == SubmissionStatus.Pending else "SAVE_DRAFT"
    portal.audit.log_activity(
        current_user.name, current_user.role, action,
        f"{data.status.value} submission for {department.name}",
    )
    return submission


# -------------------------------------------------------------------
# DEAN REVIEW (approve / request correction / reopen)
# -------------------------------------------------------------------
@router.post("/departments/{department_id}/status", response_model=Submission)
async def update_status(
    department_id: int,
    data: StatusUpdate,
    current_user: User = Depends(AllowRoles(UserRole.DEAN)),
    portal: Portal = Depends(get_portal),
):
    department = department_in_scope(portal, current_user, department_id)

    if current_user.role == UserRole.DEAN:
        _ensure_feature(portal, current_user, "reviewSubmissions")
        if data.status not in DEAN_REVIEW_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Dean cannot set status '{data.status.value}'"
            )

    submission = portal.submissions.set_status(department_id, data.status, data.notes)
    if not submission:
        raise HTTPException(status_code=404, detail="No submission for this department")

    portal.audit.log_activity(
        current_user.name, current_user.role, "REVIEW_SUBMISSION",
        f"Set {department.name} submission to {data.status.value}",
    )
    logger.info(f"{current_user.role.value} {current_user.id} reviewed department {department_id}")
    return submission
