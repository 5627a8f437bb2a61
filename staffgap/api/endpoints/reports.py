# staffgap/api/endpoints/reports.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from staffgap.api.deps import faculty_in_scope, get_portal
from staffgap.core.portal import Portal
from staffgap.core.rbac import RequireFeature
from staffgap.models.user import User
from staffgap.schemas.analytics import Report
from staffgap.services.report_service import gap_analysis_report, summary_report

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("/gap-analysis", response_model=Report)
async def gap_analysis(
    academic_year: Optional[str] = Query(None),
    faculty_id: Optional[int] = Query(None),
    current_user: User = Depends(RequireFeature("facultyReports")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)

    return gap_analysis_report(
        portal.submissions.submissions,
        portal.directory.list_departments(),
        portal.policy.requirements,
        academic_year or portal.submissions.default_academic_year,
        faculty_id=faculty_id,
    )


@router.get("/summary", response_model=Report)
async def summary(
    academic_year: Optional[str] = Query(None),
    faculty_id: Optional[int] = Query(None),
    current_user: User = Depends(RequireFeature("facultyReports")),
    portal: Portal = Depends(get_portal),
):
    faculty_id = faculty_in_scope(portal, current_user, faculty_id)

    return summary_report(
        portal.submissions.submissions,
        portal.directory.list_departments(),
        portal.directory.list_faculties(include_deleted=True),
        academic_year or portal.submissions.default_academic_year,
        faculty_id=faculty_id,
    )
