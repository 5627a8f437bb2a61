# staffgap/services/report_service.py

from typing import Iterable, Mapping, Optional

from staffgap.models.department import Department
from staffgap.models.enums import AcademicRank, SubmissionStatus
from staffgap.models.faculty import Faculty
from staffgap.models.submission import Submission
from staffgap.schemas.analytics import Report
from staffgap.services.gap_service import aggregate_gap, total_staff

GAP_REPORT_HEADERS = ["Academic Rank", "Required (NUC)", "Actual Staff", "Gap"]
SUMMARY_REPORT_HEADERS = ["Faculty", "Department", "Total Staff", "Status"]


def _scoped_departments(departments: Iterable[Department], faculty_id: Optional[int]) -> list[Department]:
    return [
        d for d in departments
        if not d.is_deleted and (faculty_id is None or d.faculty_id == faculty_id)
    ]


def gap_analysis_report(
    submissions: Iterable[Submission],
    departments: Iterable[Department],
    requirements: Mapping[AcademicRank, int],
    academic_year: str,
    faculty_id: Optional[int] = None,
) -> Report:
    """Required vs approved headcount per rank for one academic year."""
    scope = {d.id for d in _scoped_departments(departments, faculty_id)}
    in_scope = [s for s in submissions if s.department_id in scope]

    rows = [
        [row.rank.value, row.required, row.current, row.gap]
        for row in aggregate_gap(in_scope, requirements, academic_year)
    ]
    return Report(
        title=f"Gap Analysis Report for {academic_year}",
        headers=GAP_REPORT_HEADERS,
        rows=rows,
        faculty_id=faculty_id,
    )


def summary_report(
    submissions: Iterable[Submission],
    departments: Iterable[Department],
    faculties: Iterable[Faculty],
    academic_year: str,
    faculty_id: Optional[int] = None,
) -> Report:
    """One row per live department with its latest submission of the year."""
    faculty_names = {f.id: f.name for f in faculties}

    latest: dict[int, Submission] = {}
    for submission in submissions:
        if submission.academic_year != academic_year:
            continue
        current = latest.get(submission.department_id)
        if current is None or submission.last_updated >= current.last_updated:
            latest[submission.department_id] = submission

    rows = []
    for department in _scoped_departments(departments, faculty_id):
        submission = latest.get(department.id)
        status = submission.status if submission else SubmissionStatus.NotSubmitted
        rows.append([
            faculty_names.get(department.faculty_id, "N/A"),
            department.name,
            total_staff(submission),
            status.value,
        ])

    return Report(
        title=f"University Staff Summary for {academic_year}",
        headers=SUMMARY_REPORT_HEADERS,
        rows=rows,
        faculty_id=faculty_id,
    )
