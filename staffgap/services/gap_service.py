# staffgap/services/gap_service.py
"""
Staffing gap analysis.

Everything here is a pure function over submissions, directory entries and a
requirement table (rank -> minimum headcount). Per-submission gaps look at any
status; university/faculty aggregates use each department's newest Approved
entry, ignoring any later Draft or Pending edits.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from staffgap.core.config import settings
from staffgap.core.constants import ACADEMIC_RANKS, EMPLOYMENT_TYPES, RANK_BUCKETS, STATUS_SCORES
from staffgap.models.department import Department
from staffgap.models.enums import AcademicRank, SubmissionStatus
from staffgap.models.faculty import Faculty
from staffgap.models.submission import Submission
from staffgap.schemas.analytics import (
    BucketGap,
    DepartmentBucketSummary,
    FacultyBucketSummary,
    FacultyStaffTotal,
    PerformanceScores,
    RankGap,
    ScoreEntry,
    SubmissionStats,
    TypeTotal,
)

Requirements = Mapping[AcademicRank, int]


def _ordered_requirements(requirements: Requirements) -> Dict[AcademicRank, int]:
    table = {AcademicRank(rank): int(count) for rank, count in requirements.items()}
    return {rank: table[rank] for rank in ACADEMIC_RANKS if rank in table}


# ============================================================================
# PER-SUBMISSION
# ============================================================================
def rank_total(submission: Optional[Submission], rank: AcademicRank) -> int:
    if submission is None:
        return 0
    counts = submission.data.get(rank) or {}
    return sum(count or 0 for count in counts.values())


def total_staff(submission: Optional[Submission]) -> int:
    if submission is None:
        return 0
    return sum(rank_total(submission, rank) for rank in submission.data)


def _gap_row(rank: AcademicRank, required: int, current: int) -> RankGap:
    gap = max(0, required - current)
    percent = gap / required * 100 if required > 0 else 0.0
    return RankGap(rank=rank, required=required, current=current, gap=gap, percent_gap=percent)


def compute_gap(submission: Optional[Submission], requirements: Requirements) -> List[RankGap]:
    """One row per rank in the requirement table, in canonical rank order."""
    return [
        _gap_row(rank, required, rank_total(submission, rank))
        for rank, required in _ordered_requirements(requirements).items()
    ]


def nuc_compliance_ratio(submission: Optional[Submission], requirements: Requirements) -> float:
    if submission is None:
        return 0.0

    table = _ordered_requirements(requirements)
    if not table:
        return 1.0

    met = sum(1 for rank, required in table.items() if rank_total(submission, rank) >= required)
    return met / len(table)


def status_score(submission: Optional[Submission]) -> int:
    if submission is None:
        return 0
    return STATUS_SCORES.get(submission.status, 0)


def department_score(
    submission: Optional[Submission],
    requirements: Requirements,
    compliance_weight: Optional[float] = None,
    status_weight: Optional[float] = None,
) -> float:
    compliance_weight = settings.SCORE_COMPLIANCE_WEIGHT if compliance_weight is None else compliance_weight
    status_weight = settings.SCORE_STATUS_WEIGHT if status_weight is None else status_weight

    compliance = nuc_compliance_ratio(submission, requirements) * 100
    return compliance * compliance_weight + status_score(submission) * status_weight


# ============================================================================
# SCORES (dashboard ranking)
# ============================================================================
def faculty_score(
    faculty_id: int,
    departments: Iterable[Department],
    latest: Mapping[int, Submission],
    requirements: Requirements,
) -> float:
    faculty_departments = [d for d in departments if d.faculty_id == faculty_id and not d.is_deleted]
    if not faculty_departments:
        return 0.0

    submitted = sum(1 for d in faculty_departments if d.id in latest)
    coverage = submitted / len(faculty_departments) * 100

    scores = [department_score(latest.get(d.id), requirements) for d in faculty_departments]
    average = sum(scores) / len(scores)

    return coverage * settings.FACULTY_COVERAGE_WEIGHT + average * settings.FACULTY_DEPARTMENT_WEIGHT


def performance_scores(
    faculties: Iterable[Faculty],
    departments: Iterable[Department],
    latest: Mapping[int, Submission],
    requirements: Requirements,
    top_n: Optional[int] = None,
) -> PerformanceScores:
    top_n = settings.TOP_DEPARTMENTS_LIMIT if top_n is None else top_n
    departments = list(departments)

    department_entries = [
        ScoreEntry(id=d.id, name=d.name, score=department_score(latest.get(d.id), requirements))
        for d in departments
        if not d.is_deleted
    ]
    faculty_entries = [
        ScoreEntry(id=f.id, name=f.name, score=faculty_score(f.id, departments, latest, requirements))
        for f in faculties
        if not f.is_deleted
    ]

    department_entries.sort(key=lambda e: e.score, reverse=True)
    faculty_entries.sort(key=lambda e: e.score, reverse=True)

    return PerformanceScores(departments=department_entries[:top_n], faculties=faculty_entries)


# ============================================================================
# AGGREGATES (approved data only)
# ============================================================================
def latest_approved_by_department(
    submissions: Iterable[Submission],
    academic_year: Optional[str] = None,
) -> Dict[int, Submission]:
    """Newest Approved entry per department; later Drafts or Pendings do not hide it."""
    latest: Dict[int, Submission] = {}
    for submission in submissions:
        if submission.status != SubmissionStatus.Approved:
            continue
        if academic_year is not None and submission.academic_year != academic_year:
            continue
        current = latest.get(submission.department_id)
        if current is None or submission.last_updated >= current.last_updated:
            latest[submission.department_id] = submission
    return latest


def current_approved(submissions: Iterable[Submission], academic_year: Optional[str] = None) -> List[Submission]:
    return list(latest_approved_by_department(submissions, academic_year).values())


def aggregate_gap(
    submissions: Iterable[Submission],
    requirements: Requirements,
    academic_year: Optional[str] = None,
) -> List[RankGap]:
    """University (or scoped) gap across every rank; ranks without a requirement have required=0."""
    approved = current_approved(submissions, academic_year)
    table = _ordered_requirements(requirements)
    return [
        _gap_row(rank, table.get(rank, 0), sum(rank_total(s, rank) for s in approved))
        for rank in ACADEMIC_RANKS
    ]


def staff_by_type(submissions: Iterable[Submission], academic_year: Optional[str] = None) -> List[TypeTotal]:
    totals = {emp_type: 0 for emp_type in EMPLOYMENT_TYPES}
    for submission in current_approved(submissions, academic_year):
        for counts in submission.data.values():
            for emp_type, count in counts.items():
                totals[emp_type] += count or 0
    return [TypeTotal(name=t, value=v) for t, v in totals.items() if v > 0]


def staff_by_faculty(
    faculties: Iterable[Faculty],
    departments: Iterable[Department],
    submissions: Iterable[Submission],
    academic_year: Optional[str] = None,
) -> List[FacultyStaffTotal]:
    approved = current_approved(submissions, academic_year)
    departments = list(departments)

    rows = []
    for faculty in faculties:
        if faculty.is_deleted:
            continue
        department_ids = {d.id for d in departments if d.faculty_id == faculty.id and not d.is_deleted}
        staff = sum(total_staff(s) for s in approved if s.department_id in department_ids)
        rows.append(FacultyStaffTotal(id=faculty.id, name=faculty.name, staff=staff))
    return rows


# ============================================================================
# RANK-BUCKET SUMMARY (NUC academic staff summary table)
# ============================================================================
def _bucket_row(bucket: dict, submission: Optional[Submission]) -> BucketGap:
    required = bucket["required"]
    current = sum(rank_total(submission, rank) for rank in bucket["ranks"])
    gap = max(0, required - current)
    return BucketGap(
        bucket=bucket["key"],
        label=bucket["label"],
        required=required,
        current=current,
        gap=gap,
        percent_gap=gap / required * 100 if required > 0 else 0.0,
    )


def bucket_summary(
    faculties: Iterable[Faculty],
    departments: Iterable[Department],
    submissions: Iterable[Submission],
    academic_year: Optional[str] = None,
) -> List[FacultyBucketSummary]:
    """
    Per-department headcount against the bucketed NUC minimums
    (Professor + Reader, Senior Lecturer, Lecturer II and below), grouped by
    faculty. Uses each department's newest Approved entry; departments
    without one count as zero staff.
    """
    approved = latest_approved_by_department(submissions, academic_year)
    departments = [d for d in departments if not d.is_deleted]

    summary = []
    for faculty in faculties:
        if faculty.is_deleted:
            continue
        rows = [
            DepartmentBucketSummary(
                id=d.id,
                name=d.name,
                buckets=[_bucket_row(bucket, approved.get(d.id)) for bucket in RANK_BUCKETS],
            )
            for d in departments
            if d.faculty_id == faculty.id
        ]
        summary.append(FacultyBucketSummary(id=faculty.id, name=faculty.name, departments=rows))
    return summary


def submission_stats(submissions: Iterable[Submission]) -> SubmissionStats:
    submissions = list(submissions)
    return SubmissionStats(
        total=len(submissions),
        approved=sum(1 for s in submissions if s.status == SubmissionStatus.Approved),
        pending=sum(1 for s in submissions if s.status == SubmissionStatus.Pending),
        corrections=sum(1 for s in submissions if s.status == SubmissionStatus.NeedsCorrection),
    )
