# staffgap/services/submission_service.py

from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional

from loguru import logger

from staffgap.core.config import settings
from staffgap.models.enums import AcademicRank, EmploymentType, SubmissionStatus
from staffgap.models.submission import DepartmentStaffing, Submission, utc_now


def normalize_staffing(data: Mapping) -> DepartmentStaffing:
    """Coerce rank/type keys to enums and clamp counts at zero."""
    return {
        AcademicRank(rank): {
            EmploymentType(emp_type): max(0, int(count or 0))
            for emp_type, count in (counts or {}).items()
        }
        for rank, counts in data.items()
    }


class SubmissionStore:
    """
    Append-only list of staffing submissions.

    "The submission for a department" is the entry with the greatest
    last_updated among that department's entries; ties go to the entry
    appended last. Historical entries are never removed.
    """

    def __init__(
        self,
        submissions: Iterable[Submission] = (),
        default_academic_year: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._submissions: list[Submission] = [s.model_copy(deep=True) for s in submissions]
        self.default_academic_year = default_academic_year or settings.DEFAULT_ACADEMIC_YEAR
        self._clock = clock

    @property
    def submissions(self) -> list[Submission]:
        return list(self._submissions)

    # ============================================================================
    # READS
    # ============================================================================
    def _latest_index(self, department_id: int) -> Optional[int]:
        latest = None
        for index, submission in enumerate(self._submissions):
            if submission.department_id != department_id:
                continue
            # >= so the later list position wins a timestamp tie
            if latest is None or submission.last_updated >= self._submissions[latest].last_updated:
                latest = index
        return latest

    def get_latest_for_department(self, department_id: int) -> Optional[Submission]:
        index = self._latest_index(department_id)
        return None if index is None else self._submissions[index]

    def latest_by_department(self) -> dict[int, Submission]:
        latest: dict[int, Submission] = {}
        for submission in self._submissions:
            current = latest.get(submission.department_id)
            if current is None or submission.last_updated >= current.last_updated:
                latest[submission.department_id] = submission
        return latest

    def history_for_department(self, department_id: int) -> list[Submission]:
        entries = [s for s in self._submissions if s.department_id == department_id]
        return sorted(entries, key=lambda s: s.last_updated, reverse=True)

    def list_submissions(
        self,
        department_ids: Optional[Iterable[int]] = None,
        status: Optional[SubmissionStatus] = None,
        academic_year: Optional[str] = None,
    ) -> list[Submission]:
        scope = set(department_ids) if department_ids is not None else None
        return [
            s for s in self._submissions
            if (scope is None or s.department_id in scope)
            and (status is None or s.status == status)
            and (academic_year is None or s.academic_year == academic_year)
        ]

    # ============================================================================
    # WRITES
    # ============================================================================
    def upsert(
        self,
        department_id: int,
        data: Mapping,
        status: SubmissionStatus,
        notes: Optional[str] = None,
    ) -> Submission:
        """
        Replace the department's current data and status, or start its first
        submission. ``notes=None`` keeps the previous notes; pass ``""`` to
        clear them.
        """
        staffing = normalize_staffing(data)
        status = SubmissionStatus(status)
        index = self._latest_index(department_id)

        if index is not None:
            submission = self._submissions[index]
            submission.data = staffing
            submission.status = status
            submission.last_updated = self._clock()
            if notes is not None:
                submission.notes = notes
            logger.info(f"Submission for department {department_id} updated -> {status.value}")
            return submission

        submission = Submission(
            department_id=department_id,
            data=staffing,
            status=status,
            last_updated=self._clock(),
            notes=notes,
            academic_year=self.default_academic_year,
        )
        self._submissions.append(submission)
        logger.info(f"Submission for department {department_id} created -> {status.value}")
        return submission

    def set_status(
        self,
        department_id: int,
        status: SubmissionStatus,
        notes: Optional[str] = None,
    ) -> Optional[Submission]:
        """Status-only update of the current entry. Returns None (and creates nothing) if there is none."""
        index = self._latest_index(department_id)
        if index is None:
            logger.warning(f"Status update ignored: department {department_id} has no submission")
            return None

        submission = self._submissions[index]
        submission.status = SubmissionStatus(status)
        submission.last_updated = self._clock()
        if notes is not None:
            submission.notes = notes

        logger.info(f"Submission for department {department_id} set to {submission.status.value}")
        return submission
