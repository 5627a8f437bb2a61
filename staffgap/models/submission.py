# staffgap/models/submission.py

from datetime import datetime, timezone
from typing import Dict, Optional

from sqlmodel import SQLModel, Field

from staffgap.models.enums import AcademicRank, EmploymentType, SubmissionStatus

StaffCount = Dict[EmploymentType, int]
DepartmentStaffing = Dict[AcademicRank, StaffCount]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Submission(SQLModel):
    department_id: int
    data: DepartmentStaffing = Field(default_factory=dict)
    status: SubmissionStatus = SubmissionStatus.Draft
    last_updated: datetime = Field(default_factory=utc_now)
    notes: Optional[str] = None
    academic_year: str
