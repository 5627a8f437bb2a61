from typing import Dict, Optional

from pydantic import BaseModel, field_validator

from staffgap.models.enums import AcademicRank, EmploymentType, SubmissionStatus


class SubmissionUpsert(BaseModel):
    data: Dict[AcademicRank, Dict[EmploymentType, int]]
    status: SubmissionStatus
    # omitted -> keep previous notes; "" -> clear them
    notes: Optional[str] = None

    @field_validator("data")
    @classmethod
    def clamp_negative_counts(cls, value):
        return {
            rank: {emp_type: max(0, count) for emp_type, count in counts.items()}
            for rank, counts in value.items()
        }


class StatusUpdate(BaseModel):
    status: SubmissionStatus
    notes: Optional[str] = None
