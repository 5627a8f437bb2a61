from typing import List, Optional, Union

from pydantic import BaseModel

from staffgap.models.enums import AcademicRank, EmploymentType


# --- GAP ---
class RankGap(BaseModel):
    rank: AcademicRank
    required: int
    current: int
    gap: int
    percent_gap: float


# --- SCORES ---
class ScoreEntry(BaseModel):
    id: int
    name: str
    score: float


class PerformanceScores(BaseModel):
    departments: List[ScoreEntry]
    faculties: List[ScoreEntry]


# --- AGGREGATES ---
class TypeTotal(BaseModel):
    name: EmploymentType
    value: int


class FacultyStaffTotal(BaseModel):
    id: int
    name: str
    staff: int


class SubmissionStats(BaseModel):
    total: int
    approved: int
    pending: int
    corrections: int


# --- REPORTS ---
class Report(BaseModel):
    title: str
    headers: List[str]
    rows: List[List[Union[str, int]]]
    faculty_id: Optional[int] = None


# --- RANK-BUCKET SUMMARY ---
class BucketGap(BaseModel):
    bucket: str
    label: str
    required: int
    current: int
    gap: int
    percent_gap: float


class DepartmentBucketSummary(BaseModel):
    id: int
    name: str
    buckets: List[BucketGap]


class FacultyBucketSummary(BaseModel):
    id: int
    name: str
    departments: List[DepartmentBucketSummary]
