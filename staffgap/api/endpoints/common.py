# staffgap/api/endpoints/common.py

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from staffgap.core.constants import ACADEMIC_RANKS, CONTROLLABLE_FEATURES, EMPLOYMENT_TYPES
from staffgap.models.enums import AcademicRank, EmploymentType, SubmissionStatus, UserRole

router = APIRouter(
    prefix="/api/common",
    tags=["Common / Metadata"]
)

# ----------------------------------------------------------
# SCHEMAS (Simple Data for Dropdowns)
# ----------------------------------------------------------
class FeatureOption(BaseModel):
    key: str
    name: str
    description: str
    applies_to: List[UserRole]


# ----------------------------------------------------------
# 1. ACADEMIC RANKS (canonical order)
# ----------------------------------------------------------
@router.get("/ranks", response_model=List[AcademicRank])
async def get_ranks():
    return ACADEMIC_RANKS


# ----------------------------------------------------------
# 2. EMPLOYMENT TYPES
# ----------------------------------------------------------
@router.get("/employment-types", response_model=List[EmploymentType])
async def get_employment_types():
    return EMPLOYMENT_TYPES


# ----------------------------------------------------------
# 3. SUBMISSION STATUSES
# ----------------------------------------------------------
@router.get("/statuses", response_model=List[SubmissionStatus])
async def get_statuses():
    return list(SubmissionStatus)


# ----------------------------------------------------------
# 4. CONTROLLABLE FEATURES
# ----------------------------------------------------------
@router.get("/features", response_model=List[FeatureOption])
async def get_features():
    return [FeatureOption(**feature) for feature in CONTROLLABLE_FEATURES]
