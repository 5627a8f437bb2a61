from typing import Dict

from pydantic import BaseModel

from staffgap.models.enums import AcademicRank, UserRole


class RequirementsUpdate(BaseModel):
    requirements: Dict[AcademicRank, int]


class PermissionUpdate(BaseModel):
    feature: str
    role: UserRole
    enabled: bool


class FeatureRead(BaseModel):
    key: str
    name: str
    description: str
    applies_to: list[UserRole]
    hod: bool
    dean: bool
