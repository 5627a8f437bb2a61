from typing import Optional
from pydantic import BaseModel, ConfigDict
from staffgap.models.enums import UserRole


# ---------------------------------------------------------
# READ USER (response, never carries the password)
# ---------------------------------------------------------
class UserRead(BaseModel):
    id: int
    username: str
    name: str
    role: UserRole
    faculty_id: Optional[int] = None
    department_id: Optional[int] = None
    staff_id: Optional[str] = None
    is_deleted: bool = False
    profile_picture_url: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------
# UPDATE OWN PROFILE (partial)
# ---------------------------------------------------------
class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    profile_picture_url: Optional[str] = None
