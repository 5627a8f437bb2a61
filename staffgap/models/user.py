# staffgap/models/user.py

from sqlmodel import SQLModel, Field
from typing import Optional

from staffgap.models.enums import UserRole


class User(SQLModel):
    id: int
    username: str = Field(description="Login key, globally unique and never recycled")

    # plaintext on purpose: this portal is an in-memory mock
    password: str

    role: UserRole
    name: str

    # Dean only
    faculty_id: Optional[int] = None
    # HOD only
    department_id: Optional[int] = None

    staff_id: Optional[str] = None
    is_deleted: bool = False
    profile_picture_url: Optional[str] = None
    phone: Optional[str] = None
