from typing import Optional

from pydantic import BaseModel

from staffgap.models.enums import UserRole


class Contact(BaseModel):
    faculty_id: int
    name: str
    role: UserRole
    # account behind the office; None while the post is vacant
    user_id: Optional[int] = None
    person: str
    is_available: bool
