from sqlmodel import SQLModel, Field


class Department(SQLModel):
    id: int
    name: str = Field(description="Unique (case-insensitive) per faculty among non-deleted departments")

    # a department never moves to another faculty
    faculty_id: int
    is_deleted: bool = False
