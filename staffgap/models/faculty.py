from sqlmodel import SQLModel, Field


class Faculty(SQLModel):
    id: int
    name: str = Field(description="Unique (case-insensitive) among non-deleted faculties")
    is_deleted: bool = False
