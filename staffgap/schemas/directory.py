from pydantic import BaseModel


class FacultyCreate(BaseModel):
    name: str


class DepartmentCreate(BaseModel):
    name: str
    faculty_id: int
