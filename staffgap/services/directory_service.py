# staffgap/services/directory_service.py

from typing import Iterable, Optional

from loguru import logger

from staffgap.models.department import Department
from staffgap.models.faculty import Faculty
from staffgap.schemas.common import OperationResult


class DirectoryStore:
    """
    Faculties and their departments.

    Cascade rules: deleting a faculty soft-deletes all of its departments and
    restoring a faculty restores all of them, including departments that had
    been deleted on their own before the faculty was.
    """

    def __init__(self, faculties: Iterable[Faculty] = (), departments: Iterable[Department] = ()):
        self._faculties: list[Faculty] = [f.model_copy() for f in faculties]
        self._departments: list[Department] = [d.model_copy() for d in departments]

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------
    @property
    def faculties(self) -> list[Faculty]:
        return list(self._faculties)

    @property
    def departments(self) -> list[Department]:
        return list(self._departments)

    def list_faculties(self, include_deleted: bool = False) -> list[Faculty]:
        return [f for f in self._faculties if include_deleted or not f.is_deleted]

    def list_departments(self, faculty_id: Optional[int] = None, include_deleted: bool = False) -> list[Department]:
        return [
            d for d in self._departments
            if (faculty_id is None or d.faculty_id == faculty_id)
            and (include_deleted or not d.is_deleted)
        ]

    def get_faculty(self, faculty_id: int) -> Optional[Faculty]:
        return next((f for f in self._faculties if f.id == faculty_id), None)

    def get_department(self, department_id: int) -> Optional[Department]:
        return next((d for d in self._departments if d.id == department_id), None)

    # ------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------
    def add_faculty(self, name: str) -> OperationResult:
        clean = name.strip()
        if not clean:
            return OperationResult.fail("Faculty name cannot be empty.")

        if any(f.name.lower() == clean.lower() and not f.is_deleted for f in self._faculties):
            logger.warning(f"Duplicate faculty name rejected: {clean}")
            return OperationResult.fail("A faculty with this name already exists.")

        faculty = Faculty(
            id=max((f.id for f in self._faculties), default=0) + 1,
            name=clean,
            is_deleted=False,
        )
        self._faculties.append(faculty)
        logger.info(f"Faculty {faculty.id} created: {clean}")
        return OperationResult.ok("Faculty added successfully!")

    def add_department(self, name: str, faculty_id: int) -> OperationResult:
        clean = name.strip()
        if not clean:
            return OperationResult.fail("Department name cannot be empty.")

        if any(
            d.name.lower() == clean.lower() and d.faculty_id == faculty_id and not d.is_deleted
            for d in self._departments
        ):
            logger.warning(f"Duplicate department name rejected in faculty {faculty_id}: {clean}")
            return OperationResult.fail("A department with this name already exists in this faculty.")

        department = Department(
            id=max((d.id for d in self._departments), default=0) + 1,
            name=clean,
            faculty_id=faculty_id,
            is_deleted=False,
        )
        self._departments.append(department)
        logger.info(f"Department {department.id} created in faculty {faculty_id}: {clean}")
        return OperationResult.ok("Department added successfully!")

    # ------------------------------------------------------------
    # Soft delete / restore
    # ------------------------------------------------------------
    def delete_faculty(self, faculty_id: int) -> None:
        self._set_faculty_deleted(faculty_id, True)

    def restore_faculty(self, faculty_id: int) -> None:
        self._set_faculty_deleted(faculty_id, False)

    def _set_faculty_deleted(self, faculty_id: int, deleted: bool) -> None:
        for faculty in self._faculties:
            if faculty.id == faculty_id:
                faculty.is_deleted = deleted

        cascaded = 0
        for department in self._departments:
            if department.faculty_id == faculty_id:
                department.is_deleted = deleted
                cascaded += 1

        logger.info(
            f"Faculty {faculty_id} {'deleted' if deleted else 'restored'} "
            f"({cascaded} departments cascaded)"
        )

    def delete_department(self, department_id: int) -> None:
        self._set_department_deleted(department_id, True)

    def restore_department(self, department_id: int) -> None:
        self._set_department_deleted(department_id, False)

    def _set_department_deleted(self, department_id: int, deleted: bool) -> None:
        department = self.get_department(department_id)
        if department:
            department.is_deleted = deleted
