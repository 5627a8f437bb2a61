# staffgap/services/contact_service.py
"""
Faculty contact directory: the Dean's office and the HOD of every live
department, each flagged as assigned or vacant.
"""

from typing import List, Optional

from staffgap.core.portal import Portal
from staffgap.models.faculty import Faculty
from staffgap.models.user import User, UserRole
from staffgap.schemas.contact import Contact

VACANT = "Not Assigned"


def _faculties_for(portal: Portal, user: User, faculty_id: Optional[int]) -> List[Faculty]:
    directory = portal.directory

    if user.role == UserRole.ADMIN:
        return [f for f in directory.list_faculties() if faculty_id is None or f.id == faculty_id]

    if user.role == UserRole.DEAN:
        own_faculty_id = user.faculty_id
    else:
        department = directory.get_department(user.department_id) if user.department_id else None
        own_faculty_id = department.faculty_id if department else None

    faculty = directory.get_faculty(own_faculty_id) if own_faculty_id is not None else None
    if faculty is None or faculty.is_deleted:
        return []
    return [faculty]


def contacts_for(portal: Portal, user: User, faculty_id: Optional[int] = None) -> List[Contact]:
    """
    HOD: their Dean's office and the other HODs of the faculty.
    Dean: every HOD of their faculty.
    Admin: Dean's office and HODs of every faculty (or just ``faculty_id``).
    """
    contacts = []
    for faculty in _faculties_for(portal, user, faculty_id):
        if not (user.role == UserRole.DEAN and user.faculty_id == faculty.id):
            dean = portal.identity.find_dean(faculty.id)
            contacts.append(Contact(
                faculty_id=faculty.id,
                name=f"Dean's Office, {faculty.name}",
                role=UserRole.DEAN,
                user_id=dean.id if dean else None,
                person=dean.name if dean else VACANT,
                is_available=dean is not None,
            ))

        for department in portal.directory.list_departments(faculty_id=faculty.id):
            if department.id == user.department_id:
                continue
            hod = portal.identity.find_hod(department.id)
            contacts.append(Contact(
                faculty_id=faculty.id,
                name=f"HOD, {department.name}",
                role=UserRole.HOD,
                user_id=hod.id if hod else None,
                person=hod.name if hod else VACANT,
                is_available=hod is not None,
            ))

    return contacts
