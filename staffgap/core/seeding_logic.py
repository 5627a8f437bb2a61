from datetime import datetime, timedelta
from typing import Optional

from loguru import logger

from staffgap.core.portal import PortalSeed
from staffgap.models.announcement import Announcement
from staffgap.models.audit import HistoryLog
from staffgap.models.department import Department
from staffgap.models.enums import (
    AcademicRank as R,
    EmploymentType as E,
    SubmissionStatus as S,
    TicketCategory,
    TicketPriority,
    TicketStatus,
    UserRole,
)
from staffgap.models.faculty import Faculty
from staffgap.models.notification import Notification
from staffgap.models.submission import Submission, utc_now
from staffgap.models.support import SupportTicket
from staffgap.models.user import User

# ----------------------------------------------------------------
# 1. DEFINE STATIC DATA
# ----------------------------------------------------------------

FACULTIES_DATA = [
    {"id": 1, "name": "Faculty of Management"},
    {"id": 2, "name": "Faculty of Science"},
]

# Map Departments to their Parent Faculty id
DEPARTMENTS_DATA = {
    1: [
        (101, "Accounting"),
        (102, "Business Administration"),
        (103, "Economics"),
        (104, "Mass Communication"),
        (105, "Political Science"),
        (106, "Sociology"),
        (107, "Public Administration"),
        (108, "Marketing"),
    ],
    2: [
        (201, "Computer Science"),
        (202, "Physics"),
        (203, "Biochemistry"),
        (204, "Biology"),
        (205, "Chemistry"),
        (206, "Mathematics"),
        (207, "Statistics"),
    ],
}

DEMO_PASSWORD = "password"
DEMO_PHONE = "08012345678"

STAFF_DATA = [
    {"id": 1, "username": "admin", "role": UserRole.ADMIN, "name": "Dr. Admin"},
    {"id": 2, "username": "dean", "role": UserRole.DEAN, "name": "Bukar Mallam", "faculty_id": 1,
     "profile_picture_url": "https://i.pravatar.cc/150?u=dean_management"},
    {"id": 3, "username": "dean.sci", "role": UserRole.DEAN, "name": "Prof. Musa Garba", "faculty_id": 2,
     "profile_picture_url": "https://i.pravatar.cc/150?u=dean_science"},
]

# (user/department id, username, name, staff id code)
HOD_DATA = [
    (101, "hod", "Dr. Bala Mohammed", "ACC"),
    (102, "hod.bus", "Dr. Fatima Ali", "BUS"),
    (103, "hod.eco", "Dr. Ibrahim Yusuf", "ECO"),
    (104, "hod.mcom", "Dr. Hadiza Bello", "MCOM"),
    (105, "hod.psc", "Prof. Sani Ahmed", "PSC"),
    (106, "hod.soc", "Dr. Maryam Isa", "SOC"),
    (107, "hod.pub", "Dr. Aisha Aliyu", "PUB"),
    (108, "hod.mkt", "Mr. David Okon", "MKT"),
    (201, "hod.csc", "Dr. Amina Sani", "CSC"),
    (202, "hod.phy", "Prof. Emeka Okafor", "PHY"),
    (203, "hod.bch", "Dr. Femi Adebayo", "BCH"),
    (204, "hod.bio", "Prof. Helen Eze", "BIO"),
    (205, "hod.che", "Dr. Chinedu Obi", "CHE"),
    (206, "hod.mat", "Dr. Fatima Umar", "MAT"),
    (207, "hod.stat", "Dr. Lanre Bakare", "STAT"),
]

# ages are hours before "now"
SUBMISSIONS_DATA = [
    {"department_id": 101, "status": S.Approved, "age": 48, "academic_year": "2023-2024",
     "data": {R.Professor: {E.Permanent: 1, E.Visiting: 1}, R.SeniorLecturer: {E.Permanent: 2},
              R.LecturerI: {E.Permanent: 3}, R.LecturerII: {E.Permanent: 2},
              R.AssistantLecturer: {E.Permanent: 4}},
     "notes": "Good to go."},
    {"department_id": 102, "status": S.Pending, "age": 8,
     "data": {R.Reader: {E.Permanent: 1}, R.SeniorLecturer: {E.Permanent: 1, E.Sabbatical: 1},
              R.LecturerI: {E.Permanent: 5}, R.GraduateAssistant: {E.Permanent: 2}}},
    {"department_id": 103, "status": S.Approved, "age": 192,
     "data": {R.LecturerI: {E.Permanent: 1}}, "notes": "Approved."},
    {"department_id": 104, "status": S.NeedsCorrection, "age": 72,
     "data": {R.LecturerI: {E.Permanent: 5}},
     "notes": "Data seems incomplete. Please review and resubmit."},
    {"department_id": 105, "status": S.Approved, "age": 120,
     "data": {R.Professor: {E.Permanent: 2}}},
    {"department_id": 107, "status": S.Pending, "age": 24,
     "data": {R.Reader: {E.Permanent: 2}, R.SeniorLecturer: {E.Permanent: 3}}},
    {"department_id": 201, "status": S.Approved, "age": 0,
     "data": {R.Professor: {E.Permanent: 2}, R.SeniorLecturer: {E.Permanent: 4},
              R.LecturerI: {E.Permanent: 6}},
     "notes": "Approved."},
    {"department_id": 202, "status": S.Pending, "age": 10,
     "data": {R.Professor: {E.Sabbatical: 1}}},
    {"department_id": 203, "status": S.Approved, "age": 96,
     "data": {R.SeniorLecturer: {E.Permanent: 3}, R.LecturerII: {E.Permanent: 5}}},
    {"department_id": 204, "status": S.NeedsCorrection, "age": 48,
     "data": {R.LecturerI: {E.Visiting: 10}},
     "notes": "Number of visiting lecturers seems high. Please verify."},
    {"department_id": 205, "status": S.Approved, "age": 144,
     "data": {R.Reader: {E.Permanent: 1}, R.AssistantLecturer: {E.Permanent: 4}}},
    {"department_id": 206, "status": S.Pending, "age": 0,
     "data": {R.Professor: {E.Permanent: 1}, R.LecturerI: {E.Permanent: 3}}},
]

HISTORY_DATA = [
    ("Dr. Admin", UserRole.ADMIN, "CREATE_USER", "Registered new dean: Prof. Musa Garba for Faculty of Science", 1),
    ("Bukar Mallam", UserRole.DEAN, "APPROVE_SUBMISSION", "Approved submission for Accounting", 3),
    ("Dr. Bala Mohammed", UserRole.HOD, "SUBMIT_DATA", "Submitted staff data for Accounting", 5),
    ("Dr. Admin", UserRole.ADMIN, "ADD_FACULTY", "Created new faculty: Faculty of Arts", 24),
    ("Bukar Mallam", UserRole.DEAN, "REJECT_SUBMISSION", "Requested corrections for Mass Communication submission", 48),
    ("Dr. Admin", UserRole.ADMIN, "ADD_DEPARTMENT", "Created new department: History (Faculty of Arts)", 72),
    ("Dr. Hadiza Bello", UserRole.HOD, "UPDATE_DRAFT", "Saved draft for Mass Communication", 96),
    ("Dr. Admin", UserRole.ADMIN, "CREATE_USER", "Registered new HOD: Dr. John Doe for History", 120),
]

TICKETS_DATA = [
    {"subject": "Cannot login to portal", "requester_name": "Dr. Fatima Ali", "requester_role": UserRole.HOD,
     "requester_department": "Business Administration", "category": TicketCategory.Technical,
     "priority": TicketPriority.High, "status": TicketStatus.Open, "age": 1, "updated_age": 1,
     "description": "My credentials for the gap analysis portal are not working. I have tried resetting "
                    "the password but did not receive an email. Please assist."},
    {"subject": "Question about NUC requirements", "requester_name": "Prof. Musa Garba",
     "requester_role": UserRole.DEAN, "requester_department": "Faculty of Science",
     "category": TicketCategory.Academic, "priority": TicketPriority.Medium,
     "status": TicketStatus.InProgress, "age": 5, "updated_age": 2,
     "description": "Are the NUC requirements for Professors based on permanent staff only or do "
                    "visiting professors count towards the total?"},
    {"subject": "Staff ID Card Request", "requester_name": "Dr. Amina Sani", "requester_role": UserRole.HOD,
     "requester_department": "Computer Science", "category": TicketCategory.Administrative,
     "priority": TicketPriority.Low, "status": TicketStatus.Resolved, "age": 48, "updated_age": 24,
     "description": "A new lecturer has joined our department and requires a staff ID card. "
                    "I have attached the necessary forms."},
    {"subject": "Error when submitting data", "requester_name": "Dr. Hadiza Bello",
     "requester_role": UserRole.HOD, "requester_department": "Mass Communication",
     "category": TicketCategory.Technical, "priority": TicketPriority.Urgent,
     "status": TicketStatus.Open, "age": 0.5, "updated_age": 0.5,
     "description": "The system is showing a \"500 Internal Server Error\" whenever I try to submit my "
                    "department's data. This is holding up our review process."},
]

# (user id, title, message, hours ago, is_read, link)
NOTIFICATIONS_DATA = [
    (101, "Submission Needs Correction",
     "Your submission for the 2024-2025 academic year was sent back for correction by the Dean.",
     1, False, "My Submissions"),
    (101, "Reminder: Update Data",
     "Please remember to update your department's staffing data for the new quarter.",
     48, True, "Dashboard"),
    (2, "New Submission Pending",
     "The Department of Business Administration has submitted their staffing data for your review.",
     2, False, "Review Submissions"),
    (2, "New HOD Registered",
     "Dr. Aisha Aliyu has been registered as the HOD for Public Administration.",
     72, False, "Dashboard"),
    (2, "Faculty Report Generated",
     "The annual report for the Faculty of Management is ready for download.",
     120, True, "Faculty Reports"),
    (1, "New Dean Registered",
     "Prof. Musa Garba has been registered as the new Dean for the Faculty of Science.",
     24, False, "Staff Management"),
    (1, "High Priority Ticket",
     "A new high priority support ticket has been opened by Dr. Hadiza Bello.",
     0.5, False, "Support Center"),
    (1, "System Update Scheduled",
     "A system update is scheduled for this Sunday at 2 AM. Expect brief downtime.",
     96, True, "Announcements"),
    (1, "Database Backup Complete", "The weekly database backup completed successfully.",
     6, True, "System History"),
    (1, "New Support Ticket", "A new support ticket has been received.", 1, False, "Support Center"),
]

ANNOUNCEMENTS_DATA = [
    ("System Maintenance Scheduled",
     "The portal will be down for scheduled maintenance on Saturday from 2:00 AM to 4:00 AM. "
     "We apologize for any inconvenience.", 24, "Admin Office"),
    ("Reminder: Academic Year Submissions",
     "All Heads of Department are reminded to complete their staff submissions for the 2024-2025 "
     "academic year by the end of the month.", 72, "VC Office"),
    ("Welcome to the New Employment Gap Analysis System",
     "We are pleased to launch the new system. Please familiarize yourself with the features and "
     "report any issues to the support center.", 240, "Admin Office"),
]


# ----------------------------------------------------------------
# 2. BUILD THE SEED
# ----------------------------------------------------------------
def build_demo_seed(now: Optional[datetime] = None, default_academic_year: str = "2024-2025") -> PortalSeed:
    now = now or utc_now()

    def ago(hours: float) -> datetime:
        return now - timedelta(hours=hours)

    faculties = [Faculty(**row) for row in FACULTIES_DATA]
    departments = [
        Department(id=dept_id, name=name, faculty_id=faculty_id)
        for faculty_id, rows in DEPARTMENTS_DATA.items()
        for dept_id, name in rows
    ]

    users = [User(password=DEMO_PASSWORD, phone=DEMO_PHONE, **row) for row in STAFF_DATA]
    users += [
        User(
            id=dept_id,
            username=username,
            password=DEMO_PASSWORD,
            role=UserRole.HOD,
            name=name,
            department_id=dept_id,
            staff_id=f"BOSU/HOD/{code}/001",
            phone=DEMO_PHONE,
        )
        for dept_id, username, name, code in HOD_DATA
    ]

    submissions = [
        Submission(
            department_id=row["department_id"],
            data=row["data"],
            status=row["status"],
            last_updated=ago(row["age"]),
            notes=row.get("notes"),
            academic_year=row.get("academic_year", default_academic_year),
        )
        for row in SUBMISSIONS_DATA
    ]

    history_logs = [
        HistoryLog(id=i, user=user, role=role, action=action, details=details, timestamp=ago(hours))
        for i, (user, role, action, details, hours) in enumerate(HISTORY_DATA, start=1)
    ]

    tickets = []
    for i, row in enumerate(TICKETS_DATA, start=1):
        row = dict(row)
        created, updated = ago(row.pop("age")), ago(row.pop("updated_age"))
        tickets.append(SupportTicket(id=i, created_at=created, last_updated_at=updated, **row))

    notifications = [
        Notification(
            id=i, user_id=user_id, title=title, message=message,
            timestamp=ago(hours), is_read=is_read, link=link,
        )
        for i, (user_id, title, message, hours, is_read, link) in enumerate(NOTIFICATIONS_DATA, start=1)
    ]

    announcements = [
        Announcement(id=i, title=title, content=content, timestamp=ago(hours), author_name=author)
        for i, (title, content, hours, author) in enumerate(ANNOUNCEMENTS_DATA, start=1)
    ]

    logger.debug(
        f"Demo seed built: {len(faculties)} faculties, {len(departments)} departments, "
        f"{len(users)} users, {len(submissions)} submissions"
    )
    return PortalSeed(
        users=users,
        faculties=faculties,
        departments=departments,
        submissions=submissions,
        announcements=announcements,
        notifications=notifications,
        history_logs=history_logs,
        support_tickets=tickets,
    )
