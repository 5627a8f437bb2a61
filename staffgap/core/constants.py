# staffgap/core/constants.py

from staffgap.models.enums import (
    AcademicRank,
    EmploymentType,
    SubmissionStatus,
    UserRole,
)

# ==========================================================
# CANONICAL ORDERINGS
# ==========================================================
ACADEMIC_RANKS = list(AcademicRank)
EMPLOYMENT_TYPES = list(EmploymentType)

# ==========================================================
# NUC MINIMUM HEADCOUNT PER RANK (editable by Admin at runtime)
# ==========================================================
NUC_REQUIREMENTS = {
    AcademicRank.Professor: 2,
    AcademicRank.SeniorLecturer: 4,
    AcademicRank.LecturerI: 6,
}

# ==========================================================
# RANK BUCKETS OF THE NUC ACADEMIC STAFF SUMMARY
# ==========================================================
# Lecturer I is not part of any bucket in the summary table.
RANK_BUCKETS = [
    {
        "key": "profReader",
        "label": "Professor / Reader",
        "ranks": [AcademicRank.Professor, AcademicRank.Reader],
        "required": 2,
    },
    {
        "key": "seniorLecturer",
        "label": "Senior Lecturer",
        "ranks": [AcademicRank.SeniorLecturer],
        "required": 4,
    },
    {
        "key": "lecturerIIBelow",
        "label": "Lecturer II and below",
        "ranks": [AcademicRank.LecturerII, AcademicRank.AssistantLecturer, AcademicRank.GraduateAssistant],
        "required": 8,
    },
]

# ==========================================================
# DASHBOARD SCORING
# ==========================================================
STATUS_SCORES = {
    SubmissionStatus.Approved: 100,
    SubmissionStatus.Pending: 50,
}

# ==========================================================
# STAFF ID TEMPLATES FOR NEWLY REGISTERED ACCOUNTS
# ==========================================================
STAFF_ID_PREFIX = "BOSU"
HOD_STAFF_ID_TEMPLATE = STAFF_ID_PREFIX + "/HOD/NEW/{suffix}"
DEAN_STAFF_ID_TEMPLATE = STAFF_ID_PREFIX + "/DEAN/NEW/{suffix}"

# ==========================================================
# ROLE PERMISSIONS
# ==========================================================
# Features an Admin can switch on/off per role. Admin itself is never gated.
CONTROLLABLE_FEATURES = [
    {
        "key": "dashboard",
        "name": "View Dashboard",
        "description": "Access the main dashboard view with stats and summaries.",
        "applies_to": [UserRole.HOD, UserRole.DEAN],
    },
    {
        "key": "dataSubmission",
        "name": "Submit Staffing Data",
        "description": "Allows creating, editing, and submitting departmental staffing data.",
        "applies_to": [UserRole.HOD],
    },
    {
        "key": "submissionHistory",
        "name": "View Submission History",
        "description": "Access to view past submissions for their department.",
        "applies_to": [UserRole.HOD],
    },
    {
        "key": "departmentAnalytics",
        "name": "View Department Analytics",
        "description": "Access to view analytics specific to their department.",
        "applies_to": [UserRole.HOD],
    },
    {
        "key": "reviewSubmissions",
        "name": "Review Submissions",
        "description": "Allows approving or rejecting submissions from HODs within the faculty.",
        "applies_to": [UserRole.DEAN],
    },
    {
        "key": "facultyAnalytics",
        "name": "View Faculty Analytics",
        "description": "Access to view analytics for the entire faculty.",
        "applies_to": [UserRole.DEAN],
    },
    {
        "key": "facultyReports",
        "name": "Generate Faculty Reports",
        "description": "Allows generating summary and gap analysis reports for the faculty.",
        "applies_to": [UserRole.DEAN],
    },
    {
        "key": "manageStructure",
        "name": "Manage Departments & HODs",
        "description": "Allows adding new departments and registering new HODs within the faculty.",
        "applies_to": [UserRole.DEAN],
    },
    {
        "key": "contactDirectory",
        "name": "Use Contact Directory",
        "description": "Access to the support/contact page to message other staff.",
        "applies_to": [UserRole.HOD, UserRole.DEAN],
    },
    {
        "key": "settings",
        "name": "Access Own Settings",
        "description": "Allows users to change their own profile information and password.",
        "applies_to": [UserRole.HOD, UserRole.DEAN],
    },
]

INITIAL_PERMISSIONS = {
    "dashboard": {UserRole.HOD: True, UserRole.DEAN: True},
    "dataSubmission": {UserRole.HOD: True, UserRole.DEAN: False},
    "submissionHistory": {UserRole.HOD: True, UserRole.DEAN: False},
    "departmentAnalytics": {UserRole.HOD: True, UserRole.DEAN: False},
    "reviewSubmissions": {UserRole.HOD: False, UserRole.DEAN: True},
    "facultyAnalytics": {UserRole.HOD: False, UserRole.DEAN: True},
    "facultyReports": {UserRole.HOD: False, UserRole.DEAN: True},
    "manageStructure": {UserRole.HOD: False, UserRole.DEAN: True},
    "contactDirectory": {UserRole.HOD: True, UserRole.DEAN: True},
    "settings": {UserRole.HOD: True, UserRole.DEAN: True},
}

# ==========================================================
# STATUS TRANSITIONS ALLOWED THROUGH THE API, PER ROLE
# ==========================================================
# The stores accept any explicit status; these sets only gate callers.
HOD_WRITABLE_STATUSES = {SubmissionStatus.Draft, SubmissionStatus.Pending}
DEAN_REVIEW_STATUSES = {
    SubmissionStatus.Approved,
    SubmissionStatus.NeedsCorrection,
    SubmissionStatus.Pending,
}
