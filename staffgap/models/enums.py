from enum import Enum


class UserRole(str, Enum):
    HOD = "HOD"
    DEAN = "DEAN"
    ADMIN = "ADMIN"


class AcademicRank(str, Enum):
    Professor = "Professor"
    Reader = "Reader"
    SeniorLecturer = "Senior Lecturer"
    LecturerI = "Lecturer I"
    LecturerII = "Lecturer II"
    AssistantLecturer = "Assistant Lecturer"
    GraduateAssistant = "Graduate Assistant"


class EmploymentType(str, Enum):
    Permanent = "Permanent"
    Sabbatical = "Sabbatical"
    Visiting = "Visiting"


class SubmissionStatus(str, Enum):
    Draft = "Draft"
    Pending = "Pending"
    Approved = "Approved"
    NeedsCorrection = "Needs Correction"
    NotSubmitted = "Not Submitted"


class TicketStatus(str, Enum):
    Open = "Open"
    InProgress = "In Progress"
    Resolved = "Resolved"
    Closed = "Closed"


class TicketPriority(str, Enum):
    Low = "Low"
    Medium = "Medium"
    High = "High"
    Urgent = "Urgent"


class TicketCategory(str, Enum):
    Technical = "Technical"
    Academic = "Academic"
    Administrative = "Administrative"
