# staffgap/core/portal.py

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from loguru import logger

from staffgap.models.announcement import Announcement
from staffgap.models.audit import HistoryLog
from staffgap.models.department import Department
from staffgap.models.enums import AcademicRank, UserRole
from staffgap.models.faculty import Faculty
from staffgap.models.notification import Notification
from staffgap.models.submission import Submission
from staffgap.models.support import SupportTicket
from staffgap.models.user import User
from staffgap.services.announcement_service import AnnouncementStore
from staffgap.services.audit_service import AuditStore
from staffgap.services.directory_service import DirectoryStore
from staffgap.services.identity_service import IdentityStore
from staffgap.services.notification_service import NotificationStore
from staffgap.services.policy_service import PolicyStore
from staffgap.services.submission_service import SubmissionStore
from staffgap.services.support_service import SupportStore


@dataclass
class PortalSeed:
    users: List[User] = field(default_factory=list)
    faculties: List[Faculty] = field(default_factory=list)
    departments: List[Department] = field(default_factory=list)
    submissions: List[Submission] = field(default_factory=list)
    announcements: List[Announcement] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)
    history_logs: List[HistoryLog] = field(default_factory=list)
    support_tickets: List[SupportTicket] = field(default_factory=list)

    # None -> defaults from staffgap.core.constants
    requirements: Optional[Mapping[AcademicRank, int]] = None
    permissions: Optional[Mapping[str, Mapping[UserRole, bool]]] = None


@dataclass
class Portal:
    """Every store of one portal session. Built once per app (or per test)."""

    identity: IdentityStore
    directory: DirectoryStore
    submissions: SubmissionStore
    policy: PolicyStore
    announcements: AnnouncementStore
    notifications: NotificationStore
    audit: AuditStore
    support: SupportStore

    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.identity.users),
            "faculties": len(self.directory.faculties),
            "departments": len(self.directory.departments),
            "submissions": len(self.submissions.submissions),
        }


def init_portal(seed: Optional[PortalSeed] = None) -> Portal:
    seed = seed or PortalSeed()

    portal = Portal(
        identity=IdentityStore(seed.users),
        directory=DirectoryStore(seed.faculties, seed.departments),
        submissions=SubmissionStore(seed.submissions),
        policy=PolicyStore(seed.requirements, seed.permissions),
        announcements=AnnouncementStore(seed.announcements),
        notifications=NotificationStore(seed.notifications),
        audit=AuditStore(seed.history_logs),
        support=SupportStore(seed.support_tickets),
    )
    logger.debug(f"Portal initialised: {portal.counts()}")
    return portal
