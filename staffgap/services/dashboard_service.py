# staffgap/services/dashboard_service.py
"""
One dashboard for every role.

The caller's scope (which departments they can see) comes from their role
and assignment; which sections are filled in comes from the permission
table, so an Admin toggling a feature off for Deans removes that section
from every Dean dashboard without any role-specific code path.
"""

from loguru import logger

from staffgap.core.portal import Portal
from staffgap.models.department import Department
from staffgap.models.enums import SubmissionStatus, UserRole
from staffgap.models.user import User
from staffgap.schemas.dashboard import DashboardView
from staffgap.services.gap_service import compute_gap, performance_scores, submission_stats

RECENT_ANNOUNCEMENTS = 3
RECENT_HISTORY = 5


def resolve_scope(portal: Portal, user: User) -> list[Department]:
    directory = portal.directory

    if user.role == UserRole.ADMIN:
        return directory.list_departments()

    if user.role == UserRole.DEAN:
        if user.faculty_id is None:
            return []
        return directory.list_departments(faculty_id=user.faculty_id)

    department = directory.get_department(user.department_id) if user.department_id else None
    if department is None or department.is_deleted:
        return []
    return [department]


def build_dashboard(portal: Portal, user: User) -> DashboardView:
    policy = portal.policy
    scope = resolve_scope(portal, user)
    scope_ids = [d.id for d in scope]

    latest_all = portal.submissions.latest_by_department()
    latest = {dept_id: latest_all[dept_id] for dept_id in scope_ids if dept_id in latest_all}

    view = DashboardView(
        role=user.role,
        scope_department_ids=scope_ids,
        features=policy.allowed_features(user.role),
        unread_notifications=portal.notifications.unread_count(user.id),
    )

    if policy.is_allowed(user.role, "dashboard"):
        view.stats = submission_stats(latest.values())
        view.announcements = portal.announcements.list_announcements(limit=RECENT_ANNOUNCEMENTS)

    # department-level view: only meaningful with a single department in scope
    if user.role == UserRole.HOD and scope_ids:
        department_id = scope_ids[0]
        if policy.is_allowed(user.role, "dataSubmission") or policy.is_allowed(user.role, "submissionHistory"):
            view.current_submission = latest.get(department_id)
        if policy.is_allowed(user.role, "departmentAnalytics"):
            view.gap = compute_gap(latest.get(department_id), policy.requirements)

    if policy.is_allowed(user.role, "reviewSubmissions"):
        view.pending_reviews = sorted(
            (s for s in latest.values() if s.status == SubmissionStatus.Pending),
            key=lambda s: s.last_updated,
            reverse=True,
        )

    if policy.is_allowed(user.role, "facultyAnalytics"):
        if user.role == UserRole.ADMIN:
            faculties = portal.directory.list_faculties()
        else:
            faculties = [f for f in portal.directory.list_faculties() if f.id == user.faculty_id]
        view.scores = performance_scores(faculties, scope, latest, policy.requirements)

    if user.role == UserRole.ADMIN:
        view.recent_history = portal.audit.recent(limit=RECENT_HISTORY)

    logger.debug(f"Dashboard built for user {user.id} ({user.role.value}) over {len(scope_ids)} departments")
    return view
