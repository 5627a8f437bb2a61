from staffgap.models.enums import TicketStatus
from staffgap.models.user import UserRole


def test_empty_portal_uses_defaults(empty_portal):
    assert empty_portal.counts() == {"users": 0, "faculties": 0, "departments": 0, "submissions": 0}
    assert empty_portal.policy.requirements
    assert empty_portal.directory.add_faculty("Faculty of Arts").success is True
    assert empty_portal.directory.faculties[0].id == 1


def test_seeded_portal_counts(portal):
    assert portal.counts() == {"users": 18, "faculties": 2, "departments": 15, "submissions": 12}


def test_portals_are_isolated(portal, empty_portal):
    portal.directory.add_faculty("Faculty of Law")
    assert empty_portal.directory.faculties == []


# ------------------------------------------------------------
# Announcements
# ------------------------------------------------------------
def test_announcements_prepend_and_delete(portal):
    created = portal.announcements.add("Exam timetable", "Out now.", "Dr. Admin")
    assert created.id == 4
    assert portal.announcements.list_announcements()[0].id == 4
    assert len(portal.announcements.list_announcements(limit=2)) == 2

    assert portal.announcements.delete(4) is True
    assert portal.announcements.delete(4) is False
    assert portal.announcements.get(4) is None


# ------------------------------------------------------------
# Notifications
# ------------------------------------------------------------
def test_notifications_are_per_user_newest_first(portal):
    mine = portal.notifications.for_user(1)
    assert len(mine) == 5
    assert [n.timestamp for n in mine] == sorted((n.timestamp for n in mine), reverse=True)
    assert portal.notifications.unread_count(1) == 3


def test_mark_notifications_read(portal):
    first = portal.notifications.for_user(2)[0]
    assert portal.notifications.mark_as_read(first.id).is_read is True
    assert portal.notifications.mark_as_read(999) is None

    assert portal.notifications.mark_all_as_read(2) == 1
    assert portal.notifications.unread_count(2) == 0
    assert portal.notifications.mark_all_as_read(2) == 0


# ------------------------------------------------------------
# Audit history
# ------------------------------------------------------------
def test_audit_log_is_newest_first(portal):
    entry = portal.audit.log_activity("Dr. Admin", UserRole.ADMIN, "ADD_FACULTY", "Created new faculty: Law")
    assert entry.id == 9

    recent = portal.audit.recent(limit=2)
    assert recent[0].id == 9
    assert len(recent) == 2
    assert len(portal.audit.recent()) == 9


# ------------------------------------------------------------
# Support tickets
# ------------------------------------------------------------
def test_support_ticket_filters(portal):
    assert len(portal.support.list_tickets()) == 4
    assert len(portal.support.list_tickets(status=TicketStatus.Open)) == 2
    assert {t.id for t in portal.support.open_tickets()} == {1, 2, 4}


def test_support_ticket_status_update(portal):
    before = portal.support.get(1).last_updated_at

    ticket = portal.support.update_status(1, TicketStatus.Resolved)
    assert ticket.status == TicketStatus.Resolved
    assert ticket.last_updated_at > before
    assert portal.support.update_status(42, TicketStatus.Closed) is None
