from datetime import datetime, timedelta, timezone

import pytest

from staffgap.models.enums import AcademicRank as R, EmploymentType as E, SubmissionStatus as S
from staffgap.models.submission import Submission
from staffgap.services.submission_service import SubmissionStore, normalize_staffing

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start=T0):
        self.now = start

    def __call__(self):
        self.now = self.now + timedelta(minutes=1)
        return self.now


@pytest.fixture
def store():
    return SubmissionStore(default_academic_year="2024-2025", clock=FakeClock())


def test_normalize_staffing_coerces_keys_and_clamps():
    data = normalize_staffing({"Professor": {"Permanent": -3, "Visiting": "2"}})
    assert data == {R.Professor: {E.Permanent: 0, E.Visiting: 2}}


def test_first_upsert_appends_with_default_year(store):
    submission = store.upsert(101, {R.Professor: {E.Permanent: 1}}, S.Draft)
    assert len(store.submissions) == 1
    assert submission.academic_year == "2024-2025"
    assert submission.status == S.Draft


def test_upsert_then_latest_returns_same_data_and_status(portal):
    data = {R.Professor: {E.Permanent: 3}, R.LecturerI: {E.Visiting: 2}}
    portal.submissions.upsert(106, data, S.Pending)

    latest = portal.submissions.get_latest_for_department(106)
    assert latest.data == data
    assert latest.status == S.Pending


def test_upsert_updates_existing_entry_in_place(portal):
    before = len(portal.submissions.submissions)
    portal.submissions.upsert(101, {R.Reader: {E.Permanent: 1}}, S.Pending)

    assert len(portal.submissions.submissions) == before
    latest = portal.submissions.get_latest_for_department(101)
    assert latest.data == {R.Reader: {E.Permanent: 1}}
    # year and notes are carried over
    assert latest.academic_year == "2023-2024"
    assert latest.notes == "Good to go."


def test_upsert_notes_empty_string_clears(portal):
    portal.submissions.upsert(101, {}, S.Draft, notes="")
    assert portal.submissions.get_latest_for_department(101).notes == ""


def test_upsert_advances_last_updated(store):
    first = store.upsert(101, {}, S.Draft).last_updated
    second = store.upsert(101, {}, S.Pending).last_updated
    assert second > first


def test_latest_picks_max_timestamp_and_later_index_on_tie():
    older = Submission(department_id=1, status=S.Approved, last_updated=T0, academic_year="2023-2024")
    newer = Submission(department_id=1, status=S.Pending, last_updated=T0 + timedelta(days=1), academic_year="2024-2025")
    tie = Submission(department_id=1, status=S.Draft, last_updated=T0 + timedelta(days=1), academic_year="2024-2025")

    assert SubmissionStore([newer, older]).get_latest_for_department(1).status == S.Pending
    assert SubmissionStore([older, newer, tie]).get_latest_for_department(1).status == S.Draft


def test_set_status_twice_is_idempotent(portal):
    portal.submissions.set_status(102, S.Approved, "Looks right")
    portal.submissions.set_status(102, S.Approved, "Looks right")

    latest = portal.submissions.get_latest_for_department(102)
    assert latest.status == S.Approved
    assert latest.notes == "Looks right"


def test_set_status_keeps_data_and_notes_when_omitted(portal):
    data = portal.submissions.get_latest_for_department(104).data
    portal.submissions.set_status(104, S.Pending)

    latest = portal.submissions.get_latest_for_department(104)
    assert latest.status == S.Pending
    assert latest.data == data
    assert latest.notes == "Data seems incomplete. Please review and resubmit."


def test_set_status_without_submission_creates_nothing(portal):
    before = len(portal.submissions.submissions)
    assert portal.submissions.set_status(106, S.Approved) is None
    assert len(portal.submissions.submissions) == before
    assert portal.submissions.get_latest_for_department(106) is None


def test_history_is_newest_first_and_never_pruned():
    entries = [
        Submission(department_id=5, last_updated=T0 + timedelta(days=d), academic_year=f"year-{d}")
        for d in (2, 0, 1)
    ]
    store = SubmissionStore(entries)
    assert [s.academic_year for s in store.history_for_department(5)] == ["year-2", "year-1", "year-0"]


def test_list_submissions_filters(portal):
    faculty_two = [201, 202, 203, 204, 205, 206, 207]
    approved = portal.submissions.list_submissions(department_ids=faculty_two, status=S.Approved)
    assert {s.department_id for s in approved} == {201, 203, 205}

    last_year = portal.submissions.list_submissions(academic_year="2023-2024")
    assert [s.department_id for s in last_year] == [101]


def test_store_copies_seed_entries():
    seed = [Submission(department_id=1, academic_year="2024-2025")]
    store = SubmissionStore(seed, clock=FakeClock())
    store.set_status(1, S.Pending)
    assert seed[0].status == S.Draft
