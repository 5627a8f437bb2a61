from staffgap.core.constants import CONTROLLABLE_FEATURES
from staffgap.models.enums import AcademicRank as R
from staffgap.models.user import UserRole
from staffgap.services.policy_service import PolicyStore


def test_default_requirements():
    assert PolicyStore().requirements == {R.Professor: 2, R.SeniorLecturer: 4, R.LecturerI: 6}


def test_update_requirements_replaces_table():
    policy = PolicyStore()
    result = policy.update_requirements({"Reader": 3, R.Professor: 1})
    assert result.success is True
    assert policy.requirements == {R.Reader: 3, R.Professor: 1}


def test_update_requirements_rejects_negative_and_unknown():
    policy = PolicyStore()
    assert policy.update_requirements({R.Professor: -1}).success is False
    assert policy.update_requirements({"Chancellor": 1}).success is False
    assert policy.requirements[R.Professor] == 2


def test_requirements_property_is_a_copy():
    policy = PolicyStore()
    policy.requirements[R.Professor] = 99
    assert policy.requirements[R.Professor] == 2


def test_default_permissions():
    policy = PolicyStore()
    assert len(policy.permissions) == len(CONTROLLABLE_FEATURES) == 10

    assert policy.is_allowed(UserRole.HOD, "dataSubmission") is True
    assert policy.is_allowed(UserRole.DEAN, "dataSubmission") is False
    assert policy.is_allowed(UserRole.DEAN, "reviewSubmissions") is True
    assert policy.is_allowed(UserRole.HOD, "reviewSubmissions") is False


def test_admin_is_always_allowed_and_unknown_features_denied():
    policy = PolicyStore()
    assert policy.is_allowed(UserRole.ADMIN, "anything") is True
    assert policy.is_allowed(UserRole.HOD, "launchRockets") is False


def test_set_permission_only_for_applicable_roles():
    policy = PolicyStore()

    result = policy.set_permission("dataSubmission", UserRole.HOD, False)
    assert result.success is True
    assert policy.is_allowed(UserRole.HOD, "dataSubmission") is False
    assert "dataSubmission" not in policy.allowed_features(UserRole.HOD)

    assert policy.set_permission("dataSubmission", UserRole.DEAN, True).success is False
    assert policy.set_permission("nope", UserRole.DEAN, True).success is False


def test_stores_do_not_share_permission_tables():
    first, second = PolicyStore(), PolicyStore()
    first.set_permission("settings", UserRole.DEAN, False)
    assert second.is_allowed(UserRole.DEAN, "settings") is True
