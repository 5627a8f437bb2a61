# staffgap/services/identity_service.py

from typing import Iterable, Optional

from loguru import logger

from staffgap.core.config import settings
from staffgap.core.constants import DEAN_STAFF_ID_TEMPLATE, HOD_STAFF_ID_TEMPLATE
from staffgap.models.enums import UserRole
from staffgap.models.user import User
from staffgap.schemas.common import OperationResult


class IdentityStore:
    """
    Owns every portal account plus the cached copy of the logged-in user.

    Usernames are never recycled: a soft-deleted account still blocks its
    username. Assignment rules (one live HOD per department, one live Dean
    per faculty) only look at non-deleted accounts.
    """

    def __init__(self, users: Iterable[User] = (), verify_old_password: Optional[bool] = None):
        self._users: list[User] = [u.model_copy(deep=True) for u in users]
        self.current_user: Optional[User] = None
        self.verify_old_password = (
            settings.VERIFY_OLD_PASSWORD if verify_old_password is None else verify_old_password
        )

    # ============================================================================
    # LOOKUPS
    # ============================================================================
    @property
    def users(self) -> list[User]:
        return list(self._users)

    def list_users(self, include_deleted: bool = True) -> list[User]:
        if include_deleted:
            return list(self._users)
        return [u for u in self._users if not u.is_deleted]

    def get_user(self, user_id: int) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def find_hod(self, department_id: int) -> Optional[User]:
        return next(
            (
                u for u in self._users
                if u.role == UserRole.HOD and u.department_id == department_id and not u.is_deleted
            ),
            None,
        )

    def find_dean(self, faculty_id: int) -> Optional[User]:
        return next(
            (
                u for u in self._users
                if u.role == UserRole.DEAN and u.faculty_id == faculty_id and not u.is_deleted
            ),
            None,
        )

    def _next_id(self) -> int:
        return max((u.id for u in self._users), default=0) + 1

    # ============================================================================
    # SESSION
    # ============================================================================
    def login(self, username: str, password: str) -> Optional[User]:
        # Password is not checked: this store is a mock of the real directory.
        user = next(
            (u for u in self._users if u.username == username and not u.is_deleted),
            None,
        )
        if not user:
            logger.warning(f"Login rejected for username '{username}'")
            return None

        self.current_user = user.model_copy()
        logger.info(f"User {user.id} ({user.role.value}) logged in")
        return user

    def logout(self) -> None:
        self.current_user = None

    # ============================================================================
    # REGISTRATION
    # ============================================================================
    def register_hod(self, name: str, username: str, password: str, department_id: int) -> OperationResult:
        if self.get_user_by_username(username):
            return OperationResult.fail("Username (email) already exists.")

        if self.find_hod(department_id):
            logger.warning(f"Department {department_id} already has an HOD")
            return OperationResult.fail("That department already has an HOD assigned.")

        hod = User(
            id=self._next_id(),
            username=username,
            password=password,
            role=UserRole.HOD,
            name=name,
            department_id=department_id,
            staff_id=HOD_STAFF_ID_TEMPLATE.format(suffix=str(department_id)[-3:]),
            is_deleted=False,
        )
        self._users.append(hod)
        logger.info(f"Registered HOD {hod.id} for department {department_id}")
        return OperationResult.ok("HOD registered successfully!")

    def register_dean(self, name: str, username: str, password: str, faculty_id: int) -> OperationResult:
        if self.get_user_by_username(username):
            return OperationResult.fail("Username (email) already exists.")

        if self.find_dean(faculty_id):
            logger.warning(f"Faculty {faculty_id} already has a Dean")
            return OperationResult.fail("That faculty already has a Dean assigned.")

        dean = User(
            id=self._next_id(),
            username=username,
            password=password,
            role=UserRole.DEAN,
            name=name,
            faculty_id=faculty_id,
            staff_id=DEAN_STAFF_ID_TEMPLATE.format(suffix=str(faculty_id)[-3:]),
            is_deleted=False,
        )
        self._users.append(dean)
        logger.info(f"Registered Dean {dean.id} for faculty {faculty_id}")
        return OperationResult.ok("Dean registered successfully!")

    # ============================================================================
    # SOFT DELETE / RESTORE (no cascade)
    # ============================================================================
    def delete_user(self, user_id: int) -> None:
        self._set_deleted(user_id, True)

    def restore_user(self, user_id: int) -> None:
        self._set_deleted(user_id, False)

    def _set_deleted(self, user_id: int, deleted: bool) -> None:
        user = self.get_user(user_id)
        if user:
            user.is_deleted = deleted
            logger.info(f"User {user_id} {'deleted' if deleted else 'restored'}")

    # ============================================================================
    # PROFILE
    # ============================================================================
    def update_user_profile(
        self,
        user_id: int,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        profile_picture_url: Optional[str] = None,
    ) -> Optional[User]:
        user = self.get_user(user_id)
        if not user:
            return None

        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("phone", phone),
                ("profile_picture_url", profile_picture_url),
            )
            if value is not None
        }
        for key, value in changes.items():
            setattr(user, key, value)

        # keep the cached session copy in step with the stored account
        if self.current_user and self.current_user.id == user_id:
            for key, value in changes.items():
                setattr(self.current_user, key, value)

        return user

    def change_password(self, user_id: int, old_password: str, new_password: str) -> bool:
        user = self.get_user(user_id)
        if not user:
            return False

        if self.verify_old_password and user.password != old_password:
            logger.warning(f"Password change rejected for user {user_id}: old password mismatch")
            return False

        user.password = new_password
        return True
