"""
school_access.services.students

Student lifecycle service.

Responsibilities:
- List all users (teachers only).
- Return the caller's own profile.
- Create student accounts (teachers only), with validation and an atomic
  uniqueness check on username.
"""

from __future__ import annotations

from school_access.auth.models import Principal, Role
from school_access.auth.passwords import PasswordHasher, default_hasher
from school_access.auth.policy import Action, ActionRequest, ensure_allowed
from school_access.directory.base import DuplicateUsernameError, UserDirectory, UserRecord
from school_access.errors import Unauthenticated, ValidationError
from school_access.observability.logging import get_logger
from school_access.services.views import StudentProfile

log = get_logger(__name__)


class StudentService:
    def __init__(self, directory: UserDirectory, hasher: PasswordHasher = default_hasher) -> None:
        self._directory = directory
        self._hasher = hasher

    async def list_students(self, principal: Principal | None) -> list[StudentProfile]:
        ensure_allowed(principal, ActionRequest(action=Action.list_students))
        records = await self._directory.list_all()
        return [StudentProfile.of(r) for r in records]

    async def get_own_profile(self, principal: Principal | None) -> StudentProfile:
        if principal is None:
            raise Unauthenticated()
        ensure_allowed(principal, ActionRequest.on_self(Action.read_own_profile, principal))

        record = await self._directory.find_by_username(principal.username)
        if record is None:
            # The account vanished after the credentials were checked.
            raise Unauthenticated()
        return StudentProfile.of(record)

    async def create_student(
        self,
        principal: Principal | None,
        *,
        username: str,
        password: str,
        name: str,
    ) -> StudentProfile:
        """
        Create a STUDENT account.

        Raises:
            Unauthenticated: no principal.
            PermissionDenied: caller is not a teacher (same client-error class
                as validation failures).
            ValidationError: empty username, or username already taken.
        """
        ensure_allowed(principal, ActionRequest(action=Action.create_student))

        if not username or not username.strip():
            raise ValidationError("Username must not be empty")

        record = UserRecord(
            username=username,
            password_hash=self._hasher.hash(password),
            name=name,
            role=Role.student,
        )
        try:
            created = await self._directory.insert_unique(record)
        except DuplicateUsernameError as e:
            raise ValidationError(str(e)) from e

        log.info("student_created", student=created.username)
        return StudentProfile.of(created)


# --- Module Notes -----------------------------------------------------------
# Uniqueness is decided by `insert_unique`, not by a pre-read, so two concurrent
# creators of the same username get exactly one success.
