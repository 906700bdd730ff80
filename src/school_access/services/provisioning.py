"""
school_access.services.provisioning

Account provisioning outside the request path (seeding teachers, fixtures).

Responsibilities:
- Create a user of any role without an authorization check.
- Seed the bootstrap teacher from settings on startup.
"""

from __future__ import annotations

from school_access.auth.models import Role
from school_access.auth.passwords import PasswordHasher, default_hasher
from school_access.directory.base import DuplicateUsernameError, UserDirectory, UserRecord
from school_access.errors import ValidationError
from school_access.observability.logging import get_logger
from school_access.settings import Settings

log = get_logger(__name__)


async def provision_user(
    directory: UserDirectory,
    *,
    username: str,
    password: str,
    name: str,
    role: Role,
    hasher: PasswordHasher = default_hasher,
) -> UserRecord:
    if not username:
        raise ValidationError("Username must not be empty")
    record = UserRecord(
        username=username,
        password_hash=hasher.hash(password),
        name=name,
        role=role,
    )
    try:
        return await directory.insert_unique(record)
    except DuplicateUsernameError as e:
        raise ValidationError(str(e)) from e


async def bootstrap_teacher(
    directory: UserDirectory,
    settings: Settings,
    hasher: PasswordHasher = default_hasher,
) -> UserRecord | None:
    """
    Provision the configured teacher account unless it already exists.
    Returns the record when one was created.
    """
    username = settings.bootstrap_teacher_username
    password = settings.bootstrap_teacher_password
    if not username or not password:
        return None

    if await directory.find_by_username(username) is not None:
        log.info("bootstrap_teacher_exists", teacher=username)
        return None

    record = await provision_user(
        directory,
        username=username,
        password=password,
        name=settings.bootstrap_teacher_name,
        role=Role.teacher,
        hasher=hasher,
    )
    log.info("bootstrap_teacher_created", teacher=username)
    return record
