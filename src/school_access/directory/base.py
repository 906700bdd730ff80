from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime

from school_access.auth.models import Role


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A stored identity. `password_hash` is only read by credential checks."""

    username: str
    password_hash: str = field(repr=False)
    name: str
    role: Role
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utcnow)


class DuplicateUsernameError(Exception):
    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' is already taken")
        self.username = username


class UserDirectory(ABC):
    @abstractmethod
    async def find_by_username(self, username: str) -> UserRecord | None:
        """Exact, case-sensitive lookup."""

    @abstractmethod
    async def list_all(self, *, role: Role | None = None) -> list[UserRecord]:
        """All records (optionally one role), ordered by username."""

    @abstractmethod
    async def insert_unique(self, record: UserRecord) -> UserRecord:
        """
        Check that the username is unused and insert, as one atomic step.

        Raises:
            DuplicateUsernameError: the username is already present; nothing was written.
        """

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the backing store is unreachable."""
