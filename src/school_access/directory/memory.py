"""
school_access.directory.memory

In-memory `UserDirectory` (dev/test backend).
"""

from __future__ import annotations

import threading

from school_access.auth.models import Role
from school_access.directory.base import DuplicateUsernameError, UserDirectory, UserRecord


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, records: list[UserRecord] | None = None) -> None:
        self._lock = threading.Lock()
        self._by_username: dict[str, UserRecord] = {}
        for record in records or []:
            self._insert_locked(record)

    def _insert_locked(self, record: UserRecord) -> UserRecord:
        with self._lock:
            if record.username in self._by_username:
                raise DuplicateUsernameError(record.username)
            self._by_username[record.username] = record
            return record

    async def find_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            return self._by_username.get(username)

    async def list_all(self, *, role: Role | None = None) -> list[UserRecord]:
        with self._lock:
            records = list(self._by_username.values())
        if role is not None:
            records = [r for r in records if r.role == role]
        return sorted(records, key=lambda r: r.username)

    async def insert_unique(self, record: UserRecord) -> UserRecord:
        return self._insert_locked(record)

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_username)
