"""
school_access.db.repositories.users

SQL-backed `UserDirectory`.

Responsibilities:
- Unique-keyed lookup by username.
- Atomic check-and-insert, enforced by the `users.username` unique constraint.
"""

from __future__ import annotations

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from school_access.auth.models import Role
from school_access.db.models import UserRow
from school_access.directory.base import DuplicateUsernameError, UserDirectory, UserRecord


class SqlUserDirectory(UserDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_username(self, username: str) -> UserRecord | None:
        stmt = select(UserRow).where(UserRow.username == username)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return row.to_record() if row is not None else None

    async def list_all(self, *, role: Role | None = None) -> list[UserRecord]:
        stmt = select(UserRow).order_by(UserRow.username.asc())
        if role is not None:
            stmt = stmt.where(UserRow.role == role)
        rows = (await self._session.execute(stmt)).scalars().all()
        return [row.to_record() for row in rows]

    async def insert_unique(self, record: UserRecord) -> UserRecord:
        # No pre-read: the unique index decides, so concurrent writers cannot both win.
        self._session.add(UserRow.from_record(record))
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateUsernameError(record.username) from e
        return record

    async def ping(self) -> None:
        await self._session.execute(text("SELECT 1"))


# --- Module Notes -----------------------------------------------------------
# Insert commits immediately so the directory behaves the same as the in-memory one.
