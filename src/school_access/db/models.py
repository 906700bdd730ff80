"""
school_access.db.models

Persistence schema for identity records.

Responsibilities:
- Define the `users` table, unique by username.
- Convert rows to/from the storage-neutral `UserRecord`.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from school_access.auth.models import Role
from school_access.db.base import Base
from school_access.directory.base import UserRecord


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # The unique constraint is what makes check-and-insert atomic across sessions.
    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    # Store enum values ("TEACHER"), not member names.
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    @classmethod
    def from_record(cls, record: UserRecord) -> UserRow:
        return cls(
            id=record.id,
            username=record.username,
            password_hash=record.password_hash,
            name=record.name,
            role=record.role,
            created_at=record.created_at,
        )

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            username=self.username,
            password_hash=self.password_hash,
            name=self.name,
            role=self.role,
            created_at=self.created_at,
        )
