"""
school_access.services.views

Outward projections of a stored user.
"""

from __future__ import annotations

from dataclasses import dataclass

from school_access.auth.models import Principal, Role
from school_access.directory.base import UserRecord


@dataclass(frozen=True, slots=True)
class StudentProfile:
    username: str
    name: str
    role: Role

    @classmethod
    def of(cls, record: UserRecord) -> StudentProfile:
        return cls(username=record.username, name=record.name, role=record.role)


@dataclass(frozen=True, slots=True)
class IdentitySummary:
    username: str
    role: Role

    @classmethod
    def of(cls, principal: Principal) -> IdentitySummary:
        return cls(username=principal.username, role=principal.role)
