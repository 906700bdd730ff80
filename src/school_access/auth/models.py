"""
school_access.auth.models

Auth domain models.

Responsibilities:
- Define the role enumeration stored on every user.
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Role(enum.StrEnum):
    # Values are persisted and returned on the wire; treat as stable API contract.
    teacher = "TEACHER"
    student = "STUDENT"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity, valid for one request.

    Build one directly (`Principal("t1", Role.teacher)`) to act as a caller in
    tests without going through credential verification.
    """

    username: str
    role: Role

    def is_self(self, username: str | None) -> bool:
        return username is not None and username == self.username


# --- Module Notes -----------------------------------------------------------
# Principal is a projection of a stored user; it is never persisted.
