"""
school_access.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the password hasher and the request-scoped
  user directory.
- Encapsulate app.state access patterns (directory/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from school_access.auth.passwords import PasswordHasher
from school_access.db.repositories.users import SqlUserDirectory
from school_access.directory.base import UserDirectory


def password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher  # type: ignore[attr-defined]


async def user_directory(request: Request) -> AsyncIterator[UserDirectory]:
    # Memory backend: one shared directory. SQL backend: one session per request.
    shared: UserDirectory | None = getattr(request.app.state, "directory", None)
    if shared is not None:
        yield shared
        return

    async with request.app.state.sessionmaker() as session:  # type: ignore[attr-defined]
        yield SqlUserDirectory(session)


# --- Module Notes -----------------------------------------------------------
# Both backends are created on startup in `school_access.api.app.lifespan`.
