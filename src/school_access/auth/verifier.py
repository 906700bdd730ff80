"""
school_access.auth.verifier

Credential verification.

Responsibilities:
- Turn (username, presented secret) into a `Principal`, or fail with
  `Unauthenticated` without revealing whether the username exists.
"""

from __future__ import annotations

from school_access.auth.models import Principal
from school_access.auth.passwords import PasswordHasher, default_hasher
from school_access.directory.base import UserDirectory
from school_access.errors import Unauthenticated
from school_access.observability.logging import get_logger

log = get_logger(__name__)

_INVALID_CREDENTIALS = "Invalid username or password"


class CredentialVerifier:
    def __init__(self, directory: UserDirectory, hasher: PasswordHasher = default_hasher) -> None:
        self._directory = directory
        self._hasher = hasher

    async def verify(self, username: str, secret: str) -> Principal:
        user = await self._directory.find_by_username(username) if username else None
        if user is None:
            self._hasher.dummy_verify()
            log.info("authentication_failed", username=username)
            raise Unauthenticated(_INVALID_CREDENTIALS)

        if not self._hasher.verify(secret, user.password_hash):
            log.info("authentication_failed", username=username)
            raise Unauthenticated(_INVALID_CREDENTIALS)

        return Principal(username=user.username, role=user.role)


# --- Module Notes -----------------------------------------------------------
# Both failure paths share one message and one log event.
