"""
school_access.auth.passwords

Password hashing (passlib).

Responsibilities:
- Hash new secrets with a salted one-way scheme.
- Verify presented secrets against stored hashes.
- Burn comparable time when there is no stored hash to check against.
"""

from __future__ import annotations

from collections.abc import Sequence

from passlib.context import CryptContext

DEFAULT_SCHEMES: tuple[str, ...] = ("pbkdf2_sha256",)


class PasswordHasher:
    def __init__(self, schemes: Sequence[str] = DEFAULT_SCHEMES) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, plain: str) -> str:
        return self._context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        return self._context.verify(plain, hashed)

    def dummy_verify(self) -> None:
        # Unknown usernames still pay for one hash round.
        self._context.dummy_verify()


default_hasher = PasswordHasher()
