"""
school_access.directory

User Directory: the persisted collection of user records, keyed by username.

Responsibilities:
- Define the storage interface the services depend on.
- Provide the in-memory reference implementation.
"""

from school_access.directory.base import DuplicateUsernameError, UserDirectory, UserRecord

__all__ = ["DuplicateUsernameError", "UserDirectory", "UserRecord"]
