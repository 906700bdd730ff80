"""
school_access.errors

Domain error kinds shared by the auth, service, and API layers.

Responsibilities:
- Name every client-visible failure once; the API layer maps them to statuses.
"""

from __future__ import annotations


class AccessError(Exception):
    """Base class for every failure this service reports to a caller."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class Unauthenticated(AccessError):
    """No identity was presented, or it does not match any user."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(detail)


class ValidationError(AccessError):
    """Malformed input or a conflicting record (e.g. duplicate username)."""


class PermissionDenied(ValidationError):
    """
    Authenticated caller whose role lacks the capability for the action.

    Reported with the same client-error class as `ValidationError`.
    """


class NotFound(AccessError):
    pass


# --- Module Notes -----------------------------------------------------------
# `NotFound` has no producer yet; it is reserved for per-id lookups.
