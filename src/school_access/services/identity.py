"""
school_access.services.identity

Caller identity summary ("who am I").
"""

from __future__ import annotations

from school_access.auth.models import Principal
from school_access.auth.policy import Action, ActionRequest, ensure_allowed
from school_access.services.views import IdentitySummary


def who_am_i(principal: Principal | None) -> IdentitySummary:
    """
    Return the caller's own username and role.

    Raises:
        Unauthenticated: no principal was resolved upstream.
    """
    principal = ensure_allowed(principal, ActionRequest(action=Action.read_identity))
    return IdentitySummary.of(principal)
