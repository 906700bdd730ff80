"""
school_access.auth.policy

Authorization policy: which role may perform which action.

This module defines WHAT each role can do and decides a single
(Principal, ActionRequest) pair. It never looks anything up: the target of a
self-scoped action is part of the request, so `authorize` is a pure function.

Responsibilities:
- Name the actions gated by role (`Action`).
- Map each role to its capability set (`ROLE_CAPABILITIES`).
- Decide Allow/Deny with a reason (`authorize`), or raise (`ensure_allowed`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from school_access.auth.models import Principal, Role
from school_access.errors import PermissionDenied, Unauthenticated


class Action(enum.StrEnum):
    read_identity = "identity.read"
    list_students = "students.list"
    read_own_profile = "students.read_self"
    create_student = "students.create"


# Actions whose only legal target is the caller.
SELF_SCOPED_ACTIONS: frozenset[Action] = frozenset({Action.read_own_profile})


ROLE_CAPABILITIES: dict[Role, frozenset[Action]] = {
    Role.teacher: frozenset(
        {
            Action.read_identity,
            Action.list_students,
            Action.read_own_profile,
            Action.create_student,
        }
    ),
    Role.student: frozenset(
        {
            Action.read_identity,
            Action.read_own_profile,
        }
    ),
}


class DenyReason(enum.StrEnum):
    unauthenticated = "UNAUTHENTICATED"
    missing_capability = "MISSING_CAPABILITY"
    not_self = "NOT_SELF"


@dataclass(frozen=True, slots=True)
class ActionRequest:
    """
    An action plus the username it targets (None when it targets no record).
    """

    action: Action
    target: str | None = None

    @classmethod
    def on_self(cls, action: Action, principal: Principal) -> ActionRequest:
        return cls(action=action, target=principal.username)


@dataclass(frozen=True, slots=True)
class Decision:
    allowed: bool
    reason: DenyReason | None = None

    @classmethod
    def allow(cls) -> Decision:
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason) -> Decision:
        return cls(allowed=False, reason=reason)


def capabilities_for(role: Role) -> frozenset[Action]:
    return ROLE_CAPABILITIES.get(role, frozenset())


def authorize(principal: Principal | None, request: ActionRequest) -> Decision:
    if principal is None:
        return Decision.deny(DenyReason.unauthenticated)

    if request.action not in capabilities_for(principal.role):
        return Decision.deny(DenyReason.missing_capability)

    if request.action in SELF_SCOPED_ACTIONS and not principal.is_self(request.target):
        return Decision.deny(DenyReason.not_self)

    return Decision.allow()


def ensure_allowed(principal: Principal | None, request: ActionRequest) -> Principal:
    """
    Raise the client-facing error for a Deny; return the principal on Allow.

    Raises:
        Unauthenticated: no principal.
        PermissionDenied: authenticated, but the decision was Deny.
    """
    decision = authorize(principal, request)
    if decision.allowed:
        return principal  # type: ignore[return-value]
    if decision.reason is DenyReason.unauthenticated:
        raise Unauthenticated()
    if decision.reason is DenyReason.not_self:
        raise PermissionDenied(f"Action '{request.action}' only applies to the caller")
    raise PermissionDenied(f"Role '{principal.role}' may not perform '{request.action}'")  # type: ignore[union-attr]


# --- Module Notes -----------------------------------------------------------
# New roles are added as a ROLE_CAPABILITIES row; `authorize` does not change.
