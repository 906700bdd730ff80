"""
school_access.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Resolve HTTP Basic credentials into a typed `Principal` (the single
  authentication gate).
- Gate each endpoint on the authorization policy via `require(action)`.
"""

from __future__ import annotations

import structlog
from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from school_access.api.deps import password_hasher, user_directory
from school_access.auth.models import Principal
from school_access.auth.passwords import PasswordHasher
from school_access.auth.policy import SELF_SCOPED_ACTIONS, Action, ActionRequest, ensure_allowed
from school_access.auth.verifier import CredentialVerifier
from school_access.directory.base import UserDirectory
from school_access.errors import AccessError, Unauthenticated
from school_access.observability.logging import get_logger

log = get_logger(__name__)

_basic = HTTPBasic(auto_error=False)


async def get_principal(
    creds: HTTPBasicCredentials | None = Depends(_basic),
    directory: UserDirectory = Depends(user_directory),
    hasher: PasswordHasher = Depends(password_hasher),
) -> Principal:
    # Authn: require credentials on every request.
    if creds is None or not creds.username:
        raise Unauthenticated()

    principal = await CredentialVerifier(directory, hasher).verify(creds.username, creds.password)
    structlog.contextvars.bind_contextvars(username=principal.username, role=principal.role.value)
    return principal


def require(action: Action):
    def _dep(principal: Principal = Depends(get_principal)) -> Principal:
        # Self-scoped actions can only ever target the caller.
        target = principal.username if action in SELF_SCOPED_ACTIONS else None
        try:
            return ensure_allowed(principal, ActionRequest(action=action, target=target))
        except AccessError as e:
            log.info("authorization_denied", action=action.value, reason=e.detail)
            raise

    return _dep


# --- Module Notes -----------------------------------------------------------
# Tests swap the caller by overriding `get_principal` with a plain Principal.
