from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from school_access.auth.deps import require
from school_access.auth.models import Principal, Role
from school_access.auth.policy import Action
from school_access.services.identity import who_am_i

router = APIRouter(prefix="/api/auth", tags=["auth"])


class IdentityResponse(BaseModel):
    username: str
    role: Role


@router.get("/me", response_model=IdentityResponse)
async def me(principal: Principal = Depends(require(Action.read_identity))) -> IdentityResponse:
    summary = who_am_i(principal)
    return IdentityResponse(username=summary.username, role=summary.role)
