"""
school_access.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with user directory connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from school_access.api.deps import user_directory
from school_access.directory.base import UserDirectory

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(directory: UserDirectory = Depends(user_directory)) -> dict[str, str]:
    await directory.ping()
    return {"status": "ready"}
