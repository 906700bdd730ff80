"""
tests.test_api_errors

Error-to-status mapping, including the configurable status for authorization
denials.
"""

from __future__ import annotations

import httpx
import pytest
from conftest import STUDENT_AUTH, seed

from school_access.api.app import create_app
from school_access.api.errors import status_for
from school_access.errors import NotFound, PermissionDenied, Unauthenticated, ValidationError
from school_access.settings import Settings


@pytest.mark.parametrize(
    "exc, status",
    [
        (Unauthenticated(), 401),
        (ValidationError("bad"), 400),
        (PermissionDenied("no"), 400),
        (NotFound("gone"), 404),
    ],
)
def test_status_for_default_settings(exc, status: int) -> None:
    assert status_for(exc, Settings()) == status


def test_denial_status_is_configurable() -> None:
    settings = Settings(deny_status_code=403)
    assert status_for(PermissionDenied("no"), settings) == 403
    assert status_for(ValidationError("bad"), settings) == 400


@pytest.mark.asyncio
async def test_student_create_with_403_mapping() -> None:
    app = create_app(settings=Settings(env="test", directory_backend="memory", deny_status_code=403))

    async with app.router.lifespan_context(app):
        await seed(app.state.directory, app.state.hasher)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post(
                "/api/students",
                json={"username": "x", "password": "y", "name": "X"},
                auth=STUDENT_AUTH,
            )
    assert r.status_code == 403
    assert r.json()["detail"]
