"""
tests.test_api_students

Student endpoints end-to-end (in-memory backend, real Basic credentials).

Responsibilities:
- Status mapping: 401 before anything else, 400 for non-teacher create and
  for validation failures, 201 for a successful create.
- The seeded scenario: teacher t1, student s1, teacher creates s2.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest
from conftest import STUDENT, STUDENT_AUTH, TEACHER, TEACHER_AUTH
from fastapi import FastAPI

from school_access.auth.deps import get_principal
from school_access.auth.models import Principal, Role

NEW_STUDENT = {"username": "s2", "password": "p", "name": "S Two"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/students"),
        ("GET", "/api/students/me"),
        ("POST", "/api/students"),
    ],
)
async def test_unauthenticated_returns_401(
    client: httpx.AsyncClient, method: str, path: str
) -> None:
    r = await client.request(method, path, json=NEW_STUDENT if method == "POST" else None)
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_unauthenticated_with_bad_body_still_returns_401(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/students", json={"username": ""})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_list_as_teacher_returns_public_views(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/students", auth=TEACHER_AUTH)
    assert r.status_code == 200
    body = r.json()
    assert isinstance(body, list)
    assert {"username": STUDENT, "name": "Test Student", "role": "STUDENT"} in body
    assert all(set(item) == {"username", "name", "role"} for item in body)


@pytest.mark.asyncio
async def test_list_as_student_is_denied(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/students", auth=STUDENT_AUTH)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_me_as_student_returns_own_profile(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/students/me", auth=STUDENT_AUTH)
    assert r.status_code == 200
    assert r.json() == {"username": STUDENT, "name": "Test Student", "role": "STUDENT"}


@pytest.mark.asyncio
async def test_create_as_teacher_then_listed(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/students", json=NEW_STUDENT, auth=TEACHER_AUTH)
    assert r.status_code == 201
    assert r.json() == {"username": "s2", "name": "S Two", "role": "STUDENT"}

    listed = (await client.get("/api/students", auth=TEACHER_AUTH)).json()
    assert "s2" in [item["username"] for item in listed]

    # The new account can sign in with the password it was created with.
    me = await client.get("/api/auth/me", auth=("s2", "p"))
    assert me.json() == {"username": "s2", "role": "STUDENT"}


@pytest.mark.asyncio
async def test_create_as_student_returns_400(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/api/students", json={"username": "x", "password": "y", "name": "X"}, auth=STUDENT_AUTH
    )
    assert r.status_code == 400

    listed = (await client.get("/api/students", auth=TEACHER_AUTH)).json()
    assert "x" not in [item["username"] for item in listed]


@pytest.mark.asyncio
async def test_create_duplicate_returns_400(client: httpx.AsyncClient) -> None:
    body = {"username": STUDENT, "password": "p", "name": "Again"}
    r = await client.post("/api/students", json=body, auth=TEACHER_AUTH)
    assert r.status_code == 400
    assert "already taken" in r.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"username": "", "password": "p", "name": "Blank"},
        {"username": "s3", "name": "No Password"},
        {},
    ],
)
async def test_create_with_invalid_body_returns_400(
    client: httpx.AsyncClient, body: dict[str, str]
) -> None:
    r = await client.post("/api/students", json=body, auth=TEACHER_AUTH)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_concurrent_creates_yield_one_201_and_one_400(client: httpx.AsyncClient) -> None:
    responses = await asyncio.gather(
        client.post("/api/students", json=NEW_STUDENT, auth=TEACHER_AUTH),
        client.post("/api/students", json=NEW_STUDENT, auth=TEACHER_AUTH),
    )
    assert sorted(r.status_code for r in responses) == [201, 400]


@pytest.mark.asyncio
async def test_injected_teacher_principal_can_create(
    app: FastAPI, client: httpx.AsyncClient
) -> None:
    app.dependency_overrides[get_principal] = lambda: Principal(TEACHER, Role.teacher)

    r = await client.post("/api/students", json=NEW_STUDENT)
    assert r.status_code == 201
