"""
tests.conftest

Shared fixtures.

Responsibilities:
- Seed a directory with one teacher (`t1`) and one student (`s1`).
- Build the app on the in-memory backend with its lifespan entered, plus an
  in-process httpx client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from school_access.api.app import create_app
from school_access.auth.models import Principal, Role
from school_access.auth.passwords import PasswordHasher
from school_access.directory.base import UserDirectory
from school_access.directory.memory import InMemoryUserDirectory
from school_access.services.provisioning import provision_user
from school_access.settings import Settings

TEACHER = "t1"
STUDENT = "s1"
PASSWORD = "password"

TEACHER_AUTH = (TEACHER, PASSWORD)
STUDENT_AUTH = (STUDENT, PASSWORD)


async def seed(directory: UserDirectory, hasher: PasswordHasher) -> None:
    await provision_user(
        directory,
        username=TEACHER,
        password=PASSWORD,
        name="Test Teacher",
        role=Role.teacher,
        hasher=hasher,
    )
    await provision_user(
        directory,
        username=STUDENT,
        password=PASSWORD,
        name="Test Student",
        role=Role.student,
        hasher=hasher,
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher()


@pytest.fixture
def teacher() -> Principal:
    return Principal(username=TEACHER, role=Role.teacher)


@pytest.fixture
def student() -> Principal:
    return Principal(username=STUDENT, role=Role.student)


@pytest_asyncio.fixture
async def directory(hasher: PasswordHasher) -> InMemoryUserDirectory:
    d = InMemoryUserDirectory()
    await seed(d, hasher)
    return d


@pytest_asyncio.fixture
async def app() -> AsyncIterator[FastAPI]:
    app = create_app(settings=Settings(env="test", directory_backend="memory"))

    # httpx ASGITransport does not run lifespan; do it explicitly.
    async with app.router.lifespan_context(app):
        await seed(app.state.directory, app.state.hasher)
        yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
