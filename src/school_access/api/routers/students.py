"""
school_access.api.routers.students

Student record endpoints.

Responsibilities:
- List users (teachers), read own profile (any role), create students (teachers).
- Gate each route with `require(action)`; the service re-checks the same policy.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED

from school_access.api.deps import password_hasher, user_directory
from school_access.auth.deps import require
from school_access.auth.models import Principal, Role
from school_access.auth.passwords import PasswordHasher
from school_access.auth.policy import Action
from school_access.directory.base import UserDirectory
from school_access.services.students import StudentService
from school_access.services.views import StudentProfile

router = APIRouter(prefix="/api/students", tags=["students"])


class StudentCreateRequest(BaseModel):
    username: str
    password: str
    name: str


class StudentResponse(BaseModel):
    username: str
    name: str
    role: Role

    @classmethod
    def of(cls, profile: StudentProfile) -> StudentResponse:
        return cls(username=profile.username, name=profile.name, role=profile.role)


def student_service(
    directory: UserDirectory = Depends(user_directory),
    hasher: PasswordHasher = Depends(password_hasher),
) -> StudentService:
    return StudentService(directory, hasher)


@router.get("", response_model=list[StudentResponse])
async def list_students(
    principal: Principal = Depends(require(Action.list_students)),
    svc: StudentService = Depends(student_service),
) -> list[StudentResponse]:
    return [StudentResponse.of(p) for p in await svc.list_students(principal)]


@router.get("/me", response_model=StudentResponse)
async def get_me(
    principal: Principal = Depends(require(Action.read_own_profile)),
    svc: StudentService = Depends(student_service),
) -> StudentResponse:
    return StudentResponse.of(await svc.get_own_profile(principal))


@router.post("", response_model=StudentResponse, status_code=HTTP_201_CREATED)
async def create_student(
    body: StudentCreateRequest,
    principal: Principal = Depends(require(Action.create_student)),
    svc: StudentService = Depends(student_service),
) -> StudentResponse:
    profile = await svc.create_student(
        principal,
        username=body.username,
        password=body.password,
        name=body.name,
    )
    return StudentResponse.of(profile)


# --- Module Notes -----------------------------------------------------------
# A non-teacher POST is reported like a validation failure (400 by default,
# see `Settings.deny_status_code`).
