"""
tests.test_verifier

Credential verification against a seeded in-memory directory.
"""

from __future__ import annotations

from unittest import mock

import pytest
from conftest import PASSWORD, STUDENT, TEACHER

from school_access.auth.models import Principal, Role
from school_access.auth.passwords import PasswordHasher
from school_access.auth.verifier import CredentialVerifier
from school_access.directory.memory import InMemoryUserDirectory
from school_access.errors import Unauthenticated


@pytest.mark.asyncio
async def test_verify_returns_principal_with_stored_role(
    directory: InMemoryUserDirectory, hasher: PasswordHasher
) -> None:
    verifier = CredentialVerifier(directory, hasher)

    assert await verifier.verify(TEACHER, PASSWORD) == Principal(TEACHER, Role.teacher)
    assert await verifier.verify(STUDENT, PASSWORD) == Principal(STUDENT, Role.student)


@pytest.mark.asyncio
async def test_unknown_user_and_wrong_password_fail_the_same_way(
    directory: InMemoryUserDirectory, hasher: PasswordHasher
) -> None:
    verifier = CredentialVerifier(directory, hasher)

    with pytest.raises(Unauthenticated) as unknown:
        await verifier.verify("nobody", PASSWORD)
    with pytest.raises(Unauthenticated) as mismatch:
        await verifier.verify(TEACHER, "wrong")

    assert unknown.value.detail == mismatch.value.detail


@pytest.mark.asyncio
async def test_unknown_user_still_runs_a_hash_check(
    directory: InMemoryUserDirectory, hasher: PasswordHasher
) -> None:
    verifier = CredentialVerifier(directory, hasher)

    with mock.patch.object(hasher, "dummy_verify", wraps=hasher.dummy_verify) as dummy:
        with pytest.raises(Unauthenticated):
            await verifier.verify("nobody", PASSWORD)
    dummy.assert_called_once()


@pytest.mark.asyncio
async def test_username_match_is_case_sensitive(
    directory: InMemoryUserDirectory, hasher: PasswordHasher
) -> None:
    with pytest.raises(Unauthenticated):
        await CredentialVerifier(directory, hasher).verify(TEACHER.upper(), PASSWORD)


def test_hashes_are_salted(hasher: PasswordHasher) -> None:
    first, second = hasher.hash(PASSWORD), hasher.hash(PASSWORD)
    assert first != second
    assert PASSWORD not in first
    assert hasher.verify(PASSWORD, first) and hasher.verify(PASSWORD, second)
