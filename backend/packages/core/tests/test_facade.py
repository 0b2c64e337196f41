"""Tests for the composed authentication operations, using in-memory stores."""

import uuid
from datetime import timedelta

import pytest

from chirpy_core.auth import (
    Unauthorized,
    authenticate,
    create_access_token,
    hash_password,
    login,
    refresh,
    revoke,
    validate_access_token,
)

SECRET = "facade-test-secret" + "0" * 32


class _MemoryStore:
    def __init__(self) -> None:
        self.owners: dict[str, uuid.UUID] = {}
        self.revoked: set[str] = set()

    async def lookup(self, token: str) -> uuid.UUID | None:
        if token in self.revoked:
            return None
        return self.owners.get(token)

    async def revoke(self, token: str) -> bool:
        if token not in self.owners or token in self.revoked:
            return False
        self.revoked.add(token)
        return True


@pytest.fixture(scope="module")
def stored_hash() -> str:
    return hash_password("hunter2")


def test_login_issues_token_pair(stored_hash: str) -> None:
    user_id = uuid.uuid4()

    tokens = login("hunter2", stored_hash, user_id, SECRET)

    assert validate_access_token(tokens.access_token, SECRET) == user_id
    assert len(tokens.refresh_token) == 64


def test_login_rejects_wrong_password(stored_hash: str) -> None:
    with pytest.raises(Unauthorized):
        login("hunter3", stored_hash, uuid.uuid4(), SECRET)


def test_authenticate_accepts_valid_header() -> None:
    user_id = uuid.uuid4()
    token = create_access_token(user_id, SECRET)

    assert authenticate(f"Bearer {token}", SECRET) == user_id


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer not-a-jwt"],
)
def test_authenticate_rejects_bad_headers(header: str | None) -> None:
    with pytest.raises(Unauthorized) as exc_info:
        authenticate(header, SECRET)

    assert str(exc_info.value) == "Unauthorized"


def test_authenticate_hides_failure_reason() -> None:
    expired = create_access_token(uuid.uuid4(), SECRET, timedelta(seconds=-1))
    foreign = create_access_token(uuid.uuid4(), "other-secret" + "0" * 32)

    with pytest.raises(Unauthorized) as expired_info:
        authenticate(f"Bearer {expired}", SECRET)
    with pytest.raises(Unauthorized) as foreign_info:
        authenticate(f"Bearer {foreign}", SECRET)

    assert str(expired_info.value) == str(foreign_info.value)


@pytest.mark.asyncio
async def test_refresh_mints_access_token_for_owner() -> None:
    store = _MemoryStore()
    user_id = uuid.uuid4()
    store.owners["r1"] = user_id

    token = await refresh("Bearer r1", SECRET, store.lookup)

    assert validate_access_token(token, SECRET) == user_id


@pytest.mark.asyncio
async def test_refresh_rejects_unknown_token() -> None:
    store = _MemoryStore()

    with pytest.raises(Unauthorized):
        await refresh("Bearer nope", SECRET, store.lookup)


@pytest.mark.asyncio
async def test_refresh_rejects_missing_header() -> None:
    store = _MemoryStore()

    with pytest.raises(Unauthorized):
        await refresh(None, SECRET, store.lookup)


@pytest.mark.asyncio
async def test_revoke_then_refresh_fails() -> None:
    store = _MemoryStore()
    store.owners["r1"] = uuid.uuid4()

    await revoke("Bearer r1", store.revoke)

    with pytest.raises(Unauthorized):
        await refresh("Bearer r1", SECRET, store.lookup)


@pytest.mark.asyncio
async def test_revoke_is_idempotent() -> None:
    store = _MemoryStore()
    store.owners["r1"] = uuid.uuid4()

    await revoke("Bearer r1", store.revoke)
    await revoke("Bearer r1", store.revoke)
    await revoke("Bearer unknown", store.revoke)

    assert store.revoked == {"r1"}


@pytest.mark.asyncio
async def test_revoke_requires_header() -> None:
    store = _MemoryStore()

    with pytest.raises(Unauthorized):
        await revoke("", store.revoke)
