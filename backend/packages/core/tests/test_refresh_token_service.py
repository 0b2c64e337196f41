"""Tests for the database-backed refresh token store."""

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from chirpy_core.auth import generate_refresh_token
from chirpy_core.services import RefreshTokenService


async def _store(service: RefreshTokenService, user_id: str, expires_in: timedelta) -> str:
    token = generate_refresh_token()
    await service.insert(token, user_id, datetime.now(UTC) + expires_in)
    await service.session.commit()
    return token


@pytest.mark.asyncio
async def test_live_token_resolves_to_owner(db_session, test_user) -> None:
    service = RefreshTokenService(db_session)
    token = await _store(service, test_user.id, timedelta(days=60))

    assert await service.get_user_id(token) == uuid.UUID(test_user.id)


@pytest.mark.asyncio
async def test_unknown_token_resolves_to_none(db_session) -> None:
    service = RefreshTokenService(db_session)

    assert await service.get_user_id("0" * 64) is None
    assert await service.lookup("0" * 64) is None


@pytest.mark.asyncio
async def test_expired_token_resolves_to_none(db_session, test_user) -> None:
    service = RefreshTokenService(db_session)
    token = await _store(service, test_user.id, timedelta(seconds=-1))

    assert await service.get_user_id(token) is None

    record = await service.lookup(token)
    assert record is not None
    assert record.revoked is False


@pytest.mark.asyncio
async def test_revoked_token_resolves_to_none(db_session, test_user) -> None:
    service = RefreshTokenService(db_session)
    token = await _store(service, test_user.id, timedelta(days=60))

    assert await service.revoke(token) is True
    assert await service.get_user_id(token) is None

    record = await service.lookup(token)
    assert record is not None
    assert record.revoked is True
    assert record.user_id == uuid.UUID(test_user.id)


@pytest.mark.asyncio
async def test_revoke_twice_reports_nothing_the_second_time(db_session, test_user) -> None:
    service = RefreshTokenService(db_session)
    token = await _store(service, test_user.id, timedelta(days=60))

    assert await service.revoke(token) is True
    assert await service.revoke(token) is False
    assert await service.revoke("f" * 64) is False


@pytest.mark.asyncio
async def test_delete_all_purges_tokens(db_session, test_user, other_user) -> None:
    service = RefreshTokenService(db_session)
    first = await _store(service, test_user.id, timedelta(days=60))
    second = await _store(service, other_user.id, timedelta(days=60))

    assert await service.delete_all() == 2
    await db_session.commit()

    assert await service.lookup(first) is None
    assert await service.lookup(second) is None
