"""Database-backed tests for AuthService and UserService."""

import uuid

import pytest

from chirpy_core.auth import JWTConfig, Unauthorized, authenticate, validate_access_token
from chirpy_core.schemas import LoginRequest, UserCreate, UserUpdate
from chirpy_core.services import AuthService, RefreshTokenService, UserService

SECRET = "auth-service-secret" + "0" * 32
PASSWORD = "TestPass123"


def _jwt_config() -> JWTConfig:
    return JWTConfig(secret_key=SECRET, algorithm="HS256")


@pytest.mark.asyncio
async def test_login_refresh_revoke_flow(db_session, test_user) -> None:
    service = AuthService(db_session, _jwt_config())

    user, tokens = await service.login(LoginRequest(email="test@example.com", password=PASSWORD))

    assert user.id == test_user.id
    assert user.email == "test@example.com"
    assert authenticate(f"Bearer {tokens.access_token}", SECRET) == uuid.UUID(test_user.id)

    new_access = await service.refresh(f"Bearer {tokens.refresh_token}")
    assert validate_access_token(new_access, SECRET) == uuid.UUID(test_user.id)

    await service.revoke(f"Bearer {tokens.refresh_token}")

    with pytest.raises(Unauthorized):
        await service.refresh(f"Bearer {tokens.refresh_token}")


@pytest.mark.asyncio
async def test_login_persists_refresh_token(db_session, test_user) -> None:
    service = AuthService(db_session, _jwt_config())

    _, tokens = await service.login(LoginRequest(email="test@example.com", password=PASSWORD))

    record = await RefreshTokenService(db_session).lookup(tokens.refresh_token)
    assert record is not None
    assert record.user_id == uuid.UUID(test_user.id)
    assert record.revoked is False


@pytest.mark.asyncio
async def test_login_wrong_password(db_session, test_user) -> None:
    service = AuthService(db_session, _jwt_config())

    with pytest.raises(Unauthorized):
        await service.login(LoginRequest(email="test@example.com", password="wrong"))


@pytest.mark.asyncio
async def test_login_unknown_email(db_session) -> None:
    service = AuthService(db_session, _jwt_config())

    with pytest.raises(Unauthorized):
        await service.login(LoginRequest(email="nobody@example.com", password=PASSWORD))


@pytest.mark.asyncio
async def test_login_unknown_email_runs_decoy_verification(
    db_session, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []
    monkeypatch.setattr(
        "chirpy_core.services.auth_service.verify_dummy_password", calls.append
    )
    service = AuthService(db_session, _jwt_config())

    with pytest.raises(Unauthorized):
        await service.login(LoginRequest(email="nobody@example.com", password=PASSWORD))

    assert calls == [PASSWORD]


@pytest.mark.asyncio
async def test_login_known_email_skips_decoy_verification(
    db_session, test_user, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []
    monkeypatch.setattr(
        "chirpy_core.services.auth_service.verify_dummy_password", calls.append
    )
    service = AuthService(db_session, _jwt_config())

    with pytest.raises(Unauthorized):
        await service.login(LoginRequest(email="test@example.com", password="wrong"))

    assert calls == []


@pytest.mark.asyncio
async def test_refresh_with_access_token_fails(db_session, test_user) -> None:
    service = AuthService(db_session, _jwt_config())
    _, tokens = await service.login(LoginRequest(email="test@example.com", password=PASSWORD))

    with pytest.raises(Unauthorized):
        await service.refresh(f"Bearer {tokens.access_token}")


@pytest.mark.asyncio
async def test_create_user_rejects_duplicate_email(db_session, test_user) -> None:
    service = UserService(db_session)

    with pytest.raises(ValueError, match="Email already registered"):
        await service.create_user(UserCreate(email="test@example.com", password="x"))


@pytest.mark.asyncio
async def test_update_credentials_changes_login(db_session, test_user) -> None:
    users = UserService(db_session)
    service = AuthService(db_session, _jwt_config())

    updated = await users.update_credentials(
        test_user.id, UserUpdate(email="renamed@example.com", password="NewPass456")
    )
    assert updated.email == "renamed@example.com"

    with pytest.raises(Unauthorized):
        await service.login(LoginRequest(email="test@example.com", password=PASSWORD))

    user, _ = await service.login(LoginRequest(email="renamed@example.com", password="NewPass456"))
    assert user.id == test_user.id


@pytest.mark.asyncio
async def test_update_credentials_email_taken(db_session, test_user, other_user) -> None:
    users = UserService(db_session)

    with pytest.raises(ValueError, match="Email already registered"):
        await users.update_credentials(
            test_user.id, UserUpdate(email="other@example.com", password="x")
        )


@pytest.mark.asyncio
async def test_upgrade_to_chirpy_red(db_session, test_user) -> None:
    users = UserService(db_session)

    assert await users.upgrade_to_chirpy_red(test_user.id) is True
    assert (await users.get_user(test_user.id)).is_chirpy_red is True
    assert await users.upgrade_to_chirpy_red(uuid.uuid4()) is False
