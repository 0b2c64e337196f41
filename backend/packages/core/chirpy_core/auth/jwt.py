"""
Access token signing and validation.

Access tokens are HS256 JWTs carrying `sub`, `iss`, `iat` and `exp`. They
are self-contained: validation needs only the secret, never a store lookup.
"""

import json
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwk, jws, jwt
from jose.backends.base import Key
from jose.exceptions import JWSError, JWTError

from .errors import (
    IssuerMismatch,
    SignatureInvalid,
    SubjectInvalid,
    TokenExpired,
    TokenMalformed,
)

ALGORITHM = "HS256"
ACCESS_TOKEN_ISSUER = "chirpy-access"
ACCESS_TOKEN_LIFETIME = timedelta(minutes=60)

Secret = str | bytes


def _signing_key(secret: Secret) -> Key:
    # A Key instance is used as is; a raw str would be parsed as a JSON key set
    return jwk.construct(secret, ALGORITHM)


@dataclass(frozen=True)
class JWTConfig:
    """
    JWT configuration carried by the API layer.

    Attributes:
        secret_key: HMAC signing secret.
        algorithm: Signing algorithm (only HS256 is issued or accepted).
        access_token_expire_minutes: Access token lifetime.
        refresh_token_expire_days: Refresh token lifetime.
    """

    secret_key: Secret
    algorithm: str = ALGORITHM
    access_token_expire_minutes: int = 60
    refresh_token_expire_days: int = 60

    def __repr__(self) -> str:
        return (
            f"JWTConfig(algorithm={self.algorithm!r}, "
            f"access_token_expire_minutes={self.access_token_expire_minutes}, "
            f"refresh_token_expire_days={self.refresh_token_expire_days})"
        )

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return timedelta(days=self.refresh_token_expire_days)


def create_access_token(
    user_id: uuid.UUID,
    secret: Secret,
    expires_in: timedelta = ACCESS_TOKEN_LIFETIME,
    *,
    now: datetime | None = None,
) -> str:
    """
    Create a signed access token.

    Args:
        user_id: Subject of the token.
        secret: HMAC signing secret.
        expires_in: Lifetime measured from `now`.
        now: Issue time (defaults to the current UTC time).

    Returns:
        Encoded JWT string.
    """
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + expires_in

    claims: dict[str, Any] = {
        "sub": str(user_id),
        "iss": ACCESS_TOKEN_ISSUER,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(claims, _signing_key(secret), algorithm=ALGORITHM)


def validate_access_token(
    token: str, secret: Secret, *, now: datetime | None = None
) -> uuid.UUID:
    """
    Validate an access token and return its subject.

    The signature is verified before any claim is looked at.

    Args:
        token: Encoded JWT string.
        secret: HMAC secret the token must have been signed with.
        now: Evaluation time (defaults to the current UTC time).

    Returns:
        The user identifier from the `sub` claim.

    Raises:
        TokenMalformed: If the token is not a parseable JWT.
        SignatureInvalid: If the signature does not verify under `secret`.
        TokenExpired: If `now` is at or past the `exp` claim.
        IssuerMismatch: If the issuer is not the access-token issuer.
        SubjectInvalid: If the subject is not a UUID.
    """
    if not isinstance(token, str) or not token:
        raise TokenMalformed("Token is empty")

    try:
        jwt.get_unverified_header(token)
        jwt.get_unverified_claims(token)
    except JWTError as e:
        raise TokenMalformed("Token could not be decoded") from e

    try:
        payload = jws.verify(token, _signing_key(secret), algorithms=[ALGORITHM])
    except JWSError as e:
        raise SignatureInvalid("Token signature verification failed") from e

    claims = json.loads(payload)

    expires_at = claims.get("exp")
    if not isinstance(expires_at, int) or isinstance(expires_at, bool):
        raise TokenMalformed("Token has no valid exp claim")

    current = (now or datetime.now(UTC)).timestamp()
    if current >= expires_at:
        raise TokenExpired("Token has expired")

    if claims.get("iss") != ACCESS_TOKEN_ISSUER:
        raise IssuerMismatch("Token issuer is not accepted")

    try:
        return uuid.UUID(claims.get("sub"))
    except (TypeError, ValueError, AttributeError) as e:
        raise SubjectInvalid("Token subject is not a valid user id") from e
