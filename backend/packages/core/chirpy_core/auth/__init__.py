"""
Authentication utilities.

Provides password hashing, access and refresh tokens, header parsing and
the composed authentication operations.
"""

from .bearer import get_api_key, get_bearer_token
from .errors import (
    AuthError,
    BearerError,
    HashingFailure,
    HeaderMalformed,
    HeaderMissing,
    IssuerMismatch,
    PasswordError,
    SignatureInvalid,
    SubjectInvalid,
    TokenError,
    TokenExpired,
    TokenMalformed,
    Unauthorized,
    VerificationFailure,
)
from .facade import TokenPair, authenticate, login, refresh, revoke
from .jwt import (
    ACCESS_TOKEN_ISSUER,
    ACCESS_TOKEN_LIFETIME,
    JWTConfig,
    create_access_token,
    validate_access_token,
)
from .password import hash_password, verify_dummy_password, verify_password
from .refresh import REFRESH_TOKEN_LIFETIME, generate_refresh_token

__all__ = [
    # Passwords
    "hash_password",
    "verify_password",
    "verify_dummy_password",
    # Access tokens
    "ACCESS_TOKEN_ISSUER",
    "ACCESS_TOKEN_LIFETIME",
    "JWTConfig",
    "create_access_token",
    "validate_access_token",
    # Refresh tokens
    "REFRESH_TOKEN_LIFETIME",
    "generate_refresh_token",
    # Headers
    "get_bearer_token",
    "get_api_key",
    # Composed operations
    "TokenPair",
    "authenticate",
    "login",
    "refresh",
    "revoke",
    # Errors
    "AuthError",
    "Unauthorized",
    "TokenError",
    "TokenMalformed",
    "SignatureInvalid",
    "TokenExpired",
    "IssuerMismatch",
    "SubjectInvalid",
    "BearerError",
    "HeaderMissing",
    "HeaderMalformed",
    "PasswordError",
    "HashingFailure",
    "VerificationFailure",
]
