"""
Authentication error types.

Messages never carry token, secret or password material.
"""


class AuthError(Exception):
    """Base class for authentication core errors."""


class Unauthorized(AuthError):
    """The single externally visible authentication failure."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class TokenError(AuthError):
    """An access token failed validation."""


class TokenMalformed(TokenError):
    """The token cannot be parsed into header, claims and signature."""


class SignatureInvalid(TokenError):
    """The token signature does not verify under the given secret."""


class TokenExpired(TokenError):
    """The token's expiry time has passed."""


class IssuerMismatch(TokenError):
    """The token was not issued as an access token."""


class SubjectInvalid(TokenError):
    """The token subject is not a well-formed user identifier."""


class BearerError(AuthError):
    """The Authorization header could not yield a credential."""


class HeaderMissing(BearerError):
    """The Authorization header is absent or blank."""


class HeaderMalformed(BearerError):
    """The Authorization header lacks a scheme and a credential."""


class PasswordError(AuthError):
    """Password hashing or verification could not be performed."""


class HashingFailure(PasswordError):
    """Salt generation or key derivation failed."""


class VerificationFailure(PasswordError):
    """The stored password hash is malformed."""
