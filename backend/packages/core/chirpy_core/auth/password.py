"""
Password hashing.

Argon2id with a single deployment-wide parameter set. The parameters are
encoded in every hash, so verification never needs configuration.
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import (
    HashingError,
    VerificationError,
    VerifyMismatchError,
)

from .errors import HashingFailure, VerificationFailure

TIME_COST = 3
MEMORY_COST_KIB = 64 * 1024
PARALLELISM = 4
HASH_LENGTH = 32
SALT_LENGTH = 16

_hasher = PasswordHasher(
    time_cost=TIME_COST,
    memory_cost=MEMORY_COST_KIB,
    parallelism=PARALLELISM,
    hash_len=HASH_LENGTH,
    salt_len=SALT_LENGTH,
    type=Type.ID,
)

# Decoy used to equalize timing when the account does not exist.
_dummy_hash: str | None = None


def hash_password(password: str) -> str:
    """
    Hash a password.

    Args:
        password: Plain text password (any content, including empty).

    Returns:
        Argon2id PHC string.

    Raises:
        HashingFailure: If salt generation or key derivation fails.
    """
    try:
        return _hasher.hash(password)
    except HashingError as e:
        raise HashingFailure("Password hashing failed") from e


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a stored hash.

    The full derivation always runs and digests are compared in constant time.

    Args:
        password: Plain text password.
        password_hash: Stored Argon2id PHC string.

    Returns:
        True if the password matches, False otherwise.

    Raises:
        VerificationFailure: If the hash string is malformed.
    """
    try:
        return _hasher.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (ValueError, VerificationError) as e:
        # InvalidHashError and non-ASCII hash strings both surface as ValueError
        raise VerificationFailure("Stored password hash is malformed") from e


def verify_dummy_password(password: str) -> None:
    """Spend one full verification on a decoy hash and discard the result."""
    global _dummy_hash

    if _dummy_hash is None:
        _dummy_hash = hash_password("chirpy-decoy-password")
    verify_password(password, _dummy_hash)
