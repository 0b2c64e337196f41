"""
Refresh token generation.

Refresh tokens are opaque random strings. Their validity lives entirely in
the refresh token store; nothing here can check a token.
"""

import secrets
from datetime import timedelta

REFRESH_TOKEN_BYTES = 32
REFRESH_TOKEN_LIFETIME = timedelta(days=60)


def generate_refresh_token() -> str:
    """
    Generate a new refresh token.

    Returns:
        64 hex characters carrying 256 bits from the OS CSPRNG.
    """
    return secrets.token_hex(REFRESH_TOKEN_BYTES)
