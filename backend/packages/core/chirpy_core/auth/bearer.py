"""Authorization header parsing."""

from .errors import HeaderMalformed, HeaderMissing


def _credential(header_value: str | None) -> str:
    value = (header_value or "").strip()
    if not value:
        raise HeaderMissing("Authorization header not found")

    parts = value.split()
    if len(parts) < 2:
        raise HeaderMalformed("Invalid authorization value")

    # The scheme in parts[0] is not checked.
    return parts[1]


def get_bearer_token(header_value: str | None) -> str:
    """
    Extract the credential from an `Authorization: Bearer <token>` header.

    Args:
        header_value: Raw header value, or None when the header is absent.

    Returns:
        The second whitespace-separated field, verbatim.

    Raises:
        HeaderMissing: If the value is empty after trimming.
        HeaderMalformed: If there is no field after the scheme.
    """
    return _credential(header_value)


def get_api_key(header_value: str | None) -> str:
    """Extract the key from an `Authorization: ApiKey <key>` header."""
    return _credential(header_value)
