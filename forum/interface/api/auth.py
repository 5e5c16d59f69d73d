"""Bearer token extraction for authenticated routes."""

from fastapi import Header


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Read the token from an ``Authorization: Bearer <token>`` header.

    Returns:
        The raw token, or None if the header is absent or not a bearer header
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
