"""Bearer token verification service."""

import logfire

from forum.config import AuthSettings
from forum.domain.value import UserId
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Verifies access tokens minted by the external identity service.

    ``create_token`` mints tokens in the issuer's format for local tooling and
    tests; the API itself never issues them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Mint a token for ``user_id`` signed with the configured secret."""
        return create_token(user_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token and check its signature and expiry.

        Args:
            token: Encoded JWT

        Returns:
            Token payload

        Raises:
            JWTError: If the token is malformed, tampered with or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the acting user, treating any bad token as anonymous.

        Args:
            token: Bearer token, if the request carried one

        Returns:
            The token's user ID, or None when the token is missing or invalid
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except JWTError:
            return None
