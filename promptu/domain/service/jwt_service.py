"""Session token service."""

import logfire

from promptu.config import AuthSettings
from promptu.util.jwt import JWTError, TokenClaims, verify_token

from .base import Service


class JWTService(Service):
    """Reads the caller's identity from the session token.

    Tokens are minted by the identity provider. Missing or invalid tokens
    make the caller anonymous; only mutating routes turn that into a 401.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Rejected session token", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User ID from the token, or None for anonymous callers."""
        if not token:
            return None

        try:
            return str(self.verify_token(token).user_id)
        except JWTError:
            return None
