"""Decoding of session JWTs (PyJWT).

Tokens are minted by the identity provider; this service only verifies them.
"""

from datetime import datetime
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from promptu.config import AuthSettings


class TokenClaims(BaseModel):
    """Claims carried by a session token."""

    user_id: UUID
    username: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Token is malformed, tampered with, expired or missing claims."""


def verify_token(token: str, settings: AuthSettings) -> TokenClaims:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
        return TokenClaims.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
