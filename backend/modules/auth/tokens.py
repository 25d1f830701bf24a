"""
Session token issue and read.

Session tokens are HS256 JWTs signed with JWT_SECRET. They carry the
user id and normalized email; role flags are deliberately NOT embedded,
because roles are re-resolved from the database on every request.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from modules.users.models import User, normalize_email
from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import SessionClaims


def _secret(settings: Settings) -> str:
    if not settings.jwt_secret:
        raise ConfigurationError(
            "Server authentication not configured",
            code="JWT_SECRET_MISSING",
        )
    return settings.jwt_secret


def issue_session_token(user: User, settings: Optional[Settings] = None) -> str:
    """
    Create a signed session token for a user.

    Args:
        user: The user to issue the token for
        settings: Settings override (defaults to get_settings())

    Returns:
        Encoded JWT string
    """
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": user.id,
        "email": normalize_email(user.email),
        "name": user.name,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=max(1, settings.jwt_expire_minutes))).timestamp()),
        "iss": settings.jwt_issuer,
    }
    return jwt.encode(payload, _secret(settings), algorithm=settings.jwt_algorithm)


def read_session_token(token: Optional[str], settings: Optional[Settings] = None) -> SessionClaims:
    """
    Verify and decode a session token.

    Raises:
        MissingTokenError: If no token was supplied
        ExpiredTokenError: If the token has expired
        InvalidTokenError: For a bad signature, issuer or payload
    """
    if not token:
        raise MissingTokenError()

    settings = settings or get_settings()

    try:
        payload = jwt.decode(
            token,
            _secret(settings),
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iat", "sub", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {str(e)}")

    if not payload.get("email"):
        raise InvalidTokenError("Invalid token: missing email claim")

    return SessionClaims(**payload)
