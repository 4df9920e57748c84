"""JWT access token issuing and validation.

The auth service issues tokens; both services validate them with the same
secret, issuer and audience.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt

from .config import settings
from .exceptions import InvalidTokenError

REQUIRED_CLAIMS = ["sub", "exp", "iss", "aud"]
ADMIN_ROLE = "Admin"


@dataclass(frozen=True)
class TokenClaims:
    user_id: UUID
    email: str
    role: str
    name: str
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def _role_text(role) -> str:
    return getattr(role, "value", role)


def create_access_token(user, expires_delta: Optional[timedelta] = None) -> tuple[str, datetime]:
    """
    Issue a signed access token for a user.

    Args:
        user: Object exposing ``id``, ``email``, ``role`` and ``name``
        expires_delta: Validity window, defaults to ACCESS_TOKEN_EXPIRE_HOURS

    Returns:
        Tuple of (encoded token, expiry as an aware UTC datetime)
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)

    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + expires_delta
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "role": _role_text(user.role),
        "name": user.name,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, expires_at


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature, issuer, audience and expiry of a token.

    Every failure raises the same InvalidTokenError so callers cannot tell
    an expired token from a forged one.
    """
    try:
        data = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenClaims(
            user_id=UUID(str(data["sub"])),
            email=data.get("email", ""),
            role=data.get("role", ""),
            name=data.get("name", ""),
            expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
        )
    except (jwt.InvalidTokenError, ValueError, TypeError, AttributeError) as exc:
        raise InvalidTokenError(f"Token rejected: {exc.__class__.__name__}") from exc
