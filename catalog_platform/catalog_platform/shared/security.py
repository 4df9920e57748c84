"""
Bearer token and role dependencies used by the routes of both services.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from .exceptions import ForbiddenError, InvalidTokenError
from .tokens import TokenClaims, decode_access_token

logger = logging.getLogger(__name__)


def get_current_claims(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> TokenClaims:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = authorization.split(" ", 1)[1].strip()
    try:
        return decode_access_token(token)
    except InvalidTokenError as exc:
        logger.info("Bearer token rejected: %s", exc.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.detail,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def require_admin(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
    if not claims.is_admin:
        logger.warning("Admin route denied: user_id=%s role=%s", claims.user_id, claims.role)
        raise ForbiddenError("Administrator role required")
    return claims
