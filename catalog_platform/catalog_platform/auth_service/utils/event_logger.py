"""
Event logger utility for authentication events.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import Request
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from ..models import AuthEvent

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
}


def client_ip(request: Request) -> Optional[str]:
    ip_address = None
    if request.client:
        ip_address = request.client.host

    # X-Forwarded-For can contain multiple IPs, take the first one
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()

    return ip_address


def log_auth_event(
    event_type: str,
    request: Request,
    db: Session,
    user_id: Optional[UUID] = None,
    email: Optional[str] = None,
    metadata: dict = None
) -> None:
    """
    Record an authentication event in the audit table.

    Login failures store the precise reason here while the HTTP response
    stays generic.

    Args:
        event_type: One of: register, login_success, login_failure
        request: FastAPI Request object
        db: Database session
        user_id: Id of the user involved, when known
        email: Email presented by the client
        metadata: Optional dictionary of additional context

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    ip_address = client_ip(request)
    user_agent = request.headers.get("user-agent")

    try:
        auth_event = AuthEvent(
            user_id=user_id,
            email=email,
            event_type=event_type,
            ip_address=ip_address,
            user_agent=user_agent,
            timestamp=datetime.utcnow(),
            event_metadata=metadata or {}
        )

        db.add(auth_event)
        db.commit()

        logger.info(
            "AUTH %s user_id=%s email=%s ip=%s metadata=%s",
            event_type, user_id, email, ip_address, metadata or {}
        )

    except SQLAlchemyError as e:
        # Audit failures must not break the auth flow
        logger.warning(
            "Failed to log auth event: user_id=%s event_type=%s error=%s",
            user_id, event_type, e
        )
        db.rollback()
