"""
Auth events router - administrator view of the authentication audit log.
"""
import logging
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import AuthEvent
from ..schemas import AuthEventOut
from ...shared.security import require_admin
from ...shared.tokens import TokenClaims

router = APIRouter(prefix="/admin", tags=["auth-events"])
logger = logging.getLogger(__name__)

MAX_EVENT_LIMIT = 1000


@router.get("/auth-events", response_model=List[AuthEventOut])
def get_auth_events(
    limit: int = Query(default=50, ge=1),
    event_type: Optional[str] = None,
    user_id: Optional[UUID] = None,
    admin: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Get recent authentication events, newest first.

    Args:
        limit: Maximum number of events to return (default 50, max 1000)
        event_type: Filter by event type (optional)
        user_id: Filter by user ID (optional)

    Raises:
        400: If limit exceeds 1000
        422: If limit is below 1
    """
    if limit > MAX_EVENT_LIMIT:
        raise HTTPException(
            status_code=400,
            detail=f"Limit cannot exceed {MAX_EVENT_LIMIT} events"
        )

    query = db.query(AuthEvent)

    if event_type:
        query = query.filter(AuthEvent.event_type == event_type)

    if user_id:
        query = query.filter(AuthEvent.user_id == user_id)

    events = query.order_by(AuthEvent.timestamp.desc()).limit(limit).all()

    logger.info(
        "Auth events accessed: admin_id=%s limit=%s event_type=%s user_id=%s results=%s",
        admin.user_id, limit, event_type, user_id, len(events)
    )

    return [event.to_dict() for event in events]
