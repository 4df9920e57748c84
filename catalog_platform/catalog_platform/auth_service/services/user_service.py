"""
User administration over the credential store
"""
import logging
from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from ..models import User
from ...shared.exceptions import ForbiddenError, NotFoundError
from ...shared.tokens import TokenClaims

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def _get_existing(self, user_id: UUID) -> User:
        user = self.db.get(User, user_id)
        if user is None or user.is_deleted:
            raise NotFoundError("User not found")
        return user

    def list_users(self) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.is_deleted.is_(False))
            .order_by(User.created_at.asc())
            .all()
        )

    def get_user(self, user_id: UUID, claims: TokenClaims) -> User:
        """Users may read their own record; administrators may read any."""
        user = self._get_existing(user_id)
        if not claims.is_admin and claims.user_id != user_id:
            raise ForbiddenError("You can only view your own account")
        return user

    def set_active(self, user_id: UUID, active: bool) -> User:
        user = self._get_existing(user_id)
        user.is_active = active
        user.updated_at = datetime.utcnow()
        self.db.commit()
        logger.info("User %s: user_id=%s", "activated" if active else "deactivated", user_id)
        return user

    def soft_delete(self, user_id: UUID) -> None:
        user = self._get_existing(user_id)
        user.is_deleted = True
        user.updated_at = datetime.utcnow()
        self.db.commit()
        logger.info("User soft-deleted: user_id=%s", user_id)
