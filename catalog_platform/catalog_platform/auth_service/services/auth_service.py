"""
Authentication Service
Registration and login against the credential store
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..auth import dummy_verify, hash_password, verify_password
from ..models import User, UserRole
from ..schemas import AuthResponse, UserSummary
from ...shared.exceptions import (
    AccountDeactivatedError,
    DuplicateIdentityError,
    FeatureNotImplementedError,
    InvalidCredentialsError,
)
from ...shared.tokens import create_access_token

logger = logging.getLogger(__name__)


class AuthService:
    """Stateless per-request authentication operations over one database session"""

    def __init__(self, db: Session):
        self.db = db

    def _find_active_identity(self, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(User.email == email, User.is_deleted.is_(False))
            .first()
        )

    @staticmethod
    def _build_response(user: User) -> AuthResponse:
        token, expires_at = create_access_token(user)
        return AuthResponse(
            token=token,
            expires_at=expires_at,
            user=UserSummary(
                id=user.id,
                name=user.name,
                email=user.email,
                role=user.role.value,
                is_active=user.is_active,
            ),
        )

    def register(self, name: str, email: str, password: str) -> AuthResponse:
        """
        Register a new user with the ``User`` role

        Args:
            name: Display name
            email: Email, stored as given
            password: Plain text password

        Returns:
            AuthResponse: token, expiry and user summary

        Raises:
            DuplicateIdentityError: a non-deleted user already holds the email
        """
        if self._find_active_identity(email) is not None:
            raise DuplicateIdentityError()

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=UserRole.USER,
            is_active=True,
            email_confirmed=False,
            created_at=datetime.utcnow(),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # A concurrent registration won the unique index
            self.db.rollback()
            logger.info("Registration lost uniqueness race for email=%s", email)
            raise DuplicateIdentityError() from exc
        self.db.refresh(user)

        logger.info("Registered user: user_id=%s email=%s", user.id, user.email)
        return self._build_response(user)

    def login(self, email: str, password: str) -> AuthResponse:
        """
        Authenticate by email and password

        Raises:
            InvalidCredentialsError: unknown email or wrong password
            AccountDeactivatedError: correct credentials on an inactive account
        """
        user = self._find_active_identity(email)
        if user is None:
            dummy_verify()
            raise InvalidCredentialsError(reason="unknown_email")
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError(reason="bad_password", user_id=user.id)
        if not user.is_active:
            raise AccountDeactivatedError(user_id=user.id)

        logger.info("Successful login: user_id=%s", user.id)
        return self._build_response(user)

    def confirm_email(self, email: str, token: str) -> bool:
        raise FeatureNotImplementedError("Email confirmation")

    def forgot_password(self, email: str) -> bool:
        raise FeatureNotImplementedError("Password recovery")

    def reset_password(self, email: str, token: str, new_password: str) -> bool:
        raise FeatureNotImplementedError("Password reset")
