from sqlalchemy import Column, String, Boolean, DateTime, Enum, Index, JSON, Uuid
from datetime import datetime
from .db import Base
import enum
import uuid


class UserRole(str, enum.Enum):
    USER = "User"
    ADMIN = "Admin"


class User(Base):
    __tablename__ = "users"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    # Stored exactly as registered; lookups are case-sensitive
    email = Column(String(255), nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.USER,
        nullable=False
    )
    is_active = Column(Boolean, default=True, nullable=False)
    email_confirmed = Column(Boolean, default=False, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        # Email is unique among users that are not soft-deleted
        Index(
            "uq_users_email_not_deleted",
            email,
            unique=True,
            sqlite_where=is_deleted.is_(False),
            postgresql_where=is_deleted.is_(False),
        ),
    )


class AuthEvent(Base):
    __tablename__ = "auth_events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Uuid, nullable=True)
    email = Column(String(255), nullable=True)
    event_type = Column(
        Enum("register", "login_success", "login_failure", name="auth_event_type"),
        nullable=False
    )
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)
    event_metadata = Column(JSON, nullable=True)

    __table_args__ = (
        Index('ix_auth_events_user_id', 'user_id'),
        Index('ix_auth_events_timestamp', 'timestamp'),
        Index('ix_auth_events_event_type', 'event_type'),
    )

    def to_dict(self) -> dict:
        """
        Serialize AuthEvent to a dictionary for the admin audit endpoint.

        Returns:
            Dictionary with all event fields, UUIDs as strings,
            datetimes in ISO 8601 format
        """
        return {
            "id": str(self.id),
            "user_id": str(self.user_id) if self.user_id else None,
            "email": self.email,
            "event_type": self.event_type,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "metadata": self.event_metadata or {}
        }
