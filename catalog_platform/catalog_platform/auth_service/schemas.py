from pydantic import BaseModel, ConfigDict, Field, field_validator

from datetime import datetime
from typing import Optional
from uuid import UUID

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserSummary(BaseModel):
    id: UUID
    name: str
    email: str
    role: str
    is_active: bool


class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserSummary


class UserOut(BaseModel):
    id: UUID
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("role", mode="before")
    @classmethod
    def role_as_text(cls, value):
        return getattr(value, "value", value)


# Account recovery (not implemented yet)
class ConfirmEmailRequest(BaseModel):
    email: str
    token: str


class ForgotPasswordRequest(BaseModel):
    email: str


class ResetPasswordRequest(BaseModel):
    email: str
    token: str
    new_password: str = Field(min_length=6)


class AuthEventOut(BaseModel):
    id: str
    user_id: Optional[str] = None
    email: Optional[str] = None
    event_type: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    timestamp: Optional[str] = None
    metadata: dict = {}
