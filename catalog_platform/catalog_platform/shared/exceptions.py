"""Service-layer exceptions.

Services raise these instead of HTTP errors; ``handlers.register_exception_handlers``
maps each family to a status code at the API boundary.
"""
from typing import Optional
from uuid import UUID


class ServiceError(Exception):
    """Base exception for all catalog platform service errors."""

    status_code = 500
    public_message: Optional[str] = None

    def __init__(self, message: str = "Service error"):
        self.message = message
        super().__init__(self.message)

    @property
    def detail(self) -> str:
        """Message safe to return to the client."""
        return self.public_message or self.message


class DuplicateIdentityError(ServiceError):
    """Raised when registering an email already held by a non-deleted user."""

    status_code = 400

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)


class AuthenticationError(ServiceError):
    """Base for failures that collapse to a single 401 for the client."""

    status_code = 401
    public_message = "Invalid credentials"
    reason = "authentication_failed"

    def __init__(self, message: str = "Authentication failed", user_id: Optional[UUID] = None):
        self.user_id = user_id
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self, reason: str = "bad_password", user_id: Optional[UUID] = None):
        self.reason = reason
        super().__init__("Invalid email or password", user_id=user_id)


class AccountDeactivatedError(AuthenticationError):
    """Raised when the credentials are valid but the account is inactive."""

    reason = "account_deactivated"

    def __init__(self, user_id: Optional[UUID] = None):
        super().__init__("Account is deactivated", user_id=user_id)


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is missing, malformed, expired or badly signed."""

    public_message = "Not authenticated"
    reason = "invalid_token"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class ForbiddenError(ServiceError):
    """Raised when an authenticated caller may not perform the operation."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(ServiceError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class FeatureNotImplementedError(ServiceError):
    """Raised by operations that are declared but not built yet."""

    status_code = 501

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} is not implemented yet")
