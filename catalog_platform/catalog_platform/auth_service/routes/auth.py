"""
Registration, login and account recovery endpoints.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import (
    AuthResponse,
    ConfirmEmailRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from ..services.auth_service import AuthService
from ..utils.event_logger import log_auth_event
from ...shared.exceptions import AuthenticationError

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post("/register", response_model=AuthResponse)
def register(
    payload: RegisterRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    result = service.register(payload.name, payload.email, payload.password)
    log_auth_event("register", request, service.db, user_id=result.user.id, email=result.user.email)
    return result


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    try:
        result = service.login(credentials.email, credentials.password)
    except AuthenticationError as exc:
        log_auth_event(
            "login_failure", request, service.db,
            user_id=exc.user_id, email=credentials.email, metadata={"reason": exc.reason}
        )
        raise

    log_auth_event("login_success", request, service.db, user_id=result.user.id, email=result.user.email)
    return result


@router.post("/confirm-email", status_code=status.HTTP_200_OK)
def confirm_email(payload: ConfirmEmailRequest, service: AuthService = Depends(get_auth_service)):
    return {"confirmed": service.confirm_email(payload.email, payload.token)}


@router.post("/forgot-password", status_code=status.HTTP_200_OK)
def forgot_password(payload: ForgotPasswordRequest, service: AuthService = Depends(get_auth_service)):
    return {"sent": service.forgot_password(payload.email)}


@router.post("/reset-password", status_code=status.HTTP_200_OK)
def reset_password(payload: ResetPasswordRequest, service: AuthService = Depends(get_auth_service)):
    return {"reset": service.reset_password(payload.email, payload.token, payload.new_password)}
