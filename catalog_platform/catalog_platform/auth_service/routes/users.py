"""
User administration endpoints.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import UserOut
from ..services.user_service import UserService
from ...shared.security import get_current_claims, require_admin
from ...shared.tokens import TokenClaims

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("", response_model=List[UserOut], dependencies=[Depends(require_admin)])
def list_users(service: UserService = Depends(get_user_service)):
    return service.list_users()


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: UUID,
    claims: TokenClaims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    return service.get_user(user_id, claims)


@router.patch("/{user_id}/activate", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def activate_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    service.set_active(user_id, True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}/deactivate", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def deactivate_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    service.set_active(user_id, False)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    service.soft_delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
