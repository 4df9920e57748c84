"""
Product catalog endpoints.

Reads are anonymous; mutations need a bearer token and the admin bulk
endpoints need the Admin role.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import ProductCreate, ProductOut, ProductSearchFilter, ProductUpdate
from ..services.product_service import ProductService
from ...shared.config import settings
from ...shared.security import get_current_claims, require_admin
from ...shared.tokens import TokenClaims

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(
    name: Optional[str] = None,
    min_price: Optional[Decimal] = Query(default=None, ge=0),
    max_price: Optional[Decimal] = Query(default=None, ge=0),
    is_available: Optional[bool] = None,
    user_id: Optional[UUID] = None,
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    service: ProductService = Depends(get_product_service),
):
    filters = ProductSearchFilter(
        name=name,
        min_price=min_price,
        max_price=max_price,
        is_available=is_available,
        user_id=user_id,
    )
    return service.search(filters, page=page, page_size=page_size)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    product = service.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    claims: TokenClaims = Depends(get_current_claims),
    service: ProductService = Depends(get_product_service),
):
    return service.create(payload, claims.user_id)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    service: ProductService = Depends(get_product_service),
):
    return service.update(product_id, payload, claims.user_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: UUID,
    claims: TokenClaims = Depends(get_current_claims),
    service: ProductService = Depends(get_product_service),
):
    if not service.delete(product_id, claims.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/admin/deactivate-user-products/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def deactivate_user_products(user_id: UUID, service: ProductService = Depends(get_product_service)):
    service.soft_delete_by_owner(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/admin/activate-user-products/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def activate_user_products(user_id: UUID, service: ProductService = Depends(get_product_service)):
    service.restore_by_owner(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
