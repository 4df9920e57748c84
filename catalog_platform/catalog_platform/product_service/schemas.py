from pydantic import BaseModel, ConfigDict, Field

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    is_available: bool = True


class ProductUpdate(BaseModel):
    """Partial update; only fields the client actually sent are applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=18, decimal_places=2)
    is_available: Optional[bool] = None


class ProductSearchFilter(BaseModel):
    name: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_available: Optional[bool] = None
    user_id: Optional[UUID] = None


class ProductOut(BaseModel):
    id: UUID
    name: str
    description: str
    price: Decimal
    is_available: bool
    user_id: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
