"""
Product Service
Catalog CRUD, filtered search and owner-keyed bulk soft-delete/restore
"""
import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.orm import Session

from ..models import Product
from ..schemas import ProductCreate, ProductSearchFilter, ProductUpdate
from ...shared.config import settings
from ...shared.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "price", "is_available")


class ProductService:
    """Per-request product operations; every read skips soft-deleted rows"""

    def __init__(self, db: Session):
        self.db = db

    def _visible(self):
        return self.db.query(Product).filter(Product.is_deleted.is_(False))

    def get_by_id(self, product_id: UUID) -> Optional[Product]:
        return self._visible().filter(Product.id == product_id).first()

    def search(
        self,
        filters: Optional[ProductSearchFilter] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> List[Product]:
        """
        Filter and paginate products in creation order

        Args:
            filters: Name substring (case-insensitive), price range, availability, owner
            page: 1-based page number; values below 1 are treated as 1
            page_size: Rows per page, clamped to MAX_PAGE_SIZE

        Returns:
            List[Product]: the requested page
        """
        filters = filters or ProductSearchFilter()
        if page_size is None:
            page_size = settings.DEFAULT_PAGE_SIZE
        page_size = max(1, min(page_size, settings.MAX_PAGE_SIZE))
        page = max(1, page)

        query = self._visible()

        if filters.name:
            query = query.filter(Product.name.icontains(filters.name, autoescape=True))

        if filters.min_price is not None:
            query = query.filter(Product.price >= filters.min_price)

        if filters.max_price is not None:
            query = query.filter(Product.price <= filters.max_price)

        if filters.is_available is not None:
            query = query.filter(Product.is_available.is_(filters.is_available))

        if filters.user_id is not None:
            query = query.filter(Product.user_id == filters.user_id)

        return (
            query.order_by(Product.created_at.asc(), Product.seq.asc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )

    def create(self, payload: ProductCreate, owner_id: UUID) -> Product:
        product = Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            is_available=payload.is_available,
            user_id=owner_id,
            created_at=datetime.utcnow(),
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)

        logger.info("Product created: product_id=%s owner_id=%s", product.id, owner_id)
        return product

    def _get_owned(self, product_id: UUID, acting_user_id: UUID, action: str) -> Optional[Product]:
        product = self.get_by_id(product_id)
        if product is None:
            return None
        if product.user_id != acting_user_id:
            logger.warning(
                "Ownership check failed: action=%s product_id=%s owner_id=%s acting_user_id=%s",
                action, product_id, product.user_id, acting_user_id
            )
            raise ForbiddenError(f"You can only {action} your own products")
        return product

    def update(self, product_id: UUID, payload: ProductUpdate, acting_user_id: UUID) -> Product:
        """
        Apply a partial update as the product's owner

        Only fields the client sent are applied. ``None`` means no change; an
        empty string description clears it.

        Raises:
            NotFoundError: no visible product with this id
            ForbiddenError: acting user is not the owner
        """
        product = self._get_owned(product_id, acting_user_id, "edit")
        if product is None:
            raise NotFoundError("Product not found")

        changes = payload.model_dump(exclude_unset=True)
        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(product, field, changes[field])

        product.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(product)

        logger.info("Product updated: product_id=%s fields=%s", product_id, sorted(changes))
        return product

    def delete(self, product_id: UUID, acting_user_id: UUID) -> bool:
        product = self._get_owned(product_id, acting_user_id, "delete")
        if product is None:
            return False

        product.is_deleted = True
        product.updated_at = datetime.utcnow()
        self.db.commit()

        logger.info("Product soft-deleted: product_id=%s", product_id)
        return True

    def _set_deleted_for_owner(self, owner_id: UUID, deleted: bool) -> int:
        # One UPDATE, committed as a single transaction
        result = self.db.execute(
            update(Product)
            .where(Product.user_id == owner_id, Product.is_deleted.is_(not deleted))
            .values(is_deleted=deleted, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount

    def soft_delete_by_owner(self, owner_id: UUID) -> int:
        count = self._set_deleted_for_owner(owner_id, True)
        logger.info("Bulk soft-delete: owner_id=%s products=%s", owner_id, count)
        return count

    def restore_by_owner(self, owner_id: UUID) -> int:
        count = self._set_deleted_for_owner(owner_id, False)
        logger.info("Bulk restore: owner_id=%s products=%s", owner_id, count)
        return count
