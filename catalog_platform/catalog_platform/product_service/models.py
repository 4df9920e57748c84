from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, Numeric, Uuid
from datetime import datetime
from .db import Base
import uuid


class Product(Base):
    __tablename__ = "products"
    # Insertion order; breaks ties between equal created_at values
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(Uuid, unique=True, index=True, nullable=False, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), default="", nullable=False)
    price = Column(Numeric(18, 2), nullable=False)
    is_available = Column(Boolean, default=True, nullable=False)
    # Owning user from the auth service; set at creation, never changed
    user_id = Column(Uuid, nullable=False, index=True)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_products_available_deleted", "is_available", "is_deleted"),
    )
