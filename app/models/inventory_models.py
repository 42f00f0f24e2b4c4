"""
Inventory models: stores and the products they stock.

Both entities are soft-deletable (``deleted_at``) and timestamped. A product
belongs to exactly one store; physically deleting a store row cascades to its
products at the database level, while the API only ever soft-deletes.
"""
from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base, SoftDeleteMixin, TimestampMixin

STORE_NAME_MAX = 255
STORE_LOCATION_MAX = 255
PRODUCT_NAME_MAX = 255
PRODUCT_CATEGORY_MAX = 100
PRICE_PRECISION = 10
PRICE_SCALE = 2
QUANTITY_MAX = 2_147_483_647  # 32-bit INTEGER column


class Store(TimestampMixin, SoftDeleteMixin, Base):
    """A physical store location that owns a product catalog."""
    __tablename__ = "store"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(STORE_NAME_MAX), nullable=False)
    location: Mapped[str] = mapped_column(String(STORE_LOCATION_MAX), nullable=False)

    # Relationships
    products: Mapped[list[Product]] = relationship(
        "Product",
        back_populates="store",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name='{self.name}')>"


class Product(TimestampMixin, SoftDeleteMixin, Base):
    """
    A product stocked by a single store.

    Price is a fixed-point decimal with two places; quantity is the units on hand.
    """
    __tablename__ = "product"
    __table_args__ = (
        Index("ix_product_store_category", "store_id", "category"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("store.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(PRODUCT_NAME_MAX), nullable=False)
    category: Mapped[str] = mapped_column(String(PRODUCT_CATEGORY_MAX), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    store: Mapped[Store] = relationship("Store", back_populates="products")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', store_id={self.store_id})>"

