"""
Product Service - CRUD and filtered listing for products.

Follows SRP: Only handles product-related operations.
"""
from __future__ import annotations

import logging
import uuid
from typing import Sequence

from sqlalchemy import ColumnElement
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, StoreReferenceError
from app.db.base_class import utcnow
from app.models.inventory_models import Product, Store
from app.models.inventory_schemas import PaginationMeta, ProductCreate, ProductFilters, ProductUpdate
from app.services.inventory.base import BaseInventoryService

logger = logging.getLogger(__name__)


def product_filter_conditions(filters: ProductFilters | None) -> list[ColumnElement[bool]]:
    """Translate supplied filters into WHERE conditions (AND-ed by the caller)."""
    if filters is None:
        return []
    conditions: list[ColumnElement[bool]] = []
    if filters.category:
        conditions.append(Product.category == filters.category)
    if filters.store_id:
        conditions.append(Product.store_id == filters.store_id)
    if filters.min_price is not None:
        conditions.append(Product.price >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(Product.price <= filters.max_price)
    if filters.search:
        # LIKE with wildcards in the term escaped; case-sensitive on every backend
        conditions.append(Product.name.contains(filters.search, autoescape=True))
    return conditions


class ProductService(BaseInventoryService):
    """
    Service for product operations.

    Every read and write is restricted to active (not soft-deleted) products.
    """

    def list_products(
        self,
        page: int = 1,
        limit: int = 10,
        filters: ProductFilters | None = None,
    ) -> tuple[Sequence[Product], PaginationMeta]:
        """
        List products with filtering and pagination.

        Returns a tuple of (products, pagination).
        """
        stmt = self._select_active(Product, *product_filter_conditions(filters))
        return self._paginate(stmt, page, limit)

    def get_product(self, product_id: uuid.UUID) -> Product | None:
        """Get an active product by ID."""
        return self._get_active(Product, product_id)

    def create_product(self, data: ProductCreate) -> Product:
        """
        Create a new product.

        The store reference is enforced by the database; a dangling ``store_id``
        is reported as a conflict.
        """
        product = Product(
            store_id=data.store_id,
            name=data.name,
            category=data.category,
            price=data.price,
            quantity=data.quantity,
        )
        self._db.add(product)
        try:
            self._db.commit()
        except IntegrityError as exc:
            self._db.rollback()
            if self._db.get(Store, data.store_id) is None:
                logger.info("Rejected product for unknown store %s", data.store_id)
                raise StoreReferenceError(str(data.store_id)) from exc
            raise ConflictError() from exc
        self._db.refresh(product)
        logger.info("Created product: %s (id=%s) in store %s", product.name, product.id, product.store_id)
        return product

    def update_product(self, product_id: uuid.UUID, data: ProductUpdate) -> Product | None:
        """Merge the supplied fields into an active product."""
        product = self.get_product(product_id)
        if not product:
            return None

        for key, value in data.changes().items():
            setattr(product, key, value)
        product.updated_at = utcnow()

        self._db.commit()
        self._db.refresh(product)
        logger.info("Updated product: %s (id=%s)", product.name, product.id)
        return product

    def delete_product(self, product_id: uuid.UUID) -> Product | None:
        """Soft delete an active product; ``None`` if missing or already deleted."""
        product = self.get_product(product_id)
        if not product:
            return None

        product.soft_delete()
        self._db.commit()
        logger.info("Deleted product: %s (id=%s)", product.name, product.id)
        return product
