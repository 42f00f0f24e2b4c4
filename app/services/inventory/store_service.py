"""
Store Service - stores and their store-scoped product listings.

Follows SRP: Only handles store-related operations.
"""
from __future__ import annotations

import logging
import uuid
from typing import Sequence

from app.models.inventory_models import Product, Store
from app.models.inventory_schemas import PaginationMeta, ProductFilters, StoreCreate
from app.services.inventory.base import BaseInventoryService
from app.services.inventory.product_service import product_filter_conditions

logger = logging.getLogger(__name__)


class StoreService(BaseInventoryService):
    """Service for store operations."""

    def list_stores(self, page: int = 1, limit: int = 10) -> tuple[Sequence[Store], PaginationMeta]:
        """List active stores with pagination."""
        return self._paginate(self._select_active(Store), page, limit)

    def get_store(self, store_id: uuid.UUID) -> Store | None:
        """Get an active store by ID."""
        return self._get_active(Store, store_id)

    def create_store(self, data: StoreCreate) -> Store:
        """Create a new store."""
        store = Store(name=data.name, location=data.location)
        self._db.add(store)
        self._db.commit()
        self._db.refresh(store)
        logger.info("Created store: %s (id=%s)", store.name, store.id)
        return store

    def list_store_products(
        self,
        store_id: uuid.UUID,
        page: int = 1,
        limit: int = 10,
        category: str | None = None,
    ) -> tuple[Sequence[Product], PaginationMeta]:
        """
        List active products of one store, optionally narrowed to a category.

        The caller is responsible for checking that the store exists.
        """
        filters = ProductFilters(store_id=store_id, category=category)
        stmt = self._select_active(Product, *product_filter_conditions(filters))
        return self._paginate(stmt, page, limit)

    def delete_store(self, store_id: uuid.UUID) -> Store | None:
        """
        Soft delete an active store.

        Products keep their own ``deleted_at``; they are not soft-deleted with the store.
        """
        store = self.get_store(store_id)
        if not store:
            return None

        store.soft_delete()
        self._db.commit()
        logger.info("Deleted store: %s (id=%s)", store.name, store.id)
        return store
