"""
Inventory Service Module.

The InventoryService class acts as a facade that composes the specialized
store, product and analytics services for a unified API.

Usage:
    from app.services.inventory import InventoryService, build_inventory_service

    service = build_inventory_service(db)

    # Store operations
    store = service.create_store(data)
    stores, pagination = service.list_stores(page=1, limit=10)

    # Product operations
    product = service.create_product(data)
    products, pagination = service.list_products(filters=ProductFilters(category="Books"))

    # Analytics
    analytics = service.get_store_analytics(store.id)
"""
from __future__ import annotations

import uuid
from typing import Sequence

from sqlalchemy.orm import Session

from app.models.inventory_models import Product, Store
from app.models.inventory_schemas import (
    PaginationMeta,
    ProductCreate,
    ProductFilters,
    ProductUpdate,
    StoreAnalytics,
    StoreCreate,
)

from .analytics_service import StoreAnalyticsService
from .base import active_scope
from .product_service import ProductService
from .store_service import StoreService


class InventoryService:
    """
    Facade for inventory management operations.

    Composes specialized services to provide a unified API while
    maintaining separation of concerns internally.
    """

    def __init__(self, db: Session):
        """Initialize all sub-services."""
        self._db = db

        self._stores = StoreService(db)
        self._products = ProductService(db)
        self._analytics = StoreAnalyticsService(db)

    # ========================================================================
    # Store Operations (delegated to StoreService)
    # ========================================================================

    def list_stores(self, page: int = 1, limit: int = 10) -> tuple[Sequence[Store], PaginationMeta]:
        """List active stores."""
        return self._stores.list_stores(page=page, limit=limit)

    def get_store(self, store_id: uuid.UUID) -> Store | None:
        """Get an active store by ID."""
        return self._stores.get_store(store_id)

    def create_store(self, data: StoreCreate) -> Store:
        """Create a new store."""
        return self._stores.create_store(data)

    def list_store_products(
        self,
        store_id: uuid.UUID,
        page: int = 1,
        limit: int = 10,
        category: str | None = None,
    ) -> tuple[Sequence[Product], PaginationMeta]:
        """List active products of a store."""
        return self._stores.list_store_products(store_id, page=page, limit=limit, category=category)

    def delete_store(self, store_id: uuid.UUID) -> Store | None:
        """Soft delete a store."""
        return self._stores.delete_store(store_id)

    # ========================================================================
    # Product Operations (delegated to ProductService)
    # ========================================================================

    def list_products(
        self,
        page: int = 1,
        limit: int = 10,
        filters: ProductFilters | None = None,
    ) -> tuple[Sequence[Product], PaginationMeta]:
        """List products with filtering and pagination."""
        return self._products.list_products(page=page, limit=limit, filters=filters)

    def get_product(self, product_id: uuid.UUID) -> Product | None:
        """Get an active product by ID."""
        return self._products.get_product(product_id)

    def create_product(self, data: ProductCreate) -> Product:
        """Create a new product."""
        return self._products.create_product(data)

    def update_product(self, product_id: uuid.UUID, data: ProductUpdate) -> Product | None:
        """Update a product."""
        return self._products.update_product(product_id, data)

    def delete_product(self, product_id: uuid.UUID) -> Product | None:
        """Soft delete a product."""
        return self._products.delete_product(product_id)

    # ========================================================================
    # Analytics Operations (delegated to StoreAnalyticsService)
    # ========================================================================

    def get_store_analytics(self, store_id: uuid.UUID) -> StoreAnalytics:
        """Get aggregate inventory figures for a store."""
        return self._analytics.get_store_analytics(store_id)


def build_inventory_service(db: Session) -> InventoryService:
    """Factory function to create an InventoryService instance."""
    return InventoryService(db=db)


# Re-export sub-services for direct access if needed
__all__ = [
    "InventoryService",
    "build_inventory_service",
    "active_scope",
    "ProductService",
    "StoreService",
    "StoreAnalyticsService",
]
