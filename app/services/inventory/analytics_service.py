"""
Store Analytics Service.

Computes per-store inventory figures with aggregate queries. Nothing is cached;
every call reflects the current rows.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import case, func, select

from app.core.config import settings
from app.models.inventory_models import Product
from app.models.inventory_schemas import CategoryBreakdown, StoreAnalytics, quantize_money
from .base import BaseInventoryService, active_scope

logger = logging.getLogger(__name__)


class StoreAnalyticsService(BaseInventoryService):
    """Service for store-level inventory analytics."""

    def get_store_analytics(self, store_id: uuid.UUID) -> StoreAnalytics:
        """
        Aggregate the active products of a store.

        Low stock means ``0 < quantity < LOW_STOCK_THRESHOLD``; out of stock means
        ``quantity == 0``. Empty stores report zeros and an empty breakdown.
        """
        stock_value = Product.price * Product.quantity
        threshold = settings.LOW_STOCK_THRESHOLD
        summary = self._db.execute(
            select(
                func.count(Product.id).label("total_products"),
                func.coalesce(func.sum(stock_value), 0).label("total_value"),
                func.coalesce(func.avg(Product.price), 0).label("avg_product_price"),
                func.coalesce(
                    func.sum(case(((Product.quantity > 0) & (Product.quantity < threshold), 1), else_=0)), 0
                ).label("low_stock_items"),
                func.coalesce(func.sum(case((Product.quantity == 0, 1), else_=0)), 0).label("out_of_stock_items"),
                func.count(func.distinct(Product.category)).label("categories"),
            ).where(Product.store_id == store_id, active_scope(Product))
        ).one()

        return StoreAnalytics(
            total_products=summary.total_products or 0,
            total_value=quantize_money(summary.total_value),
            avg_product_price=quantize_money(summary.avg_product_price),
            low_stock_items=int(summary.low_stock_items or 0),
            out_of_stock_items=int(summary.out_of_stock_items or 0),
            categories=summary.categories or 0,
            category_breakdown=self._category_breakdown(store_id),
        )

    # ========================================================================
    # Private Helpers
    # ========================================================================

    def _category_breakdown(self, store_id: uuid.UUID) -> list[CategoryBreakdown]:
        """Product count and stock value per category, largest categories first."""
        product_count = func.count(Product.id)
        rows = self._db.execute(
            select(
                Product.category,
                product_count.label("product_count"),
                func.coalesce(func.sum(Product.price * Product.quantity), 0).label("total_value"),
            )
            .where(Product.store_id == store_id, active_scope(Product))
            .group_by(Product.category)
            .order_by(product_count.desc(), Product.category)
        ).all()

        return [
            CategoryBreakdown(
                category=row.category,
                count=row.product_count,
                total_value=quantize_money(row.total_value),
            )
            for row in rows
        ]
