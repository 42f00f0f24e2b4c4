"""
Base inventory service with shared functionality.

Provides the database session and the query building blocks every inventory
service composes: the active-scope predicate and paginated listing.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.orm import Session

from app.db.base_class import SoftDeleteMixin
from app.models.inventory_schemas import PaginationMeta
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SoftDeleteMixin)


def active_scope(model: type[SoftDeleteMixin]) -> ColumnElement[bool]:
    """Predicate excluding soft-deleted rows of ``model``."""
    return model.active()


class BaseInventoryService:
    """
    Base service class with shared inventory functionality.

    All inventory-related services inherit from this class
    to share the database session and the active-scope helpers.
    """

    def __init__(self, db: Session):
        """
        Initialize the base inventory service.

        Args:
            db: SQLAlchemy database session
        """
        self._db = db

    @property
    def db(self) -> Session:
        """Database session accessor."""
        return self._db

    def _select_active(self, model: type[ModelT], *conditions: ColumnElement[bool]) -> Select:
        """SELECT over active rows of ``model`` AND-ed with ``conditions``, in insertion order (id breaks timestamp ties)."""
        return (
            select(model)
            .where(active_scope(model), *conditions)
            .order_by(model.created_at, model.id)
        )

    def _get_active(self, model: type[ModelT], entity_id: Any) -> ModelT | None:
        return self._db.scalar(self._select_active(model, model.id == entity_id))

    def _paginate(self, stmt: Select, page: int, limit: int) -> tuple[Sequence[Any], PaginationMeta]:
        return paginate(self._db, stmt, page, limit)
