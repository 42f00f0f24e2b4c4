"""Offset pagination over SQLAlchemy queries."""
from __future__ import annotations

import math
from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from app.models.inventory_schemas import PaginationMeta

# Largest OFFSET a 64-bit SQL integer parameter can carry
MAX_OFFSET = 2**63 - 1


def max_page(limit: int) -> int:
    """Highest page number whose offset still fits in ``MAX_OFFSET``."""
    return MAX_OFFSET // limit


def compute_offset(page: int, limit: int) -> int:
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    offset = (page - 1) * limit
    if offset > MAX_OFFSET:
        raise ValueError("page is too large")
    return offset


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` rows; 0 when there are no rows."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def build_meta(page: int, limit: int, total: int) -> PaginationMeta:
    return PaginationMeta(page=page, limit=limit, total=total, total_pages=total_pages(total, limit))


def paginate(db: Session, stmt: Select, page: int, limit: int) -> tuple[Sequence[Any], PaginationMeta]:
    """
    Run ``stmt`` as a page window plus a total count.

    The count is taken over the filtered statement without its ordering or
    window, so ``total`` reflects every matching row.
    """
    offset = compute_offset(page, limit)
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = db.scalar(count_stmt) or 0
    items = db.scalars(stmt.offset(offset).limit(limit)).all()
    return items, build_meta(page, limit, total)
