"""
Pydantic schemas for the inventory API.

JSON uses camelCase keys (``storeId``, ``totalPages``); Python code uses the
snake_case field names. Money is a ``Decimal`` that always serializes as a
two-place decimal string.
"""
from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from app.models.inventory_models import (
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_CATEGORY_MAX,
    PRODUCT_NAME_MAX,
    QUANTITY_MAX,
    STORE_LOCATION_MAX,
    STORE_NAME_MAX,
)

T = TypeVar("T")

CENTS = Decimal("0.01")


def quantize_money(value: Decimal | float | int | None) -> Decimal:
    """Coerce an aggregate/db value to a two-place Decimal (``None`` -> 0.00)."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS)


Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: str(quantize_money(v)), return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Envelope
# ============================================================================

class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ResponseMeta(CamelModel):
    pagination: PaginationMeta | None = None


class ErrorBody(CamelModel):
    message: str
    code: str
    details: Any = None


class ApiResponse(CamelModel, Generic[T]):
    """Uniform response envelope. ``error`` is only set on failures."""
    success: bool = True
    data: T | None = None
    error: ErrorBody | None = None
    meta: ResponseMeta | None = None


class DeleteConfirmation(CamelModel):
    id: uuid.UUID
    message: str


class HealthStatus(CamelModel):
    status: str
    timestamp: dt.datetime


# ============================================================================
# Store Schemas
# ============================================================================

class StoreCreate(CamelModel):
    """Schema for creating a store."""
    name: str = Field(..., min_length=1, max_length=STORE_NAME_MAX)
    location: str = Field(..., min_length=1, max_length=STORE_LOCATION_MAX)


class StoreOut(CamelModel):
    """Schema for store API response."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    location: str
    created_at: dt.datetime
    updated_at: dt.datetime
    deleted_at: dt.datetime | None = None


# ============================================================================
# Product Schemas
# ============================================================================

class ProductCreate(CamelModel):
    """Schema for creating a product."""
    store_id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=PRODUCT_NAME_MAX)
    category: str = Field(..., min_length=1, max_length=PRODUCT_CATEGORY_MAX)
    price: Decimal = Field(..., gt=0, max_digits=PRICE_PRECISION, decimal_places=PRICE_SCALE)
    quantity: int = Field(default=0, ge=0, le=QUANTITY_MAX)


class ProductUpdate(CamelModel):
    """
    Partial update for a product.

    Every field is optional; only the fields present in the request are merged
    into the stored row. Explicit ``null`` is rejected rather than written.
    """
    name: str | None = Field(None, min_length=1, max_length=PRODUCT_NAME_MAX)
    category: str | None = Field(None, min_length=1, max_length=PRODUCT_CATEGORY_MAX)
    price: Decimal | None = Field(None, gt=0, max_digits=PRICE_PRECISION, decimal_places=PRICE_SCALE)
    quantity: int | None = Field(None, ge=0, le=QUANTITY_MAX)

    @field_validator("name", "category", "price", "quantity", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly supplied by the client."""
        return self.model_dump(exclude_unset=True)

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set


class ProductOut(CamelModel):
    """Schema for product API response."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    store_id: uuid.UUID
    name: str
    category: str
    price: Money
    quantity: int = 0
    created_at: dt.datetime
    updated_at: dt.datetime
    deleted_at: dt.datetime | None = None


class ProductFilters(CamelModel):
    """Optional list filters; unset filters do not constrain the query."""
    category: str | None = None
    store_id: uuid.UUID | None = None
    min_price: Decimal | None = Field(None, gt=0)
    max_price: Decimal | None = Field(None, gt=0)
    search: str | None = None


# ============================================================================
# Analytics Schemas
# ============================================================================

class CategoryBreakdown(CamelModel):
    category: str
    count: int
    total_value: Money


class StoreAnalytics(CamelModel):
    """Aggregated inventory figures for one store (active products only)."""
    total_products: int = 0
    total_value: Money = Decimal("0.00")
    avg_product_price: Money = Decimal("0.00")
    low_stock_items: int = 0
    out_of_stock_items: int = 0
    categories: int = 0
    category_breakdown: list[CategoryBreakdown] = Field(default_factory=list)
