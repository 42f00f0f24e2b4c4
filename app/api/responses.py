"""Helpers building the uniform success envelope."""
from __future__ import annotations

from typing import Any, Iterable, TypeVar

from pydantic import BaseModel

from app.models.inventory_schemas import ApiResponse, PaginationMeta, ResponseMeta

T = TypeVar("T")


def success_response(data: T, pagination: PaginationMeta | None = None) -> ApiResponse[T]:
    """Wrap ``data`` in ``{success: true, data, meta?}``."""
    if pagination is None:
        return ApiResponse(success=True, data=data)
    return ApiResponse(success=True, data=data, meta=ResponseMeta(pagination=pagination))


def paginated_response(
    items: Iterable[Any],
    pagination: PaginationMeta,
    schema: type[BaseModel],
) -> ApiResponse[list[Any]]:
    """Serialize ORM rows through ``schema`` and attach pagination metadata."""
    return success_response([schema.model_validate(item) for item in items], pagination)
