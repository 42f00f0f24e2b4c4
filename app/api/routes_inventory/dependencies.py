"""Common dependencies for inventory routes."""
from typing import Annotated, TypeAlias

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.services.inventory import InventoryService, build_inventory_service
from app.utils.pagination import max_page

DbDep: TypeAlias = Annotated[Session, Depends(get_db)]


def get_inventory_service(db: DbDep) -> InventoryService:
    """Get an InventoryService bound to the request's session."""
    return build_inventory_service(db)


class PageParams:
    """``page``/``limit`` query parameters shared by every list endpoint."""

    def __init__(
        self,
        page: int = Query(1, ge=1, le=max_page(settings.MAX_PAGE_SIZE), description="Page number"),
        limit: int = Query(
            settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"
        ),
    ):
        self.page = page
        self.limit = limit


InventoryServiceDep: TypeAlias = Annotated[InventoryService, Depends(get_inventory_service)]
PageDep: TypeAlias = Annotated[PageParams, Depends()]
