"""Store endpoints, including store-scoped products and analytics."""
import logging
import uuid

from fastapi import APIRouter, Query

from app.api.responses import paginated_response, success_response
from app.core.exceptions import StoreNotFoundError
from app.models import inventory_schemas as schemas
from app.models.inventory_models import PRODUCT_CATEGORY_MAX
from .dependencies import InventoryServiceDep, PageDep
from .helpers import store_to_out

router = APIRouter()
logger = logging.getLogger(__name__)

StoreEnvelope = schemas.ApiResponse[schemas.StoreOut]


def _require_store(service, store_id: uuid.UUID):
    store = service.get_store(store_id)
    if not store:
        raise StoreNotFoundError(str(store_id))
    return store


@router.get(
    "/stores",
    response_model=schemas.ApiResponse[list[schemas.StoreOut]],
    response_model_exclude_unset=True,
)
def list_stores(
    service: InventoryServiceDep,
    paging: PageDep,
):
    """List stores with pagination."""
    stores, pagination = service.list_stores(page=paging.page, limit=paging.limit)
    return paginated_response(stores, pagination, schemas.StoreOut)


@router.get("/stores/{store_id}", response_model=StoreEnvelope, response_model_exclude_unset=True)
def get_store(
    store_id: uuid.UUID,
    service: InventoryServiceDep,
):
    """Get a store by ID."""
    return success_response(store_to_out(_require_store(service, store_id)))


@router.post("/stores", response_model=StoreEnvelope, response_model_exclude_unset=True, status_code=201)
def create_store(
    data: schemas.StoreCreate,
    service: InventoryServiceDep,
):
    """Create a new store."""
    store = service.create_store(data)
    return success_response(store_to_out(store))


@router.delete(
    "/stores/{store_id}",
    response_model=schemas.ApiResponse[schemas.DeleteConfirmation],
    response_model_exclude_unset=True,
)
def delete_store(
    store_id: uuid.UUID,
    service: InventoryServiceDep,
):
    """Delete a store (soft delete). Its products are left untouched."""
    store = service.delete_store(store_id)
    if not store:
        raise StoreNotFoundError(str(store_id))
    return success_response(schemas.DeleteConfirmation(id=store.id, message="Store deleted"))


@router.get(
    "/stores/{store_id}/products",
    response_model=schemas.ApiResponse[list[schemas.ProductOut]],
    response_model_exclude_unset=True,
)
def list_store_products(
    store_id: uuid.UUID,
    service: InventoryServiceDep,
    paging: PageDep,
    category: str | None = Query(None, max_length=PRODUCT_CATEGORY_MAX, description="Exact category"),
):
    """List the products of a store."""
    _require_store(service, store_id)
    products, pagination = service.list_store_products(
        store_id,
        page=paging.page,
        limit=paging.limit,
        category=category,
    )
    return paginated_response(products, pagination, schemas.ProductOut)


@router.get(
    "/stores/{store_id}/analytics",
    response_model=schemas.ApiResponse[schemas.StoreAnalytics],
    response_model_exclude_unset=True,
)
def get_store_analytics(
    store_id: uuid.UUID,
    service: InventoryServiceDep,
):
    """Get inventory analytics for a store."""
    _require_store(service, store_id)
    return success_response(service.get_store_analytics(store_id))
