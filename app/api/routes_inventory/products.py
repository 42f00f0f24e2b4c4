"""Product endpoints."""
import logging
import uuid
from decimal import Decimal

from fastapi import APIRouter, Query

from app.api.responses import paginated_response, success_response
from app.core.exceptions import EmptyUpdateError, ProductNotFoundError
from app.models import inventory_schemas as schemas
from app.models.inventory_models import PRODUCT_CATEGORY_MAX, PRODUCT_NAME_MAX
from .dependencies import InventoryServiceDep, PageDep
from .helpers import product_to_out

router = APIRouter()
logger = logging.getLogger(__name__)

ProductEnvelope = schemas.ApiResponse[schemas.ProductOut]


@router.get(
    "/products",
    response_model=schemas.ApiResponse[list[schemas.ProductOut]],
    response_model_exclude_unset=True,
)
def list_products(
    service: InventoryServiceDep,
    paging: PageDep,
    category: str | None = Query(None, max_length=PRODUCT_CATEGORY_MAX, description="Exact category"),
    store_id: uuid.UUID | None = Query(None, alias="storeId", description="Owning store"),
    min_price: Decimal | None = Query(None, alias="minPrice", gt=0, description="Inclusive lower price bound"),
    max_price: Decimal | None = Query(None, alias="maxPrice", gt=0, description="Inclusive upper price bound"),
    search: str | None = Query(None, max_length=PRODUCT_NAME_MAX, description="Substring of the product name"),
):
    """List products with filtering and pagination."""
    filters = schemas.ProductFilters(
        category=category,
        store_id=store_id,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    products, pagination = service.list_products(page=paging.page, limit=paging.limit, filters=filters)
    return paginated_response(products, pagination, schemas.ProductOut)


@router.get("/products/{product_id}", response_model=ProductEnvelope, response_model_exclude_unset=True)
def get_product(
    product_id: uuid.UUID,
    service: InventoryServiceDep,
):
    """Get a product by ID."""
    product = service.get_product(product_id)
    if not product:
        raise ProductNotFoundError(str(product_id))
    return success_response(product_to_out(product))


@router.post("/products", response_model=ProductEnvelope, response_model_exclude_unset=True, status_code=201)
def create_product(
    data: schemas.ProductCreate,
    service: InventoryServiceDep,
):
    """Create a new product."""
    product = service.create_product(data)
    return success_response(product_to_out(product))


@router.patch("/products/{product_id}", response_model=ProductEnvelope, response_model_exclude_unset=True)
def update_product(
    product_id: uuid.UUID,
    data: schemas.ProductUpdate,
    service: InventoryServiceDep,
):
    """Update a product. Only the supplied fields change."""
    if data.is_empty:
        raise EmptyUpdateError()
    product = service.update_product(product_id, data)
    if not product:
        raise ProductNotFoundError(str(product_id))
    return success_response(product_to_out(product))


@router.delete(
    "/products/{product_id}",
    response_model=schemas.ApiResponse[schemas.DeleteConfirmation],
    response_model_exclude_unset=True,
)
def delete_product(
    product_id: uuid.UUID,
    service: InventoryServiceDep,
):
    """Delete a product (soft delete)."""
    product = service.delete_product(product_id)
    if not product:
        raise ProductNotFoundError(str(product_id))
    return success_response(schemas.DeleteConfirmation(id=product.id, message="Product deleted"))
