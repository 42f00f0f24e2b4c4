"""
Inventory API Routes.

RESTful endpoints for inventory management:
- Stores (list, create, soft delete, store products, analytics)
- Products (CRUD, filtering, pagination)
"""
from fastapi import APIRouter

from .products import router as products_router
from .stores import router as stores_router

# Create main router and include sub-routers
router = APIRouter()
router.include_router(stores_router, tags=["stores"])
router.include_router(products_router, tags=["products"])

__all__ = ["router"]
