"""Helper functions for inventory routes."""
from app.models import inventory_schemas as schemas


def product_to_out(product) -> schemas.ProductOut:
    """Convert Product model to ProductOut schema."""
    return schemas.ProductOut.model_validate(product)


def store_to_out(store) -> schemas.StoreOut:
    """Convert Store model to StoreOut schema."""
    return schemas.StoreOut.model_validate(store)
