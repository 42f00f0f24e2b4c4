"""Tests for the product service."""
import uuid
from decimal import Decimal

import pytest

from app.core.exceptions import ConflictError, StoreReferenceError
from app.models.inventory_schemas import ProductCreate, ProductFilters, ProductUpdate
from app.services.inventory import ProductService


@pytest.fixture
def service(db_session):
    return ProductService(db_session)


def test_create_product_defaults_quantity_to_zero(service, make_store):
    store = make_store()

    product = service.create_product(
        ProductCreate(store_id=store.id, name="Cable", category="Accessories", price=Decimal("9.99"))
    )

    assert product.id is not None
    assert product.quantity == 0
    assert product.price == Decimal("9.99")
    assert product.deleted_at is None
    assert product.created_at is not None


def test_create_product_unknown_store_is_conflict(service):
    missing = uuid.uuid4()

    with pytest.raises(StoreReferenceError) as exc_info:
        service.create_product(
            ProductCreate(store_id=missing, name="Ghost", category="None", price=Decimal("1.00"))
        )

    assert isinstance(exc_info.value, ConflictError)
    assert exc_info.value.status_code == 409
    assert exc_info.value.details == {"storeId": str(missing)}
    products, meta = service.list_products()
    assert meta.total == 0


def test_list_products_uses_insertion_order_and_pagination(service, make_store, make_product):
    store = make_store()
    for i in range(5):
        make_product(store, name=f"Item {i}")

    products, meta = service.list_products(page=2, limit=2)

    assert [p.name for p in products] == ["Item 2", "Item 3"]
    assert meta.page == 2
    assert meta.limit == 2
    assert meta.total == 5
    assert meta.total_pages == 3


def test_list_products_empty(service):
    products, meta = service.list_products()

    assert list(products) == []
    assert meta.total == 0
    assert meta.total_pages == 0


def test_price_range_is_inclusive(service, make_store, make_product):
    store = make_store()
    make_product(store, name="Cheap", price="10.00")
    make_product(store, name="Mid", price="100.00")

    products, _ = service.list_products(
        filters=ProductFilters(min_price=Decimal("50"), max_price=Decimal("150"))
    )
    assert [p.name for p in products] == ["Mid"]

    products, _ = service.list_products(
        filters=ProductFilters(min_price=Decimal("10.00"), max_price=Decimal("100.00"))
    )
    assert [p.name for p in products] == ["Cheap", "Mid"]


def test_filters_are_combined(service, make_store, make_product):
    first = make_store(name="First")
    second = make_store(name="Second")
    make_product(first, name="Laptop Pro", category="Laptops", price="1500.00")
    make_product(first, name="Laptop Air", category="Laptops", price="900.00")
    make_product(second, name="Laptop Max", category="Laptops", price="2000.00")
    make_product(first, name="Laptop Bag", category="Accessories", price="50.00")

    products, meta = service.list_products(
        filters=ProductFilters(category="Laptops", store_id=first.id, max_price=Decimal("1000"))
    )

    assert [p.name for p in products] == ["Laptop Air"]
    assert meta.total == 1


def test_category_filter_is_exact(service, make_store, make_product):
    store = make_store()
    make_product(store, name="Phone", category="Smartphones")
    make_product(store, name="Case", category="Smartphones Accessories")

    products, _ = service.list_products(filters=ProductFilters(category="Smartphones"))

    assert [p.name for p in products] == ["Phone"]


def test_search_is_case_sensitive_substring(service, make_store, make_product):
    store = make_store()
    make_product(store, name="iPhone 15")
    make_product(store, name="IPHONE case")
    make_product(store, name="Headphones")

    products, _ = service.list_products(filters=ProductFilters(search="Phone"))
    assert [p.name for p in products] == ["iPhone 15"]

    products, _ = service.list_products(filters=ProductFilters(search="phone"))
    assert [p.name for p in products] == ["Headphones"]


def test_search_wildcards_match_literally(service, make_store, make_product):
    store = make_store()
    make_product(store, name="100% Cotton")
    make_product(store, name="1000 Cotton")
    make_product(store, name="snake_case")
    make_product(store, name="snakeXcase")

    products, _ = service.list_products(filters=ProductFilters(search="100%"))
    assert [p.name for p in products] == ["100% Cotton"]

    products, _ = service.list_products(filters=ProductFilters(search="e_c"))
    assert [p.name for p in products] == ["snake_case"]


def test_soft_deleted_products_are_excluded(service, make_store, make_product):
    store = make_store()
    keep = make_product(store, name="Keep")
    gone = make_product(store, name="Gone")

    assert service.delete_product(gone.id) is not None

    products, meta = service.list_products()
    assert [p.id for p in products] == [keep.id]
    assert meta.total == 1
    assert service.get_product(gone.id) is None
    assert service.update_product(gone.id, ProductUpdate(name="Back")) is None


def test_delete_product_twice_returns_none(service, make_store, make_product):
    product = make_product(make_store())

    deleted = service.delete_product(product.id)
    assert deleted is not None
    assert deleted.deleted_at is not None
    assert deleted.updated_at == deleted.deleted_at

    assert service.delete_product(product.id) is None
    assert service.delete_product(uuid.uuid4()) is None


def test_update_product_merges_only_supplied_fields(service, make_store, make_product):
    product = make_product(make_store(), name="Old", category="Books", price="20.00", quantity=3)

    updated = service.update_product(product.id, ProductUpdate(price=Decimal("25.50")))

    assert updated is not None
    assert updated.price == Decimal("25.50")
    assert updated.name == "Old"
    assert updated.category == "Books"
    assert updated.quantity == 3
    assert updated.updated_at is not None


def test_update_product_missing_returns_none(service):
    assert service.update_product(uuid.uuid4(), ProductUpdate(quantity=1)) is None


def test_product_update_rejects_explicit_null():
    with pytest.raises(ValueError):
        ProductUpdate.model_validate({"name": None})


def test_product_update_changes_and_emptiness():
    assert ProductUpdate().is_empty
    patch = ProductUpdate.model_validate({"quantity": 0})
    assert not patch.is_empty
    assert patch.changes() == {"quantity": 0}
