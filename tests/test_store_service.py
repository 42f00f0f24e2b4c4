"""Tests for the store service."""
import uuid

import pytest

from app.db.base_class import utcnow
from app.models.inventory_models import Store
from app.models.inventory_schemas import StoreCreate
from app.services.inventory import StoreService, build_inventory_service


@pytest.fixture
def service(db_session):
    return StoreService(db_session)


def test_create_and_get_store(service):
    store = service.create_store(StoreCreate(name="Tech Haven", location="456 Tech Park"))

    fetched = service.get_store(store.id)

    assert fetched is not None
    assert fetched.name == "Tech Haven"
    assert fetched.location == "456 Tech Park"
    assert fetched.deleted_at is None


def test_get_store_missing(service):
    assert service.get_store(uuid.uuid4()) is None


def test_list_stores_paginates_active_stores(service, make_store):
    stores = [make_store(name=f"Store {i}") for i in range(4)]
    service.delete_store(stores[1].id)

    page, meta = service.list_stores(page=1, limit=2)

    assert [s.name for s in page] == ["Store 0", "Store 2"]
    assert meta.total == 3
    assert meta.total_pages == 2


def test_delete_store_is_soft_and_leaves_products(service, db_session, make_store, make_product):
    store = make_store()
    product = make_product(store)

    deleted = service.delete_store(store.id)

    assert deleted is not None
    assert deleted.is_deleted
    assert service.get_store(store.id) is None
    assert service.delete_store(store.id) is None
    db_session.refresh(product)
    assert product.deleted_at is None


def test_list_store_products_scopes_by_store_and_category(service, make_store, make_product):
    store = make_store(name="Downtown")
    other = make_store(name="Uptown")
    make_product(store, name="Kindle", category="Books")
    make_product(store, name="Tablet", category="Tablets")
    make_product(store, name="Novel", category="Books")
    make_product(other, name="Atlas", category="Books")

    products, meta = service.list_store_products(store.id)
    assert [p.name for p in products] == ["Kindle", "Tablet", "Novel"]
    assert meta.total == 3

    products, meta = service.list_store_products(store.id, category="Books")
    assert [p.name for p in products] == ["Kindle", "Novel"]
    assert meta.total == 2
    assert meta.total_pages == 1


def test_list_store_products_excludes_deleted(db_session, make_store, make_product):
    inventory = build_inventory_service(db_session)
    store = make_store()
    make_product(store, name="Keep")
    gone = make_product(store, name="Gone")
    inventory.delete_product(gone.id)

    products, meta = inventory.list_store_products(store.id, page=1, limit=10)

    assert [p.name for p in products] == ["Keep"]
    assert meta.total == 1


def test_list_stores_breaks_timestamp_ties_by_id(service, db_session):
    stamp = utcnow()
    stores = [Store(name=f"Bulk {i}", location="Warehouse", created_at=stamp) for i in range(5)]
    db_session.add_all(stores)
    db_session.commit()
    expected = [s.id for s in sorted(stores, key=lambda s: s.id)]

    first, _ = service.list_stores(page=1, limit=3)
    second, _ = service.list_stores(page=2, limit=3)

    assert [s.id for s in first] + [s.id for s in second] == expected
