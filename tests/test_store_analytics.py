"""Tests for store analytics."""
import uuid
from decimal import Decimal

import pytest

from app.core.config import settings
from app.services.inventory import StoreAnalyticsService


@pytest.fixture
def service(db_session):
    return StoreAnalyticsService(db_session)


@pytest.fixture
def stocked_store(make_store, make_product):
    """Store with two Electronics products and one out-of-stock Book."""
    store = make_store()
    make_product(store, name="P1", category="Electronics", price="100.00", quantity=20)
    make_product(store, name="P2", category="Electronics", price="50.00", quantity=5)
    make_product(store, name="P3", category="Books", price="25.00", quantity=0)
    return store


def test_store_analytics_worked_example(service, stocked_store):
    analytics = service.get_store_analytics(stocked_store.id)

    assert analytics.total_products == 3
    assert analytics.total_value == Decimal("2250.00")
    assert analytics.avg_product_price == Decimal("58.33")
    assert analytics.low_stock_items == 1
    assert analytics.out_of_stock_items == 1
    assert analytics.categories == 2

    breakdown = [(c.category, c.count, c.total_value) for c in analytics.category_breakdown]
    assert breakdown == [
        ("Electronics", 2, Decimal("2250.00")),
        ("Books", 1, Decimal("0.00")),
    ]


def test_store_analytics_empty_store(service, make_store):
    analytics = service.get_store_analytics(make_store().id)

    assert analytics.total_products == 0
    assert analytics.total_value == Decimal("0.00")
    assert analytics.avg_product_price == Decimal("0.00")
    assert analytics.low_stock_items == 0
    assert analytics.out_of_stock_items == 0
    assert analytics.categories == 0
    assert analytics.category_breakdown == []


def test_store_analytics_unknown_store_is_all_zero(service):
    analytics = service.get_store_analytics(uuid.uuid4())

    assert analytics.total_products == 0
    assert analytics.category_breakdown == []


def test_store_analytics_ignores_deleted_and_other_stores(db_session, service, stocked_store, make_store, make_product):
    other = make_store(name="Other")
    make_product(other, name="Elsewhere", category="Toys", price="999.00", quantity=1)
    gone = make_product(stocked_store, name="Gone", category="Toys", price="10.00", quantity=1)
    gone.soft_delete()
    db_session.commit()

    analytics = service.get_store_analytics(stocked_store.id)

    assert analytics.total_products == 3
    assert analytics.categories == 2
    assert analytics.total_value == Decimal("2250.00")
    assert "Toys" not in [c.category for c in analytics.category_breakdown]


def test_low_stock_boundary(service, make_store, make_product):
    store = make_store()
    threshold = settings.LOW_STOCK_THRESHOLD
    make_product(store, name="Edge", quantity=threshold)
    make_product(store, name="Below", quantity=threshold - 1)
    make_product(store, name="One", quantity=1)

    analytics = service.get_store_analytics(store.id)

    assert analytics.low_stock_items == 2
    assert analytics.out_of_stock_items == 0


def test_category_breakdown_ties_ordered_by_name(service, make_store, make_product):
    store = make_store()
    make_product(store, name="Z", category="Zebra", price="1.00", quantity=1)
    make_product(store, name="A", category="Apple", price="2.00", quantity=2)

    analytics = service.get_store_analytics(store.id)

    assert [c.category for c in analytics.category_breakdown] == ["Apple", "Zebra"]
    assert [c.total_value for c in analytics.category_breakdown] == [Decimal("4.00"), Decimal("1.00")]


def test_analytics_money_serializes_as_strings(service, stocked_store):
    payload = service.get_store_analytics(stocked_store.id).model_dump(mode="json", by_alias=True)

    assert payload["totalValue"] == "2250.00"
    assert payload["avgProductPrice"] == "58.33"
    assert payload["lowStockItems"] == 1
    assert payload["categoryBreakdown"][0] == {"category": "Electronics", "count": 2, "totalValue": "2250.00"}
    assert payload["categoryBreakdown"][1]["totalValue"] == "0.00"
