from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.db import session as db_session  # noqa: E402
from app.db.base_class import Base  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402
from app.models.inventory_models import Product, Store  # noqa: E402

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")


test_engine = create_engine(
    TEST_DATABASE_URL,
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Ensure application code uses the test engine
settings.DATABASE_URL = TEST_DATABASE_URL  # type: ignore[attr-defined]
settings.ENV = "test"  # type: ignore[attr-defined]
db_session.engine = test_engine  # type: ignore[assignment]
SessionLocal.configure(bind=test_engine)


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Ensure each test sees a fresh database schema."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture
def make_store(db_session):
    """Factory inserting an active store."""

    def _make(name: str = "Main Street", location: str = "1 Main St") -> Store:
        store = Store(name=name, location=location)
        db_session.add(store)
        db_session.commit()
        return store

    return _make


@pytest.fixture
def make_product(db_session):
    """Factory inserting an active product; each insert is its own commit so created_at orders them."""

    def _make(
        store: Store,
        name: str = "Widget",
        category: str = "General",
        price: str = "10.00",
        quantity: int = 1,
    ) -> Product:
        product = Product(
            store_id=store.id,
            name=name,
            category=category,
            price=Decimal(price),
            quantity=quantity,
        )
        db_session.add(product)
        db_session.commit()
        return product

    return _make


# FastAPI TestClient fixture
from fastapi.testclient import TestClient  # noqa: E402
from app.api.main import app  # noqa: E402


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)
