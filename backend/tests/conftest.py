"""
Pytest fixtures for the QR reorder backend.

Provides an in-memory database per test, a fake Shopify product source and a
FastAPI test client wired to both.
"""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SHOPIFY_APP_URL", "https://qr.example.com")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from qr_reorder.core.db import Base, get_db
from qr_reorder.core.deps import get_product_source, get_qr_generator
from qr_reorder.core.qr_utils import QRImageGenerator
from qr_reorder.main import app
from qr_reorder.models import QRCode
from qr_reorder.services.shopify import ProductData

SHOP = "a.myshopify.com"
APP_URL = "https://qr.example.com"


class FakeProductSource:
    """Stands in for ShopifyAdminClient; unknown products come back as None."""

    def __init__(self, products=None):
        self.products = products or {}
        self.calls = []

    async def fetch_product(self, product_id, variant_id):
        self.calls.append((product_id, variant_id))
        return self.products.get(product_id)

    async def list_products(self, first=20, variants=10):
        return []


@pytest.fixture(scope="function")
def db_session():
    """Fresh in-memory schema for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def product_source():
    return FakeProductSource(
        {
            "gid://shopify/Product/1": ProductData(
                title="Shampoo",
                image_url="https://cdn.shopify.com/shampoo.png",
                price="12.50",
            ),
        }
    )


@pytest.fixture
def generator():
    return QRImageGenerator(APP_URL)


@pytest.fixture
def client(db_session, product_source, generator):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_product_source] = lambda: product_source
    app.dependency_overrides[get_qr_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_qr_code(db_session):
    def _make(**overrides):
        fields = {
            "shop": SHOP,
            "title": "Shampoo reorder",
            "product_id": "gid://shopify/Product/1",
            "product_handle": "shampoo",
            "product_variant_id": "gid://shopify/ProductVariant/555",
            "destination": "checkout",
            "scans": 0,
        }
        fields.update(overrides)
        qr_code = QRCode(**fields)
        db_session.add(qr_code)
        db_session.commit()
        db_session.refresh(qr_code)
        return qr_code

    return _make
