"""
Pytest configuration and fixtures for the POS checkout service.
"""
import os

# przed importem pos.*: baza w pamieci, celery bez brokera
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

import pos.data.models  # noqa: F401
from pos.data.database import Base, SessionLocal, engine
from pos.data.models import ProductModel, CustomerModel
from pos.domain.schemas import ProductOut


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def catalog(db):
    """Two products and one customer, committed; returns their ids."""
    keyboard = ProductModel(
        name="Keyboard", sku="KB-001", category_id="accessories",
        cost=Decimal("120.00"), price=Decimal("199.99"), stock=5,
    )
    monitor = ProductModel(
        name="Monitor", sku="MN-001", category_id="electronics",
        cost=Decimal("600.00"), price=Decimal("899.00"), stock=2,
    )
    sold_out = ProductModel(
        name="Webcam", sku="WC-001", category_id="accessories",
        cost=Decimal("50.00"), price=Decimal("79.00"), stock=0,
    )
    customer = CustomerModel(name="Jan Kowalski", email="jan@example.com")
    db.add_all([keyboard, monitor, sold_out, customer])
    db.commit()

    ids = {
        "keyboard": keyboard.id,
        "monitor": monitor.id,
        "sold_out": sold_out.id,
        "customer": customer.id,
    }
    db.close()
    return ids


@pytest.fixture
def client(db):
    from pos.main import app

    with TestClient(app) as c:
        yield c


def make_product(product_id="p1", price="100000", stock=3, name="Widget", category_id="c1"):
    return ProductOut(
        id=product_id,
        name=name,
        category_id=category_id,
        sku=f"SKU-{product_id}",
        price=Decimal(price),
        stock=stock,
    )


@pytest.fixture
def product_factory():
    return make_product
