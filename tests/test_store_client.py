"""
Tests for the HTTP store client (reads are retried, the sale POST never is).
"""
from decimal import Decimal

import pytest
import requests
import responses

from pos.services.store_client import StoreClient

BASE = "http://store.test"

PRODUCT = {
    "id": "p1",
    "name": "Keyboard",
    "categoryId": "accessories",
    "sku": "KB-001",
    "price": "199.99",
    "stock": 4,
}


@pytest.fixture
def store():
    return StoreClient(base_url=BASE + "/", timeout=1)


@responses.activate
def test_fetch_products_parses_catalogue(store):
    responses.add(responses.GET, f"{BASE}/products", json=[PRODUCT])

    products = store.fetch_products()

    assert len(products) == 1
    assert products[0].id == "p1"
    assert products[0].price == Decimal("199.99")
    assert products[0].category_id == "accessories"


@responses.activate
def test_fetch_customers(store):
    responses.add(
        responses.GET,
        f"{BASE}/customers",
        json=[{"id": "c1", "name": "Jan Kowalski", "totalOrders": 2, "totalSpent": "10.00"}],
    )

    customers = store.fetch_customers()

    assert customers[0].name == "Jan Kowalski"
    assert customers[0].total_orders == 2


@responses.activate
def test_read_is_retried_after_connection_error(store):
    responses.add(responses.GET, f"{BASE}/products/p1", body=requests.ConnectionError("reset"))
    responses.add(responses.GET, f"{BASE}/products/p1", json=PRODUCT)

    product = store.fetch_product("p1")

    assert product.name == "Keyboard"
    assert len(responses.calls) == 2


@responses.activate
def test_create_sale_posts_once_and_returns_record(store):
    responses.add(responses.POST, f"{BASE}/sales", json={"id": "s1", "total": "10.00"}, status=201)

    sale = store.create_sale({"items": [{"productId": "p1", "quantity": 1, "price": "10.00"}]})

    assert sale["id"] == "s1"
    assert len(responses.calls) == 1


@responses.activate
def test_create_sale_is_not_retried(store):
    responses.add(responses.POST, f"{BASE}/sales", body=requests.ConnectionError("reset"))

    with pytest.raises(requests.ConnectionError):
        store.create_sale({"items": []})

    assert len(responses.calls) == 1


@responses.activate
def test_create_sale_raises_on_error_status(store):
    responses.add(responses.POST, f"{BASE}/sales", json={"detail": "bad"}, status=400)

    with pytest.raises(requests.HTTPError):
        store.create_sale({"items": []})

    assert len(responses.calls) == 1


@responses.activate
def test_read_is_retried_after_server_error(store):
    responses.add(responses.GET, f"{BASE}/customers", status=503)
    responses.add(responses.GET, f"{BASE}/customers", json=[])

    assert store.fetch_customers() == []
    assert len(responses.calls) == 2


@responses.activate
def test_read_is_not_retried_on_client_error(store):
    responses.add(responses.GET, f"{BASE}/products/missing", json={"detail": "Product not found"}, status=404)

    with pytest.raises(requests.HTTPError):
        store.fetch_product("missing")

    assert len(responses.calls) == 1
