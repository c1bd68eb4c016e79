"""
Tests for the register session, including a full checkout against the store app.
"""
from decimal import Decimal

import pytest
import requests

from pos.data.database import SessionLocal
from pos.data.models import ProductModel
from pos.domain.cart import StockLimitError
from pos.domain.schemas import CustomerOut, ProductOut
from pos.services.checkout_service import CheckoutState
from pos.services.register_service import RegisterSession
from pos.services.store_client import StoreClient


def make_product(product_id, price, stock, category_id):
    return ProductOut(
        id=product_id, name=product_id, category_id=category_id,
        sku=f"SKU-{product_id}", price=Decimal(price), stock=stock,
    )


class FakeStore:
    def __init__(self):
        self.products = [
            make_product("p1", price="10.00", stock=2, category_id="food"),
            make_product("p2", price="5.50", stock=0, category_id="food"),
            make_product("p3", price="99.00", stock=7, category_id="tools"),
        ]
        self.customers = [CustomerOut(id="c1", name="Anna Nowak")]
        self.sales = []
        self.fail_refresh = False

    def fetch_products(self):
        if self.fail_refresh:
            raise requests.ConnectionError("store down")
        return list(self.products)

    def fetch_customers(self):
        return list(self.customers)

    def create_sale(self, payload):
        self.sales.append(payload)
        return {"id": "s1", **payload}


@pytest.fixture
def register():
    session = RegisterSession(FakeStore())
    session.refresh()
    return session


def test_available_products_hide_sold_out(register):
    assert [p.id for p in register.available_products()] == ["p1", "p3"]
    assert [p.id for p in register.available_products("tools")] == ["p3"]


def test_add_change_remove_and_totals(register):
    register.add("p1")
    register.add("p3")
    register.change("p3", 2)
    register.set_discount(10)
    register.set_tax(5)

    totals = register.totals()

    assert totals.subtotal == Decimal("307.00")
    assert totals.total == totals.subtotal - totals.discount_amount + totals.tax_amount

    register.remove("p3")
    assert [l.product_id for l in register.cart.lines] == ["p1"]


def test_add_respects_catalogue_stock(register):
    register.add("p1")
    register.add("p1")

    with pytest.raises(StockLimitError):
        register.add("p1")


def test_add_unknown_product(register):
    with pytest.raises(LookupError):
        register.add("nope")


def test_select_customer(register):
    register.select_customer("c1")
    assert register.customer_id == "c1"

    register.select_customer(None)
    assert register.customer_id == "walk-in"

    with pytest.raises(ValueError):
        register.select_customer("c404")


def test_checkout_sends_sale_and_resets(register):
    register.select_customer("c1")
    register.add("p1")
    register.set_discount(50)

    sale = register.checkout("card")

    assert sale["id"] == "s1"
    payload = register.client.sales[0]
    assert payload["customerId"] == "c1"
    assert payload["paymentMethod"] == "card"
    assert payload["total"] == "5.00"
    assert register.cart.is_empty
    assert register.cart.discount_percent == 0


def test_checkout_survives_failed_catalogue_refresh(register):
    register.add("p1")
    register.client.fail_refresh = True

    sale = register.checkout()

    assert sale["id"] == "s1"
    assert register.cart.is_empty


def test_reset(register):
    register.add("p3")
    register.set_discount(20)
    register.reset()

    assert register.cart.is_empty
    assert register.cart.discount_percent == 0


def test_full_checkout_against_store(client, catalog):
    store = StoreClient(base_url="http://testserver", session=client)
    register = RegisterSession(store)
    register.refresh()

    assert catalog["sold_out"] not in [p.id for p in register.available_products()]

    register.select_customer(catalog["customer"])
    register.add(catalog["keyboard"])
    register.add(catalog["keyboard"])
    register.add(catalog["monitor"])
    register.set_discount(10)
    register.set_tax(23)

    expected = register.totals().quantized()
    sale = register.checkout()

    assert Decimal(sale["total"]) == expected.total
    assert register.submitter.state == CheckoutState.IDLE
    assert register.cart.is_empty
    # katalog przeladowany po sprzedazy
    assert register.products[catalog["keyboard"]].stock == 3
    assert register.products[catalog["monitor"]].stock == 1

    db = SessionLocal()
    try:
        assert db.get(ProductModel, catalog["keyboard"]).stock == 3
    finally:
        db.close()

