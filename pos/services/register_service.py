# pos/services/register_service.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

import requests

from pos.domain import cart as cart_ops
from pos.domain.cart import Cart, CartLine
from pos.domain.pricing import PricingResult, compute_totals
from pos.domain.schemas import ProductOut, CustomerOut
from pos.services.checkout_service import CheckoutSubmitter, WALK_IN_CUSTOMER
from pos.services.store_client import StoreClient
from pos.utils.logging import get_logger

logger = get_logger(__name__)


class RegisterSession:
    """
    Sesja kasy (jedno stanowisko):
    katalog + klienci z magazynu, koszyk, wybrany klient i checkout.
    Kazda sesja ma wlasny koszyk.
    """

    def __init__(self, client: StoreClient):
        self.client = client
        self.cart = Cart()
        self.submitter = CheckoutSubmitter(client)
        self.customer_id: str = WALK_IN_CUSTOMER
        self.products: Dict[str, ProductOut] = {}
        self.customers: List[CustomerOut] = []

    #query - odczyt
    def refresh(self) -> None:
        self.products = {p.id: p for p in self.client.fetch_products()}
        self.customers = self.client.fetch_customers()
        logger.info(
            f"Register loaded {len(self.products)} products and {len(self.customers)} customers"
        )

    def available_products(self, category_id: Optional[str] = None) -> List[ProductOut]:
        return [
            p
            for p in self.products.values()
            if p.stock > 0 and (category_id is None or p.category_id == category_id)
        ]

    def totals(self) -> PricingResult:
        return compute_totals(self.cart)

    #commands
    def select_customer(self, customer_id: Optional[str]) -> None:
        if customer_id in (None, WALK_IN_CUSTOMER):
            self.customer_id = WALK_IN_CUSTOMER
            return
        if not any(c.id == customer_id for c in self.customers):
            raise ValueError(f"Unknown customer {customer_id}")
        self.customer_id = customer_id

    def add(self, product_id: str) -> CartLine:
        product = self.products.get(product_id)
        if not product:
            raise LookupError(f"Product {product_id} not found")
        return cart_ops.add_item(self.cart, product)

    def change(self, product_id: str, delta: int) -> Optional[CartLine]:
        return cart_ops.change_quantity(self.cart, product_id, delta)

    def remove(self, product_id: str) -> None:
        cart_ops.remove_item(self.cart, product_id)

    def set_discount(self, percent: Any) -> Decimal:
        return cart_ops.set_discount(self.cart, percent)

    def set_tax(self, percent: Any) -> Decimal:
        return cart_ops.set_tax(self.cart, percent)

    def reset(self) -> None:
        cart_ops.clear(self.cart)

    def checkout(self, payment_method: Optional[str] = None) -> Dict[str, Any]:
        sale = self.submitter.submit(self.cart, self.customer_id, payment_method)
        # stany magazynowe sie zmienily
        try:
            self.refresh()
        except requests.RequestException as e:
            logger.warning(f"Sale {sale.get('id')} saved but catalogue refresh failed: {e}")
        return sale
