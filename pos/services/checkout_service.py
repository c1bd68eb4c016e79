# pos/services/checkout_service.py
from enum import Enum
from typing import Any, Dict, Optional

import requests

from pos.domain.cart import Cart, clear
from pos.domain.pricing import compute_totals
from pos.services.store_client import StoreClient
from pos.utils.settings import DEFAULT_PAYMENT_METHOD
from pos.utils.logging import get_logger

logger = get_logger(__name__)

WALK_IN_CUSTOMER = "walk-in"


class CheckoutState(str, Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    FAILED = "FAILED"


class EmptyCartError(ValueError):
    """Checkout pustego koszyka, zadne zadanie nie zostalo wyslane."""


class CheckoutInProgressError(RuntimeError):
    """Poprzedni checkout jeszcze trwa."""


class CheckoutFailedError(RuntimeError):
    """Zapis sprzedazy sie nie udal, koszyk zostaje do ponowienia."""


def build_sale_payload(
    cart: Cart,
    customer_id: Optional[str] = None,
    payment_method: Optional[str] = None,
) -> Dict[str, Any]:
    totals = compute_totals(cart).quantized()

    if customer_id == WALK_IN_CUSTOMER:
        customer_id = None

    return {
        "customerId": customer_id,
        "items": [
            {
                "productId": line.product_id,
                "quantity": line.quantity,
                "price": str(line.unit_price),
            }
            for line in cart.lines
        ],
        "subtotal": str(totals.subtotal),
        "discount": str(totals.discount_amount),
        "tax": str(totals.tax_amount),
        "total": str(totals.total),
        "paymentMethod": payment_method or DEFAULT_PAYMENT_METHOD,
    }


class CheckoutSubmitter:
    """
    Maszyna stanow checkoutu:
    IDLE -> SUBMITTING -> IDLE (sukces, koszyk wyczyszczony)
                       -> FAILED (blad, koszyk nietkniety, mozna ponowic)

    Jedno wywolanie POST /sales na probe, bez automatycznego retry.
    """

    def __init__(self, client: StoreClient):
        self.client = client
        self.state = CheckoutState.IDLE
        self.last_error: Optional[str] = None
        self.last_sale: Optional[Dict[str, Any]] = None

    @property
    def can_submit(self) -> bool:
        return self.state != CheckoutState.SUBMITTING

    def submit(
        self,
        cart: Cart,
        customer_id: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> Dict[str, Any]:
        if self.state == CheckoutState.SUBMITTING:
            raise CheckoutInProgressError("Checkout is already in progress")

        if cart.is_empty:
            logger.warning("Checkout rejected: cart is empty")
            raise EmptyCartError("Please add items to cart before checkout")

        payload = build_sale_payload(cart, customer_id, payment_method)

        self.state = CheckoutState.SUBMITTING
        logger.info(f"Submitting sale: {len(cart.lines)} lines, total {payload['total']}")

        try:
            sale = self.client.create_sale(payload)
        except requests.RequestException as e:
            self.state = CheckoutState.FAILED
            self.last_error = str(e)
            logger.error(f"Failed to process sale: {e}")
            raise CheckoutFailedError("Failed to process sale") from e
        except Exception as e:
            # np. niepoprawny JSON w odpowiedzi
            self.state = CheckoutState.FAILED
            self.last_error = str(e)
            logger.error(f"Unexpected error while processing sale: {e}")
            raise

        clear(cart)
        self.state = CheckoutState.IDLE
        self.last_error = None
        self.last_sale = sale

        logger.info(f"Sale {sale.get('id')} completed")
        return sale
