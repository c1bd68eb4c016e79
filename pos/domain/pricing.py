# pos/domain/pricing.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Optional

from pos.domain.cart import Cart, CartLine, HUNDRED, clamp_discount, clamp_tax

CENT = Decimal("0.01")


@dataclass(frozen=True)
class PricingResult:
    subtotal: Decimal
    discount_amount: Decimal
    taxable_amount: Decimal
    tax_amount: Decimal
    total: Decimal

    def quantized(self) -> "PricingResult":
        """
        Kwoty zaokraglone do groszy, tak jak zapisuje je sprzedaz.
        Total liczony z zaokraglonych skladnikow, zeby zapis sie sumowal.
        """
        subtotal = _round(self.subtotal)
        discount_amount = _round(self.discount_amount)
        tax_amount = _round(self.tax_amount)
        return PricingResult(
            subtotal=subtotal,
            discount_amount=discount_amount,
            taxable_amount=subtotal - discount_amount,
            tax_amount=tax_amount,
            total=subtotal - discount_amount + tax_amount,
        )


def _round(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_totals(
    cart_or_lines: Cart | Iterable[CartLine],
    discount_percent: Optional[Any] = None,
    tax_percent: Optional[Any] = None,
) -> PricingResult:
    """
    subtotal = suma(cena * ilosc)
    rabat    = subtotal * rabat% / 100
    podatek  = (subtotal - rabat) * podatek% / 100
    total    = subtotal - rabat + podatek

    Procenty z argumentow maja pierwszenstwo przed tymi z koszyka.
    """
    if isinstance(cart_or_lines, Cart):
        lines = cart_or_lines.lines
        if discount_percent is None:
            discount_percent = cart_or_lines.discount_percent
        if tax_percent is None:
            tax_percent = cart_or_lines.tax_percent
    else:
        lines = list(cart_or_lines)

    discount = clamp_discount(discount_percent or 0)
    tax = clamp_tax(tax_percent or 0)

    subtotal = sum((line.unit_price * line.quantity for line in lines), Decimal("0"))
    discount_amount = subtotal * discount / HUNDRED
    taxable_amount = subtotal - discount_amount
    tax_amount = taxable_amount * tax / HUNDRED

    return PricingResult(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_amount=taxable_amount,
        tax_amount=tax_amount,
        total=taxable_amount + tax_amount,
    )
