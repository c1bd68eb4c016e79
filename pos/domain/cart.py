# pos/domain/cart.py
"""
Koszyk jednej sesji kasowej.

Cart to zwykly obiekt wartosci przekazywany przez referencje do funkcji
add_item / change_quantity / remove_item / clear. Brak stanu globalnego,
kazda operacja albo mutuje koszyk w calosci albo rzuca wyjatek i nic nie zmienia.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional

from pos.utils.settings import DEFAULT_TAX_PERCENT
from pos.utils.logging import get_logger

logger = get_logger(__name__)

HUNDRED = Decimal("100")


class StockLimitError(ValueError):
    """Ilosc w koszyku przekroczylaby stan magazynowy produktu."""

    def __init__(self, product_id: str, requested: int, stock: int):
        self.product_id = product_id
        self.requested = requested
        self.stock = stock
        super().__init__(
            f"Cannot add more items than available in stock "
            f"(product {product_id}: requested {requested}, stock {stock})"
        )


@dataclass
class CartLine:
    product_id: str
    name: str
    unit_price: Decimal
    quantity: int
    stock: int

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    lines: List[CartLine] = field(default_factory=list)
    discount_percent: Decimal = Decimal("0")
    tax_percent: Decimal = DEFAULT_TAX_PERCENT

    def get_line(self, product_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


def _as_decimal(value: Any) -> Decimal:
    # float -> str zeby nie ciagnac bledu binarnego
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _as_percent(percent: Any) -> Decimal:
    value = _as_decimal(percent)
    # NaN / Infinity np. z wyczyszczonego pola formularza
    if not value.is_finite():
        raise ValueError(f"Percent must be a finite number, got {percent!r}")
    return value


def clamp_discount(percent: Any) -> Decimal:
    return min(max(_as_percent(percent), Decimal("0")), HUNDRED)


def clamp_tax(percent: Any) -> Decimal:
    # brak gornego limitu, tak jak w kasie
    return max(_as_percent(percent), Decimal("0"))


def add_item(cart: Cart, product: Any) -> CartLine:
    """
    Dodaje jedna sztuke produktu.

    `product` to dowolny obiekt z polami id, name, price, stock
    (np. ProductOut z katalogu).
    """
    product_id = str(product.id)
    line = cart.get_line(product_id)

    if line:
        if line.quantity + 1 > product.stock:
            logger.warning(f"Stock limit reached for product {product_id} ({product.stock})")
            raise StockLimitError(product_id, line.quantity + 1, product.stock)
        line.quantity += 1
        line.stock = product.stock
        return line

    if product.stock < 1:
        logger.warning(f"Product {product_id} is out of stock")
        raise StockLimitError(product_id, 1, product.stock)

    line = CartLine(
        product_id=product_id,
        name=product.name,
        unit_price=_as_decimal(product.price),
        quantity=1,
        stock=product.stock,
    )
    cart.lines.append(line)
    return line


def change_quantity(cart: Cart, product_id: str, delta: int) -> Optional[CartLine]:
    """Zwraca zmieniona linie albo None gdy linia zniknela (lub nie istniala)."""
    line = cart.get_line(product_id)
    if not line:
        return None

    new_quantity = line.quantity + delta

    if new_quantity <= 0:
        remove_item(cart, product_id)
        return None

    if new_quantity > line.stock:
        logger.warning(f"Stock limit reached for product {product_id} ({line.stock})")
        raise StockLimitError(product_id, new_quantity, line.stock)

    line.quantity = new_quantity
    return line


def remove_item(cart: Cart, product_id: str) -> None:
    cart.lines = [line for line in cart.lines if line.product_id != product_id]


def clear(cart: Cart) -> None:
    # podatek zostaje, rabat wraca do 0
    cart.lines = []
    cart.discount_percent = Decimal("0")


def set_discount(cart: Cart, percent: Any) -> Decimal:
    cart.discount_percent = clamp_discount(percent)
    return cart.discount_percent


def set_tax(cart: Cart, percent: Any) -> Decimal:
    cart.tax_percent = clamp_tax(percent)
    return cart.tax_percent
