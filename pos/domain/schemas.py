# pos/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional
from decimal import Decimal
from datetime import datetime

# tolerancja zaokraglen przy porownaniu kwot (2 miejsca po przecinku)
MONEY_TOLERANCE = Decimal("0.01")

PaymentMethod = Literal["cash", "card", "transfer"]


class CamelModel(BaseModel):
    """Na drucie camelCase, w kodzie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProductOut(CamelModel):
    """Produkt z katalogu (response)."""

    id: str
    name: str
    description: Optional[str] = None
    category_id: str
    sku: str
    barcode: Optional[str] = None
    cost: Decimal = Decimal("0")
    price: Decimal
    stock: int
    min_stock: int = 0
    image_url: Optional[str] = None
    is_active: bool = True


class CustomerOut(CamelModel):
    """Klient (response)."""

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    total_orders: int = 0
    total_spent: Decimal = Decimal("0")


class SaleItemIn(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, description="Ilosc musi byc > 0")
    price: Decimal = Field(..., ge=0, description="Cena jednostkowa w chwili sprzedazy")


class SaleCreate(CamelModel):
    """Zapis zakonczonej sprzedazy, jedno zadanie na checkout."""

    customer_id: Optional[str] = None
    items: List[SaleItemIn] = Field(..., min_length=1)
    subtotal: Decimal = Field(..., ge=0)
    discount: Decimal = Field(Decimal("0"), ge=0)
    tax: Decimal = Field(Decimal("0"), ge=0)
    total: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _check_amounts(self):
        lines = sum((i.price * i.quantity for i in self.items), Decimal("0"))
        if abs(lines - self.subtotal) > MONEY_TOLERANCE:
            raise ValueError("subtotal does not match the sum of item prices")
        if self.discount > self.subtotal:
            raise ValueError("discount cannot exceed subtotal")
        if abs(self.subtotal - self.discount + self.tax - self.total) > MONEY_TOLERANCE:
            raise ValueError("total must equal subtotal - discount + tax")
        return self


class SaleItemOut(CamelModel):
    id: str
    product_id: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal


class SaleOut(CamelModel):
    """Sprzedaz (response)."""

    id: str
    customer_id: Optional[str] = None
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    status: str
    payment_method: str
    notes: Optional[str] = None
    created_at: datetime
    items: List[SaleItemOut] = []
