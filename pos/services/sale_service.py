# pos/services/sale_service.py
from collections import Counter
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from pos.data.models.sale import SaleModel
from pos.data.models.sale_item import SaleItemModel
from pos.domain.schemas import SaleCreate
from pos.repos.customer_repo import CustomerRepo
from pos.repos.product_repo import ProductRepo
from pos.repos.sale_repo import SaleRepo
from pos.services.notification_service import NotificationService
from pos.utils.logging import get_logger

logger = get_logger(__name__)


def _sale_to_dict(sale: SaleModel) -> Dict[str, Any]:
    return {
        "id": sale.id,
        "customer_id": sale.customer_id,
        "subtotal": sale.subtotal,
        "discount": sale.discount,
        "tax": sale.tax,
        "total": sale.total,
        "status": sale.status,
        "payment_method": sale.payment_method,
        "notes": sale.notes,
        "created_at": sale.created_at,
        "items": [
            {
                "id": i.id,
                "product_id": i.product_id,
                "quantity": i.quantity,
                "unit_price": i.unit_price,
                "total_price": i.total_price,
            }
            for i in sale.items
        ],
    }


class SaleService:
    """
    Zapis sprzedazy z kasy.
    Sprzedaz, pozycje, stany magazynowe i statystyki klienta
    ida w jednej transakcji: albo wszystko albo nic.
    """

    def __init__(self, db: Session):
        self.repo = SaleRepo(db)
        self.products = ProductRepo(db)
        self.customers = CustomerRepo(db)
        self.notification_service = NotificationService()

    #commands
    def create_sale(self, payload: SaleCreate) -> Dict[str, Any]:
        customer = None
        if payload.customer_id:
            customer = self.customers.get_customer(payload.customer_id)
            if not customer:
                raise ValueError(f"Customer {payload.customer_id} does not exist")

        # ten sam produkt moze wystapic w kilku pozycjach
        requested = Counter()
        for item in payload.items:
            requested[item.product_id] += item.quantity

        try:
            products = {
                p.id: p for p in self.products.get_products_for_update(list(requested))
            }

            for product_id, quantity in requested.items():
                product = products.get(product_id)
                if not product or not product.is_active:
                    raise ValueError(f"Product {product_id} does not exist")
                if product.stock < quantity:
                    raise ValueError(
                        f"Insufficient stock for product {product_id}: "
                        f"requested {quantity}, available {product.stock}"
                    )

            sale = SaleModel(
                customer_id=customer.id if customer else None,
                subtotal=payload.subtotal,
                discount=payload.discount,
                tax=payload.tax,
                total=payload.total,
                status="completed",
                payment_method=payload.payment_method,
                notes=payload.notes,
                items=[
                    SaleItemModel(
                        product_id=item.product_id,
                        quantity=item.quantity,
                        unit_price=item.price,
                        total_price=item.price * item.quantity,
                    )
                    for item in payload.items
                ],
            )
            self.repo.add_sale(sale)

            for product_id, quantity in requested.items():
                products[product_id].stock -= quantity

            if customer:
                self.customers.add_to_totals(customer.id, payload.total)

            self.repo.commit()

        except Exception as e:
            logger.error(f"Sale rejected: {e}")
            self.repo.rollback()
            raise

        self.repo.refresh(sale)
        logger.info(f"Sale {sale.id} recorded, total {sale.total}, {len(sale.items)} items")

        self.notification_service.send_sale_notification(sale.id)

        return _sale_to_dict(sale)

    #query
    def get_sale(self, sale_id: str) -> Dict[str, Any]:
        sale = self.repo.get_sale(sale_id)
        if not sale:
            raise ValueError("Sale not found")
        return _sale_to_dict(sale)

    def list_sales(self, limit: int | None = None) -> List[Dict[str, Any]]:
        return [_sale_to_dict(s) for s in self.repo.list_sales(limit)]
