from decimal import Decimal
from typing import List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from pos.data.models.customer import CustomerModel


class CustomerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: str) -> CustomerModel | None:
        return self.db.get(CustomerModel, customer_id)

    def add_to_totals(self, customer_id: str, amount: Decimal) -> int:
        # inkrement po stronie SQL, rownolegle sprzedaze nie gubia sie nawzajem
        stmt = (
            update(CustomerModel)
            .where(CustomerModel.id == customer_id)
            .values(
                total_orders=CustomerModel.total_orders + 1,
                total_spent=CustomerModel.total_spent + amount,
            )
            .execution_options(synchronize_session="fetch")
        )
        return self.db.execute(stmt).rowcount

    def list_customers(self) -> List[CustomerModel]:
        return list(self.db.execute(select(CustomerModel).order_by(CustomerModel.name)).scalars().all())

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer
