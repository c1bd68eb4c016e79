# pos/data/seed.py
from decimal import Decimal

from pos.data.database import Base, SessionLocal, engine
from pos.data.models import ProductModel, CustomerModel

CATEGORY_ELECTRONICS = "electronics"
CATEGORY_ACCESSORIES = "accessories"

PRODUCTS = [
    dict(name="Keyboard", sku="KB-001", category_id=CATEGORY_ACCESSORIES, cost=Decimal("120.00"), price=Decimal("199.99"), stock=25),
    dict(name="Mouse", sku="MS-001", category_id=CATEGORY_ACCESSORIES, cost=Decimal("20.00"), price=Decimal("49.50"), stock=40),
    dict(name="Monitor", sku="MN-001", category_id=CATEGORY_ELECTRONICS, cost=Decimal("600.00"), price=Decimal("899.00"), stock=8),
    dict(name="Laptop", sku="LT-001", category_id=CATEGORY_ELECTRONICS, cost=Decimal("2500.00"), price=Decimal("3299.00"), stock=3),
]

CUSTOMERS = [
    dict(name="Jan Kowalski", email="jan@example.com", city="Warszawa", country="PL"),
    dict(name="Anna Nowak", email="anna@example.com", city="Krakow", country="PL"),
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.add_all(CustomerModel(**c) for c in CUSTOMERS)
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    seed()
