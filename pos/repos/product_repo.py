# pos/repos/product_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from pos.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self, category_id: str | None = None, in_stock: bool = False) -> List[ProductModel]:
        stmt = select(ProductModel).where(ProductModel.is_active.is_(True))
        if category_id:
            stmt = stmt.where(ProductModel.category_id == category_id)
        if in_stock:
            stmt = stmt.where(ProductModel.stock > 0)
        return list(self.db.execute(stmt.order_by(ProductModel.name)).scalars().all())

    def get_products_for_update(self, product_ids: List[str]) -> List[ProductModel]:
        # FOR UPDATE na postgresie, sqlite ignoruje
        stmt = select(ProductModel).where(ProductModel.id.in_(product_ids)).with_for_update()
        return list(self.db.execute(stmt).scalars().all())

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
