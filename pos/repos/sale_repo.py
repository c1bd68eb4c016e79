# pos/repos/sale_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pos.data.models.sale import SaleModel


class SaleRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_sale(self, sale: SaleModel) -> SaleModel:
        # bez commita, transakcje zamyka serwis
        self.db.add(sale)
        self.db.flush()
        return sale

    def get_sale(self, sale_id: str) -> SaleModel | None:
        stmt = select(SaleModel).options(selectinload(SaleModel.items)).where(SaleModel.id == sale_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_sales(self, limit: int | None = None) -> List[SaleModel]:
        stmt = (
            select(SaleModel)
            .options(selectinload(SaleModel.items))
            .order_by(SaleModel.created_at.desc())
        )
        if limit:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, sale: SaleModel):
        self.db.refresh(sale)
