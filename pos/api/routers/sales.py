# pos/api/routers/sales.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pos.data.database import get_db
from pos.domain.schemas import SaleCreate, SaleOut
from pos.services.sale_service import SaleService
from pos.utils.settings import RECENT_SALES_LIMIT

router = APIRouter(prefix="/sales", tags=["sales"])


def get_service(db: Session):
    return SaleService(db)


@router.post("", response_model=SaleOut, status_code=201)
def create_sale(payload: SaleCreate, db: Session = Depends(get_db)):
    """
    Zapisuje zakonczona sprzedaz z kasy.
    Jedno zadanie = jedna atomowa transakcja.
    """
    svc = get_service(db)
    try:
        return svc.create_sale(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=List[SaleOut])
def list_sales(db: Session = Depends(get_db)):
    return get_service(db).list_sales()


@router.get("/recent", response_model=List[SaleOut])
def recent_sales(
    limit: int = Query(RECENT_SALES_LIMIT, gt=0, le=100),
    db: Session = Depends(get_db),
):
    return get_service(db).list_sales(limit=limit)


@router.get("/{sale_id}", response_model=SaleOut)
def get_sale(sale_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_sale(sale_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
