from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pos.data.database import get_db
from pos.domain.schemas import CustomerOut
from pos.repos.customer_repo import CustomerRepo

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerOut])
def list_customers(db: Session = Depends(get_db)):
    return CustomerRepo(db).list_customers()
