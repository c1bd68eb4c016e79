# pos/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pos.data.database import get_db
from pos.domain.schemas import ProductOut
from pos.repos.product_repo import ProductRepo

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    category_id: str | None = Query(None, alias="categoryId"),
    in_stock: bool = Query(False, alias="inStock"),
    db: Session = Depends(get_db),
):
    return ProductRepo(db).list_products(category_id=category_id, in_stock=in_stock)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    product = ProductRepo(db).get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
