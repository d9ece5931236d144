from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.dependencies import get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.product import ProductCreate, ProductRead, ProductUpdate, ProductWithSupplier
from retail_api.services import product_service

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductWithSupplier])
def list_products(db: Session = Depends(get_db)):
    return product_service.list_products_with_supplier(db)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return product_service.get_product(db, product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return product_service.create_product(db, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    return product_service.update_product(db, product_id, payload)


@router.delete("/{product_id}", response_model=DeleteResult)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    product_service.delete_product(db, product_id)
    return DeleteResult(id=product_id)


__all__ = ["router"]
