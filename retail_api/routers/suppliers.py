from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.dependencies import get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.supplier import SupplierCreate, SupplierRead, SupplierUpdate
from retail_api.services import supplier_service

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=List[SupplierRead])
def list_suppliers(db: Session = Depends(get_db)):
    return supplier_service.list_suppliers(db)


@router.get("/{supplier_id}", response_model=SupplierRead)
def get_supplier(supplier_id: str, db: Session = Depends(get_db)):
    return supplier_service.get_supplier(db, supplier_id)


@router.post("", response_model=SupplierRead, status_code=status.HTTP_201_CREATED)
def create_supplier(payload: SupplierCreate, db: Session = Depends(get_db)):
    return supplier_service.create_supplier(db, payload)


@router.put("/{supplier_id}", response_model=SupplierRead)
def update_supplier(supplier_id: str, payload: SupplierUpdate, db: Session = Depends(get_db)):
    return supplier_service.update_supplier(db, supplier_id, payload)


@router.delete("/{supplier_id}", response_model=DeleteResult)
def delete_supplier(supplier_id: str, db: Session = Depends(get_db)):
    supplier_service.delete_supplier(db, supplier_id)
    return DeleteResult(id=supplier_id)


__all__ = ["router"]
