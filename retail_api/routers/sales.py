from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.config import Settings
from retail_api.dependencies import get_app_settings, get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.sales import SaleCreate, SaleRead, SaleUpdate
from retail_api.services import sales_service

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.get("", response_model=List[SaleRead])
def list_sales(db: Session = Depends(get_db)):
    return sales_service.list_sales(db)


@router.get("/{sales_id}", response_model=SaleRead)
def get_sale(sales_id: str, db: Session = Depends(get_db)):
    return sales_service.get_sale(db, sales_id)


@router.post("", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
def record_sale(
    payload: SaleCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return sales_service.record_sale(
        db,
        payload,
        allow_negative_stock=settings.ALLOW_NEGATIVE_STOCK,
    )


@router.put("/{sales_id}", response_model=SaleRead)
def update_sale(sales_id: str, payload: SaleUpdate, db: Session = Depends(get_db)):
    return sales_service.update_sale(db, sales_id, payload)


@router.delete("/{sales_id}", response_model=DeleteResult)
def delete_sale(sales_id: str, db: Session = Depends(get_db)):
    sales_service.delete_sale(db, sales_id)
    return DeleteResult(id=sales_id)


__all__ = ["router"]
