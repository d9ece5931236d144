from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.config import Settings
from retail_api.dependencies import get_app_settings, get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.stock import (
    StockEntryCreate,
    StockEntryRead,
    StockEntryUpdate,
    StockEntryWithProduct,
)
from retail_api.services import stock_service

router = APIRouter(prefix="/stock", tags=["Stock"])


@router.get("", response_model=List[StockEntryWithProduct])
def list_stock(db: Session = Depends(get_db)):
    return stock_service.list_stock_with_product(db)


@router.get("/{stock_id}", response_model=StockEntryRead)
def get_stock_entry(stock_id: str, db: Session = Depends(get_db)):
    return stock_service.get_stock_entry(db, stock_id)


@router.post("", response_model=StockEntryRead, status_code=status.HTTP_201_CREATED)
def record_stock_receipt(
    payload: StockEntryCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return stock_service.record_stock_receipt(
        db,
        payload,
        allow_negative_stock=settings.ALLOW_NEGATIVE_STOCK,
    )


@router.put("/{stock_id}", response_model=StockEntryRead)
def update_stock_entry(stock_id: str, payload: StockEntryUpdate, db: Session = Depends(get_db)):
    return stock_service.update_stock_entry(db, stock_id, payload)


@router.delete("/{stock_id}", response_model=DeleteResult)
def delete_stock_entry(
    stock_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    stock_service.delete_stock_entry(
        db,
        stock_id,
        allow_negative_stock=settings.ALLOW_NEGATIVE_STOCK,
    )
    return DeleteResult(id=stock_id)


__all__ = ["router"]
