from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.config import Settings
from retail_api.dependencies import get_app_settings, get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.payment import PaymentCreate, PaymentRead, PaymentUpdate
from retail_api.services import payment_service

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("", response_model=List[PaymentRead])
def list_payments(db: Session = Depends(get_db)):
    return payment_service.list_payments(db)


@router.get("/{pay_id}", response_model=PaymentRead)
def get_payment(pay_id: str, db: Session = Depends(get_db)):
    return payment_service.get_payment(db, pay_id)


@router.post("", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
def record_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return payment_service.record_payment(
        db,
        payload,
        allow_negative_balance=settings.ALLOW_NEGATIVE_BALANCE,
    )


@router.put("/{pay_id}", response_model=PaymentRead)
def update_payment(pay_id: str, payload: PaymentUpdate, db: Session = Depends(get_db)):
    return payment_service.update_payment(db, pay_id, payload)


@router.delete("/{pay_id}", response_model=DeleteResult)
def delete_payment(pay_id: str, db: Session = Depends(get_db)):
    payment_service.delete_payment(db, pay_id)
    return DeleteResult(id=pay_id)


__all__ = ["router"]
