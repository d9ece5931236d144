from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentCreate(BaseModel):
    pay_id: str = Field(min_length=1)
    loan_id: str = Field(min_length=1)
    amount_paid: float = Field(gt=0)
    payment_date: Optional[date] = None
    payment_mode: Optional[str] = None


class PaymentUpdate(BaseModel):
    payment_date: Optional[date] = None
    payment_mode: Optional[str] = None


class PaymentRead(PaymentCreate):
    model_config = ConfigDict(from_attributes=True)
