import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InvoiceCreate(BaseModel):
    invoice_id: str = Field(min_length=1)
    cust_id: str = Field(min_length=1)
    total_amt: float = Field(ge=0)
    date: Optional[datetime.date] = None
    payment_mode: Optional[str] = None


class InvoiceUpdate(BaseModel):
    cust_id: Optional[str] = Field(None, min_length=1)
    total_amt: Optional[float] = Field(None, ge=0)
    date: Optional[datetime.date] = None
    payment_mode: Optional[str] = None


class InvoiceRead(InvoiceCreate):
    model_config = ConfigDict(from_attributes=True)
