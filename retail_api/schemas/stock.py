from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StockEntryCreate(BaseModel):
    stock_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    supplier_id: Optional[str] = None
    quantity: int
    date_added: Optional[date] = None


class StockEntryUpdate(BaseModel):
    """Descriptive fields only; the received quantity is fixed once recorded."""

    supplier_id: Optional[str] = None
    date_added: Optional[date] = None


class StockEntryRead(StockEntryCreate):
    model_config = ConfigDict(from_attributes=True)


class StockEntryWithProduct(StockEntryRead):
    product_name: Optional[str] = None
