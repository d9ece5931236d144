from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SaleCreate(BaseModel):
    sales_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    invoice_id: Optional[str] = None
    quantity_sold: int = Field(ge=1)
    price_total: float = Field(ge=0)


class SaleUpdate(BaseModel):
    invoice_id: Optional[str] = None
    price_total: Optional[float] = Field(None, ge=0)


class SaleRead(SaleCreate):
    model_config = ConfigDict(from_attributes=True)
