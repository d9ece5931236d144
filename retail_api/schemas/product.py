from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    product_name: str = Field(min_length=1)
    category: Optional[str] = None
    price: float = Field(0, ge=0)
    quantity_stock: int = Field(0, ge=0)
    supplier_id: Optional[str] = None


class ProductCreate(ProductBase):
    product_id: str = Field(min_length=1)


class ProductUpdate(BaseModel):
    product_name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    quantity_stock: Optional[int] = Field(None, ge=0)
    supplier_id: Optional[str] = None


class ProductRead(ProductCreate):
    quantity_stock: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProductWithSupplier(ProductRead):
    supplier_name: Optional[str] = None
