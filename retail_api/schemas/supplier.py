from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from retail_api.schemas.customer import EMAIL_PATTERN


class SupplierBase(BaseModel):
    supplier_name: str = Field(min_length=1)
    enterprise_name: Optional[str] = None
    email_id: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone_no: Optional[str] = None
    address: Optional[str] = None


class SupplierCreate(SupplierBase):
    supplier_id: str = Field(min_length=1)


class SupplierUpdate(BaseModel):
    supplier_name: Optional[str] = Field(None, min_length=1)
    enterprise_name: Optional[str] = None
    email_id: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone_no: Optional[str] = None
    address: Optional[str] = None


class SupplierRead(SupplierCreate):
    model_config = ConfigDict(from_attributes=True)
