from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CustomerBase(BaseModel):
    cust_name: str = Field(min_length=1)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone_no: Optional[str] = None
    house_no: Optional[str] = None
    street_name: Optional[str] = None
    city_name: Optional[str] = None


class CustomerCreate(CustomerBase):
    cust_id: str = Field(min_length=1)


class CustomerUpdate(BaseModel):
    cust_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone_no: Optional[str] = None
    house_no: Optional[str] = None
    street_name: Optional[str] = None
    city_name: Optional[str] = None


class CustomerRead(CustomerCreate):
    model_config = ConfigDict(from_attributes=True)
