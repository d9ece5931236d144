from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoanCreate(BaseModel):
    loan_id: str = Field(min_length=1)
    cust_id: str = Field(min_length=1)
    loan_amount: float = Field(ge=0)
    interest_rate: float = Field(0, ge=0)
    # Defaults to loan_amount when omitted.
    balance: Optional[float] = Field(None, ge=0)


class LoanUpdate(BaseModel):
    cust_id: Optional[str] = Field(None, min_length=1)
    loan_amount: Optional[float] = Field(None, ge=0)
    interest_rate: Optional[float] = Field(None, ge=0)
    balance: Optional[float] = Field(None, ge=0)


class LoanRead(LoanCreate):
    balance: float

    model_config = ConfigDict(from_attributes=True)
