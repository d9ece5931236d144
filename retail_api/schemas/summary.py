from pydantic import BaseModel


class SummaryRead(BaseModel):
    totalCustomers: int
    totalProducts: int
    totalLoans: int
    pendingPayments: float
