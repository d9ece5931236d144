from sqlalchemy import Column, Float, ForeignKey, Index, String

from retail_api.database.base import Base


class Loan(Base):
    __tablename__ = "loans"

    loan_id = Column(String, primary_key=True)
    cust_id = Column(String, ForeignKey("customers.cust_id"), nullable=False)

    loan_amount = Column(Float, nullable=False)
    interest_rate = Column(Float, nullable=False, default=0)
    # Outstanding amount, reduced by each recorded payment.
    balance = Column(Float, nullable=False)

    __table_args__ = (
        Index("idx_loans_customer", "cust_id"),
    )


__all__ = ["Loan"]
