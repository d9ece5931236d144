from sqlalchemy import Column, Date, Float, ForeignKey, Index, String

from retail_api.database.base import Base


class Payment(Base):
    __tablename__ = "payments"

    pay_id = Column(String, primary_key=True)
    loan_id = Column(String, ForeignKey("loans.loan_id"), nullable=False)

    payment_date = Column(Date)
    amount_paid = Column(Float, nullable=False)
    payment_mode = Column(String)

    __table_args__ = (
        Index("idx_payments_loan_date", "loan_id", "payment_date"),
    )


__all__ = ["Payment"]
