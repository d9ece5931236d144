from sqlalchemy import Column, Date, Float, ForeignKey, Index, String

from retail_api.database.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    invoice_id = Column(String, primary_key=True)
    cust_id = Column(String, ForeignKey("customers.cust_id"), nullable=False)

    total_amt = Column(Float, nullable=False)
    date = Column(Date)
    payment_mode = Column(String)

    __table_args__ = (
        Index("idx_invoices_customer", "cust_id"),
    )


__all__ = ["Invoice"]
