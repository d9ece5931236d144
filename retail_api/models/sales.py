from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String

from retail_api.database.base import Base


class Sale(Base):
    __tablename__ = "sales"

    sales_id = Column(String, primary_key=True)
    product_id = Column(String, ForeignKey("products.product_id"), nullable=False)
    invoice_id = Column(String, ForeignKey("invoices.invoice_id"))

    quantity_sold = Column(Integer, nullable=False)
    price_total = Column(Float, nullable=False)

    __table_args__ = (
        Index("idx_sales_product", "product_id"),
        Index("idx_sales_invoice", "invoice_id"),
    )


__all__ = ["Sale"]
