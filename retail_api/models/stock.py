from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String

from retail_api.database.base import Base


class StockEntry(Base):
    __tablename__ = "stock"

    stock_id = Column(String, primary_key=True)
    supplier_id = Column(String, ForeignKey("suppliers.supplier_id"))
    product_id = Column(String, ForeignKey("products.product_id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    date_added = Column(Date)

    __table_args__ = (
        Index("idx_stock_product_date", "product_id", "date_added"),
    )


__all__ = ["StockEntry"]
