from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String

from retail_api.database.base import Base


class Product(Base):
    __tablename__ = "products"

    product_id = Column(String, primary_key=True)
    product_name = Column(String, nullable=False)
    category = Column(String)

    price = Column(Float, nullable=False, default=0)
    # Running total: receipts add to it, sales take from it.
    quantity_stock = Column(Integer, nullable=False, default=0)

    supplier_id = Column(String, ForeignKey("suppliers.supplier_id"))

    __table_args__ = (
        Index("idx_products_name", "product_name"),
        Index("idx_products_supplier", "supplier_id"),
    )


__all__ = ["Product"]
