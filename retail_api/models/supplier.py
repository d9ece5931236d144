from sqlalchemy import Column, Index, String

from retail_api.database.base import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    supplier_id = Column(String, primary_key=True)
    supplier_name = Column(String, nullable=False)
    enterprise_name = Column(String)

    email_id = Column(String)
    phone_no = Column(String)
    address = Column(String)

    __table_args__ = (
        Index("idx_suppliers_name", "supplier_name"),
    )


__all__ = ["Supplier"]
