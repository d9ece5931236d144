from sqlalchemy import Column, Index, String

from retail_api.database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    cust_id = Column(String, primary_key=True)
    cust_name = Column(String, nullable=False)

    email = Column(String)
    phone_no = Column(String)

    house_no = Column(String)
    street_name = Column(String)
    city_name = Column(String)

    __table_args__ = (
        Index("idx_customers_name", "cust_name"),
    )


__all__ = ["Customer"]
