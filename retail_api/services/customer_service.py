from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from retail_api.models.customer import Customer
from retail_api.schemas.customer import CustomerCreate, CustomerUpdate
from retail_api.services.crud import delete_row, get_or_raise, insert_row, like_pattern, update_row

LABEL = "Customer"


def _search_text():
    # Null columns must not hide the whole row from the match.
    parts = [
        func.coalesce(column, "")
        for column in (
            Customer.cust_id,
            Customer.cust_name,
            Customer.email,
            Customer.phone_no,
            Customer.city_name,
        )
    ]
    haystack = parts[0]
    for part in parts[1:]:
        haystack = haystack + " " + part
    return func.lower(haystack)


def list_customers(
    db: Session,
    query: Optional[str] = None,
    *,
    page: Optional[int] = None,
    page_size: int = 50,
) -> list[Customer]:
    stmt = select(Customer).order_by(Customer.cust_name, Customer.cust_id)
    pattern = like_pattern(query)
    if pattern:
        stmt = stmt.where(_search_text().like(pattern, escape="\\"))
    if page is not None:
        stmt = stmt.limit(page_size).offset((page - 1) * page_size)
    return list(db.execute(stmt).scalars().all())


def get_customer(db: Session, cust_id: str) -> Customer:
    return get_or_raise(db, Customer, cust_id, LABEL)


def create_customer(db: Session, payload: CustomerCreate) -> Customer:
    return insert_row(db, Customer(**payload.model_dump()), payload.cust_id, LABEL)


def update_customer(db: Session, cust_id: str, payload: CustomerUpdate) -> Customer:
    return update_row(db, Customer, cust_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_customer(db: Session, cust_id: str) -> None:
    delete_row(db, Customer, cust_id, LABEL)
