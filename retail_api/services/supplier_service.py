from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.models.supplier import Supplier
from retail_api.schemas.supplier import SupplierCreate, SupplierUpdate
from retail_api.services.crud import delete_row, get_or_raise, insert_row, update_row

LABEL = "Supplier"


def list_suppliers(db: Session) -> list[Supplier]:
    stmt = select(Supplier).order_by(Supplier.supplier_name, Supplier.supplier_id)
    return list(db.execute(stmt).scalars().all())


def get_supplier(db: Session, supplier_id: str) -> Supplier:
    return get_or_raise(db, Supplier, supplier_id, LABEL)


def create_supplier(db: Session, payload: SupplierCreate) -> Supplier:
    return insert_row(db, Supplier(**payload.model_dump()), payload.supplier_id, LABEL)


def update_supplier(db: Session, supplier_id: str, payload: SupplierUpdate) -> Supplier:
    return update_row(db, Supplier, supplier_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_supplier(db: Session, supplier_id: str) -> None:
    delete_row(db, Supplier, supplier_id, LABEL)
