from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.core.constants import DEFAULT_PAYMENT_MODE
from retail_api.models.invoice import Invoice
from retail_api.schemas.invoice import InvoiceCreate, InvoiceUpdate
from retail_api.services.crud import delete_row, get_or_raise, insert_row, update_row

LABEL = "Invoice"


def list_invoices(db: Session) -> list[Invoice]:
    stmt = select(Invoice).order_by(Invoice.date.desc(), Invoice.invoice_id.desc())
    return list(db.execute(stmt).scalars().all())


def get_invoice(db: Session, invoice_id: str) -> Invoice:
    return get_or_raise(db, Invoice, invoice_id, LABEL)


def create_invoice(db: Session, payload: InvoiceCreate) -> Invoice:
    values = payload.model_dump()
    values["date"] = values["date"] or date.today()
    values["payment_mode"] = values["payment_mode"] or DEFAULT_PAYMENT_MODE
    return insert_row(db, Invoice(**values), payload.invoice_id, LABEL)


def update_invoice(db: Session, invoice_id: str, payload: InvoiceUpdate) -> Invoice:
    return update_row(db, Invoice, invoice_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_invoice(db: Session, invoice_id: str) -> None:
    delete_row(db, Invoice, invoice_id, LABEL)
