from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.dependencies import get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate
from retail_api.services import invoice_service

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=List[InvoiceRead])
def list_invoices(db: Session = Depends(get_db)):
    return invoice_service.list_invoices(db)


@router.get("/{invoice_id}", response_model=InvoiceRead)
def get_invoice(invoice_id: str, db: Session = Depends(get_db)):
    return invoice_service.get_invoice(db, invoice_id)


@router.post("", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    return invoice_service.create_invoice(db, payload)


@router.put("/{invoice_id}", response_model=InvoiceRead)
def update_invoice(invoice_id: str, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    return invoice_service.update_invoice(db, invoice_id, payload)


@router.delete("/{invoice_id}", response_model=DeleteResult)
def delete_invoice(invoice_id: str, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return DeleteResult(id=invoice_id)


__all__ = ["router"]
