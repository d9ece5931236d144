from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from retail_api.config import Settings
from retail_api.dependencies import get_app_settings, get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from retail_api.services import customer_service

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerRead])
def list_customers(
    q: Optional[str] = Query(None, description="Matches id, name, email, phone or city"),
    page: Optional[int] = Query(None, ge=1, description="1-based page number"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return customer_service.list_customers(db, q, page=page, page_size=settings.PAGE_SIZE)


@router.get("/{cust_id}", response_model=CustomerRead)
def get_customer(cust_id: str, db: Session = Depends(get_db)):
    return customer_service.get_customer(db, cust_id)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    return customer_service.create_customer(db, payload)


@router.put("/{cust_id}", response_model=CustomerRead)
def update_customer(cust_id: str, payload: CustomerUpdate, db: Session = Depends(get_db)):
    return customer_service.update_customer(db, cust_id, payload)


@router.delete("/{cust_id}", response_model=DeleteResult)
def delete_customer(cust_id: str, db: Session = Depends(get_db)):
    customer_service.delete_customer(db, cust_id)
    return DeleteResult(id=cust_id)


__all__ = ["router"]
