from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from retail_api.dependencies import get_db
from retail_api.schemas.common import DeleteResult
from retail_api.schemas.loan import LoanCreate, LoanRead, LoanUpdate
from retail_api.services import loan_service

router = APIRouter(prefix="/loans", tags=["Loans"])


@router.get("", response_model=List[LoanRead])
def list_loans(db: Session = Depends(get_db)):
    return loan_service.list_loans(db)


@router.get("/{loan_id}", response_model=LoanRead)
def get_loan(loan_id: str, db: Session = Depends(get_db)):
    return loan_service.get_loan(db, loan_id)


@router.post("", response_model=LoanRead, status_code=status.HTTP_201_CREATED)
def create_loan(payload: LoanCreate, db: Session = Depends(get_db)):
    return loan_service.create_loan(db, payload)


@router.put("/{loan_id}", response_model=LoanRead)
def update_loan(loan_id: str, payload: LoanUpdate, db: Session = Depends(get_db)):
    return loan_service.update_loan(db, loan_id, payload)


@router.delete("/{loan_id}", response_model=DeleteResult)
def delete_loan(loan_id: str, db: Session = Depends(get_db)):
    loan_service.delete_loan(db, loan_id)
    return DeleteResult(id=loan_id)


__all__ = ["router"]
