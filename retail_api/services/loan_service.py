from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.models.loan import Loan
from retail_api.schemas.loan import LoanCreate, LoanUpdate
from retail_api.services.crud import delete_row, get_or_raise, insert_row, update_row

LABEL = "Loan"


def list_loans(db: Session) -> list[Loan]:
    stmt = select(Loan).order_by(Loan.loan_id.desc())
    return list(db.execute(stmt).scalars().all())


def get_loan(db: Session, loan_id: str) -> Loan:
    return get_or_raise(db, Loan, loan_id, LABEL)


def create_loan(db: Session, payload: LoanCreate) -> Loan:
    values = payload.model_dump()
    if values["balance"] is None:
        values["balance"] = values["loan_amount"]
    return insert_row(db, Loan(**values), payload.loan_id, LABEL)


def update_loan(db: Session, loan_id: str, payload: LoanUpdate) -> Loan:
    return update_row(db, Loan, loan_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_loan(db: Session, loan_id: str) -> None:
    delete_row(db, Loan, loan_id, LABEL)
