from sqlalchemy import func, select
from sqlalchemy.orm import Session

from retail_api.models.customer import Customer
from retail_api.models.loan import Loan
from retail_api.models.product import Product


def _count(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def dashboard_summary(db: Session) -> dict:
    pending = db.execute(select(func.coalesce(func.sum(Loan.balance), 0))).scalar_one()
    return {
        "totalCustomers": _count(db, Customer),
        "totalProducts": _count(db, Product),
        "totalLoans": _count(db, Loan),
        "pendingPayments": float(pending),
    }
