"""Propagation writes against derived fields.

``products.quantity_stock`` and ``loans.balance`` are running totals kept in
step with the stock, sales and payments ledgers. Each adjustment is a single
``UPDATE ... SET col = col + :delta`` so concurrent writers never lose an
update, and it is meant to run inside the caller's ``unit_of_work`` next to
the ledger insert or delete that triggered it.
"""

import logging

from sqlalchemy import Numeric, cast, func, update
from sqlalchemy.orm import Session

from retail_api.core.errors import InsufficientQuantityError, NotFoundError
from retail_api.models.loan import Loan
from retail_api.models.product import Product

logger = logging.getLogger(__name__)

BALANCE_DECIMALS = 2


def adjust_product_stock(
    db: Session,
    product_id: str,
    delta: int,
    *,
    allow_negative: bool = False,
) -> None:
    stmt = (
        update(Product)
        .where(Product.product_id == product_id)
        .values(quantity_stock=Product.quantity_stock + delta)
    )
    if delta < 0 and not allow_negative:
        stmt = stmt.where(Product.quantity_stock + delta >= 0)

    result = db.execute(stmt.execution_options(synchronize_session=False))
    if result.rowcount == 1:
        logger.info("Product %s stock adjusted by %+d", product_id, delta)
        return

    if db.get(Product, product_id) is None:
        raise NotFoundError("Product not found")
    raise InsufficientQuantityError(
        "Insufficient stock for product {}: cannot remove {}".format(product_id, -delta)
    )


def adjust_loan_balance(
    db: Session,
    loan_id: str,
    delta: float,
    *,
    allow_negative: bool = False,
) -> None:
    # Rounded to cents before it is compared or stored.
    new_balance = func.round(cast(Loan.balance + delta, Numeric), BALANCE_DECIMALS)
    stmt = (
        update(Loan)
        .where(Loan.loan_id == loan_id)
        .values(balance=new_balance)
    )
    if delta < 0 and not allow_negative:
        stmt = stmt.where(new_balance >= 0)

    result = db.execute(stmt.execution_options(synchronize_session=False))
    if result.rowcount == 1:
        logger.info("Loan %s balance adjusted by %+.2f", loan_id, delta)
        return

    if db.get(Loan, loan_id) is None:
        raise NotFoundError("Loan not found")
    raise InsufficientQuantityError(
        "Payment of {} exceeds the outstanding balance of loan {}".format(-delta, loan_id)
    )


__all__ = ["adjust_loan_balance", "adjust_product_stock"]
