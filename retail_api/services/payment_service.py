import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.core.constants import DEFAULT_PAYMENT_MODE
from retail_api.models.payment import Payment
from retail_api.schemas.payment import PaymentCreate, PaymentUpdate
from retail_api.services.adjustments import adjust_loan_balance
from retail_api.services.crud import ensure_absent, get_or_raise, unit_of_work, update_row

logger = logging.getLogger(__name__)

LABEL = "Payment"


def list_payments(db: Session) -> list[Payment]:
    stmt = select(Payment).order_by(Payment.payment_date.desc(), Payment.pay_id.desc())
    return list(db.execute(stmt).scalars().all())


def get_payment(db: Session, pay_id: str) -> Payment:
    return get_or_raise(db, Payment, pay_id, LABEL)


def record_payment(
    db: Session,
    payload: PaymentCreate,
    *,
    allow_negative_balance: bool = False,
) -> Payment:
    values = payload.model_dump()
    values["payment_date"] = values["payment_date"] or date.today()
    values["payment_mode"] = values["payment_mode"] or DEFAULT_PAYMENT_MODE
    payment = Payment(**values)

    with unit_of_work(db):
        ensure_absent(db, Payment, payload.pay_id, LABEL)
        db.add(payment)
        db.flush()
        adjust_loan_balance(
            db,
            payment.loan_id,
            -payment.amount_paid,
            allow_negative=allow_negative_balance,
        )

    logger.info(
        "Payment %s of %.2f recorded against loan %s",
        payment.pay_id,
        payment.amount_paid,
        payment.loan_id,
    )
    return payment


def update_payment(db: Session, pay_id: str, payload: PaymentUpdate) -> Payment:
    return update_row(db, Payment, pay_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_payment(db: Session, pay_id: str) -> None:
    """Reverse a payment, restoring the amount to the loan balance."""
    with unit_of_work(db):
        payment = get_or_raise(db, Payment, pay_id, LABEL)
        db.delete(payment)
        db.flush()
        adjust_loan_balance(db, payment.loan_id, payment.amount_paid)

    logger.info("Payment %s reversed", pay_id)
