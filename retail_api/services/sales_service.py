import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.models.sales import Sale
from retail_api.schemas.sales import SaleCreate, SaleUpdate
from retail_api.services.adjustments import adjust_product_stock
from retail_api.services.crud import ensure_absent, get_or_raise, unit_of_work, update_row

logger = logging.getLogger(__name__)

LABEL = "Sale"


def list_sales(db: Session) -> list[Sale]:
    stmt = select(Sale).order_by(Sale.sales_id.desc())
    return list(db.execute(stmt).scalars().all())


def get_sale(db: Session, sales_id: str) -> Sale:
    return get_or_raise(db, Sale, sales_id, LABEL)


def record_sale(
    db: Session,
    payload: SaleCreate,
    *,
    allow_negative_stock: bool = False,
) -> Sale:
    sale = Sale(**payload.model_dump())

    with unit_of_work(db):
        ensure_absent(db, Sale, payload.sales_id, LABEL)
        db.add(sale)
        db.flush()
        adjust_product_stock(
            db,
            sale.product_id,
            -sale.quantity_sold,
            allow_negative=allow_negative_stock,
        )

    logger.info(
        "Sale %s recorded: %s x %s",
        sale.sales_id,
        sale.quantity_sold,
        sale.product_id,
    )
    return sale


def update_sale(db: Session, sales_id: str, payload: SaleUpdate) -> Sale:
    return update_row(db, Sale, sales_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_sale(db: Session, sales_id: str) -> None:
    """Void a sale and put its quantity back on the shelf."""
    with unit_of_work(db):
        sale = get_or_raise(db, Sale, sales_id, LABEL)
        db.delete(sale)
        db.flush()
        adjust_product_stock(db, sale.product_id, sale.quantity_sold)

    logger.info("Sale %s voided", sales_id)
