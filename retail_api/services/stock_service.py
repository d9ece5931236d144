import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.models.product import Product
from retail_api.models.stock import StockEntry
from retail_api.schemas.stock import StockEntryCreate, StockEntryRead, StockEntryUpdate
from retail_api.services.adjustments import adjust_product_stock
from retail_api.services.crud import ensure_absent, get_or_raise, unit_of_work, update_row

logger = logging.getLogger(__name__)

LABEL = "Stock entry"


def list_stock_with_product(db: Session) -> list[dict]:
    rows = db.execute(
        select(StockEntry, Product.product_name)
        .outerjoin(Product, StockEntry.product_id == Product.product_id)
        .order_by(StockEntry.date_added.desc(), StockEntry.stock_id.desc())
    ).all()

    results = []
    for entry, product_name in rows:
        item = StockEntryRead.model_validate(entry).model_dump()
        item["product_name"] = product_name
        results.append(item)
    return results


def get_stock_entry(db: Session, stock_id: str) -> StockEntry:
    return get_or_raise(db, StockEntry, stock_id, LABEL)


def record_stock_receipt(
    db: Session,
    payload: StockEntryCreate,
    *,
    allow_negative_stock: bool = False,
) -> StockEntry:
    values = payload.model_dump()
    values["date_added"] = values["date_added"] or date.today()
    entry = StockEntry(**values)

    with unit_of_work(db):
        ensure_absent(db, StockEntry, payload.stock_id, LABEL)
        db.add(entry)
        db.flush()
        adjust_product_stock(
            db,
            entry.product_id,
            entry.quantity,
            allow_negative=allow_negative_stock,
        )

    logger.info("Stock receipt %s recorded for product %s", entry.stock_id, entry.product_id)
    return entry


def update_stock_entry(db: Session, stock_id: str, payload: StockEntryUpdate) -> StockEntry:
    return update_row(db, StockEntry, stock_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_stock_entry(
    db: Session,
    stock_id: str,
    *,
    allow_negative_stock: bool = False,
) -> None:
    with unit_of_work(db):
        entry = get_or_raise(db, StockEntry, stock_id, LABEL)
        db.delete(entry)
        db.flush()
        adjust_product_stock(
            db,
            entry.product_id,
            -entry.quantity,
            allow_negative=allow_negative_stock,
        )

    logger.info("Stock receipt %s removed from product %s", stock_id, entry.product_id)
