import logging
from contextlib import contextmanager
from typing import Iterator, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from retail_api.core.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Commit everything done in the block, or roll all of it back.

    Integrity failures reported by the store (duplicate key, dangling
    foreign key, restricted delete) surface as ``ConflictError``.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity violation: %s", exc.orig)
        raise ConflictError(str(exc.orig)) from exc
    except Exception:
        db.rollback()
        raise


def get_or_raise(db: Session, model: type[ModelT], key: str, label: str) -> ModelT:
    row = db.get(model, key, populate_existing=True)
    if row is None:
        raise NotFoundError("{} not found".format(label))
    return row


def ensure_absent(db: Session, model, key: str, label: str) -> None:
    if db.get(model, key) is not None:
        raise ConflictError("{} {} already exists".format(label, key))


def insert_row(db: Session, row: ModelT, key: str, label: str) -> ModelT:
    with unit_of_work(db):
        ensure_absent(db, type(row), key, label)
        db.add(row)
    return row


def apply_partial_update(row, changes: dict) -> None:
    # None never overwrites a stored value.
    for field, value in changes.items():
        if value is None:
            continue
        setattr(row, field, value)


def update_row(db: Session, model: type[ModelT], key: str, label: str, changes: dict) -> ModelT:
    with unit_of_work(db):
        row = get_or_raise(db, model, key, label)
        apply_partial_update(row, changes)
    return row


def delete_row(db: Session, model, key: str, label: str) -> None:
    with unit_of_work(db):
        row = get_or_raise(db, model, key, label)
        db.delete(row)
        db.flush()


def like_pattern(query: Optional[str]) -> Optional[str]:
    query_text = (query or "").strip().lower()
    if not query_text:
        return None
    escaped = query_text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return "%{}%".format(escaped)


__all__ = [
    "apply_partial_update",
    "delete_row",
    "ensure_absent",
    "get_or_raise",
    "insert_row",
    "like_pattern",
    "unit_of_work",
    "update_row",
]
