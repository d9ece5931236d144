from sqlalchemy import select
from sqlalchemy.orm import Session

from retail_api.models.product import Product
from retail_api.models.supplier import Supplier
from retail_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from retail_api.services.crud import delete_row, get_or_raise, insert_row, update_row

LABEL = "Product"


def list_products_with_supplier(db: Session) -> list[dict]:
    rows = db.execute(
        select(Product, Supplier.supplier_name)
        .outerjoin(Supplier, Product.supplier_id == Supplier.supplier_id)
        .order_by(Product.product_name, Product.product_id)
        .execution_options(populate_existing=True)
    ).all()

    results = []
    for product, supplier_name in rows:
        item = ProductRead.model_validate(product).model_dump()
        item["supplier_name"] = supplier_name
        results.append(item)
    return results


def get_product(db: Session, product_id: str) -> Product:
    return get_or_raise(db, Product, product_id, LABEL)


def create_product(db: Session, payload: ProductCreate) -> Product:
    return insert_row(db, Product(**payload.model_dump()), payload.product_id, LABEL)


def update_product(db: Session, product_id: str, payload: ProductUpdate) -> Product:
    return update_row(db, Product, product_id, LABEL, payload.model_dump(exclude_unset=True))


def delete_product(db: Session, product_id: str) -> None:
    delete_row(db, Product, product_id, LABEL)
