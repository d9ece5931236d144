import logging
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from retail_api.models import (
    Customer,
    Invoice,
    Loan,
    Payment,
    Product,
    Sale,
    StockEntry,
    Supplier,
)

logger = logging.getLogger(__name__)

# Dependents first, so deletes never trip a foreign key.
_RESET_ORDER = (Payment, Loan, Sale, Invoice, StockEntry, Product, Supplier, Customer)


def reset_data(db: Session) -> None:
    for model in _RESET_ORDER:
        db.execute(delete(model))
    db.commit()
    logger.info("All tables cleared.")


def seed_demo_data(db: Session) -> bool:
    """Insert the demonstration dataset when the customers table is empty.

    Returns ``True`` when rows were inserted. The rows describe an existing
    shop, so they are written as-is and do not go through the stock or
    balance propagation that the services apply.
    """
    has_customer = db.execute(select(Customer.cust_id).limit(1)).first()
    if has_customer:
        logger.info("Seed skipped: customers already exist.")
        return False

    db.add_all(
        [
            Customer(
                cust_id="C001",
                cust_name="Asha Kumar",
                email="asha@example.com",
                phone_no="9876543210",
                house_no="12A",
                street_name="MG Road",
                city_name="Jaipur",
            ),
            Customer(
                cust_id="C002",
                cust_name="Ravi Singh",
                email="ravi@example.com",
                phone_no="9123456780",
                house_no="5B",
                street_name="Station St",
                city_name="Delhi",
            ),
            Supplier(
                supplier_id="S001",
                supplier_name="Radha Supplies",
                enterprise_name="Radha Co",
                email_id="contact@radha.com",
                phone_no="9000000001",
                address="12 Market Rd, Jaipur",
            ),
        ]
    )
    db.flush()

    db.add_all(
        [
            Product(
                product_id="P001",
                product_name="Widget A",
                category="Tools",
                price=250.0,
                quantity_stock=20,
                supplier_id="S001",
            ),
            Product(
                product_id="P002",
                product_name="Gadget B",
                category="Gadgets",
                price=450.0,
                quantity_stock=10,
                supplier_id="S001",
            ),
            Invoice(
                invoice_id="I001",
                cust_id="C001",
                total_amt=500.0,
                date=date(2025, 10, 15),
                payment_mode="Card",
            ),
            Loan(
                loan_id="L001",
                cust_id="C002",
                loan_amount=10000.0,
                interest_rate=10.0,
                balance=8000.0,
            ),
        ]
    )
    db.flush()

    db.add_all(
        [
            StockEntry(
                stock_id="ST001",
                supplier_id="S001",
                product_id="P001",
                quantity=20,
                date_added=date(2025, 10, 1),
            ),
            Sale(
                sales_id="SA001",
                product_id="P001",
                invoice_id="I001",
                quantity_sold=2,
                price_total=500.0,
            ),
            Payment(
                pay_id="P001",
                loan_id="L001",
                payment_date=date(2025, 10, 20),
                amount_paid=2000.0,
                payment_mode="Cash",
            ),
        ]
    )
    db.commit()
    logger.info("Seed data created.")
    return True


__all__ = ["reset_data", "seed_demo_data"]
