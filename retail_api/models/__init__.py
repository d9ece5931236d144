import importlib

from retail_api.models.customer import Customer
from retail_api.models.invoice import Invoice
from retail_api.models.loan import Loan
from retail_api.models.payment import Payment
from retail_api.models.product import Product
from retail_api.models.sales import Sale
from retail_api.models.stock import StockEntry
from retail_api.models.supplier import Supplier


def import_all_models() -> None:
    for module_name in (
        "retail_api.models.customer",
        "retail_api.models.invoice",
        "retail_api.models.loan",
        "retail_api.models.payment",
        "retail_api.models.product",
        "retail_api.models.sales",
        "retail_api.models.stock",
        "retail_api.models.supplier",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Customer",
    "Invoice",
    "Loan",
    "Payment",
    "Product",
    "Sale",
    "StockEntry",
    "Supplier",
    "import_all_models",
]
