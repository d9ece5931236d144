from retail_api.routers.customers import router as customers_router
from retail_api.routers.health import router as health_router
from retail_api.routers.invoices import router as invoices_router
from retail_api.routers.loans import router as loans_router
from retail_api.routers.payments import router as payments_router
from retail_api.routers.products import router as products_router
from retail_api.routers.sales import router as sales_router
from retail_api.routers.stock import router as stock_router
from retail_api.routers.summary import router as summary_router
from retail_api.routers.suppliers import router as suppliers_router

RESOURCE_ROUTERS = (
    customers_router,
    suppliers_router,
    products_router,
    stock_router,
    invoices_router,
    sales_router,
    loans_router,
    payments_router,
    summary_router,
)

__all__ = [
    "RESOURCE_ROUTERS",
    "customers_router",
    "health_router",
    "invoices_router",
    "loans_router",
    "payments_router",
    "products_router",
    "sales_router",
    "stock_router",
    "summary_router",
    "suppliers_router",
]
