from retail_api.services.adjustments import adjust_loan_balance, adjust_product_stock
from retail_api.services.summary_service import dashboard_summary

__all__ = [
    "adjust_loan_balance",
    "adjust_product_stock",
    "dashboard_summary",
]
