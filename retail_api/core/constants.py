DEFAULT_PAYMENT_MODE = "Cash"

ROOT_MESSAGE = "Retail Loan Inventory Backend running. Try {prefix}/customers"
INTERNAL_ERROR_DETAIL = "Internal server error"
