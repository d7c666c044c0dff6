ITEM_NAME_MAX_LENGTH = 150

TRANSACTION_ADD = "add"
TRANSACTION_REMOVE = "remove"
TRANSACTION_ADJUST = "adjust"
TRANSACTION_TYPES = (TRANSACTION_ADD, TRANSACTION_REMOVE, TRANSACTION_ADJUST)

ACTION_CREATE = "CREATE"
ACTION_UPDATE = "UPDATE"
ACTION_DELETE = "DELETE"

USER_ROLES = ("admin", "staff", "viewer")

INITIAL_STOCK_REASON = "Initial stock entry"
STOCK_ADJUSTMENT_REASON = "Stock adjustment"

CSV_EXPORT_HEADER = (
    "Item ID",
    "Item Name",
    "Category",
    "Quantity",
    "Unit Price",
    "Total Value",
    "Location",
    "Created Date",
)
