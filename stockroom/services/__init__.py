from stockroom.services.activity_service import record_activity
from stockroom.services.report_service import dashboard_summary, export_inventory_csv
from stockroom.services.stock_service import (
    adjust_stock,
    create_item_with_stock,
    remove_item,
    update_item_fields,
)

__all__ = [
    "adjust_stock",
    "create_item_with_stock",
    "dashboard_summary",
    "export_inventory_csv",
    "record_activity",
    "remove_item",
    "update_item_fields",
]
