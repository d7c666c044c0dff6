import importlib

from stockroom.models.activity_log import ActivityLog
from stockroom.models.category import Category
from stockroom.models.inventory_item import InventoryItem
from stockroom.models.stock_transaction import StockTransaction
from stockroom.models.user import User


def import_all_models() -> None:
    for module_name in (
        "stockroom.models.activity_log",
        "stockroom.models.category",
        "stockroom.models.inventory_item",
        "stockroom.models.stock_transaction",
        "stockroom.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "ActivityLog",
    "Category",
    "InventoryItem",
    "StockTransaction",
    "User",
    "import_all_models",
]
