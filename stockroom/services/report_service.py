import csv

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stockroom.config import get_settings
from stockroom.core.constants import CSV_EXPORT_HEADER
from stockroom.core.dates import normalize_datetime
from stockroom.models.category import Category
from stockroom.models.inventory_item import InventoryItem
from stockroom.models.stock_transaction import StockTransaction
from stockroom.schemas.report import CategoryShare, DashboardSummary, RecentTransaction

_item_value = InventoryItem.quantity * InventoryItem.price


def dashboard_summary(db: Session) -> DashboardSummary:
    settings = get_settings()

    total_value = db.execute(select(func.coalesce(func.sum(_item_value), 0))).scalar_one()
    total_items = db.execute(select(func.count(InventoryItem.item_id))).scalar_one()
    low_stock_items = db.execute(
        select(func.count(InventoryItem.item_id)).where(
            InventoryItem.quantity <= InventoryItem.reorder_level
        )
    ).scalar_one()

    item_count = func.count(InventoryItem.item_id)
    category_rows = db.execute(
        select(
            Category.category_name,
            item_count.label("item_count"),
            func.coalesce(func.sum(_item_value), 0).label("category_value"),
        )
        .outerjoin(InventoryItem, InventoryItem.category_id == Category.category_id)
        .group_by(Category.category_id, Category.category_name)
        .order_by(item_count.desc(), Category.category_name.asc())
    ).all()

    recent_rows = db.execute(
        select(
            InventoryItem.item_name,
            StockTransaction.transaction_type,
            StockTransaction.quantity_change,
            StockTransaction.created_at,
        )
        .select_from(StockTransaction)
        .join(InventoryItem, InventoryItem.item_id == StockTransaction.item_id)
        .order_by(StockTransaction.created_at.desc(), StockTransaction.transaction_id.desc())
        .limit(settings.RECENT_TRANSACTIONS_LIMIT)
    ).all()

    return DashboardSummary(
        total_value=float(total_value or 0),
        total_items=total_items or 0,
        low_stock_items=low_stock_items or 0,
        category_distribution=[
            CategoryShare(
                category_name=row.category_name,
                count=row.item_count,
                value=float(row.category_value or 0),
            )
            for row in category_rows
        ],
        recent_transactions=[
            RecentTransaction(
                item_name=row.item_name,
                transaction_type=row.transaction_type,
                quantity_change=row.quantity_change,
                created_at=normalize_datetime(row.created_at),
            )
            for row in recent_rows
        ],
    )


def export_inventory_csv(db: Session, stream) -> int:
    """Write every item to ``stream`` as CSV, ordered by name. Returns the row count."""
    rows = db.execute(
        select(
            InventoryItem.item_id,
            InventoryItem.item_name,
            Category.category_name,
            InventoryItem.quantity,
            InventoryItem.price,
            InventoryItem.location,
            InventoryItem.created_at,
        )
        .join(Category, Category.category_id == InventoryItem.category_id)
        .order_by(InventoryItem.item_name.asc(), InventoryItem.item_id.asc())
    ).all()

    writer = csv.writer(stream)
    writer.writerow(CSV_EXPORT_HEADER)
    for row in rows:
        price = float(row.price or 0)
        writer.writerow(
            [
                row.item_id,
                row.item_name,
                row.category_name,
                row.quantity,
                "{:.2f}".format(price),
                "{:.2f}".format(row.quantity * price),
                row.location or "",
                normalize_datetime(row.created_at).isoformat(),
            ]
        )
    return len(rows)


__all__ = ["dashboard_summary", "export_inventory_csv"]
