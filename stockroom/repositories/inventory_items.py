"""Data access for inventory items.

``create_item`` and ``update_item`` are the only supported ways to persist an
item: they own the ``created_at``/``updated_at`` stamps. ``save_item`` picks
between them based on whether the item already has an identity.
"""
import logging
from typing import Optional

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from stockroom.core import dates
from stockroom.models.inventory_item import InventoryItem
from stockroom.repositories.common import commit_or_raise, escape_like, paginate
from stockroom.schemas.paging import Page, PageRequest

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "item_id": InventoryItem.item_id,
    "item_name": InventoryItem.item_name,
    "quantity": InventoryItem.quantity,
    "price": InventoryItem.price,
    "created_at": InventoryItem.created_at,
    "updated_at": InventoryItem.updated_at,
}


def stamp_created(item: InventoryItem) -> None:
    now = dates.utcnow()
    item.created_at = now
    item.updated_at = now


def stamp_updated(db: Session, item: InventoryItem) -> None:
    # History holds no old value once the instance is expired, e.g. after a rollback.
    if inspect(item).attrs.created_at.history.has_changes():
        with db.no_autoflush:
            stored = db.scalar(
                select(InventoryItem.created_at).where(InventoryItem.item_id == item.item_id)
            )
        item.created_at = dates.normalize_datetime(stored)
    item.updated_at = dates.utcnow()


def create_item(db: Session, item: InventoryItem) -> InventoryItem:
    if inspect(item).has_identity:
        raise ValueError("Item {} is already persisted; use update_item.".format(item.item_id))
    stamp_created(item)
    db.add(item)
    commit_or_raise(db, "inventory item")
    logger.debug("Created inventory item %s", item.item_id)
    return item


def update_item(db: Session, item: InventoryItem) -> InventoryItem:
    if not inspect(item).has_identity:
        raise ValueError("Item is not persisted yet; use create_item.")
    stamp_updated(db, item)
    db.add(item)
    commit_or_raise(db, "inventory item")
    return item


def save_item(db: Session, item: InventoryItem) -> InventoryItem:
    if inspect(item).has_identity:
        return update_item(db, item)
    return create_item(db, item)


def get_item(db: Session, item_id: int) -> Optional[InventoryItem]:
    return db.get(InventoryItem, item_id)


def delete_item(db: Session, item_id: int) -> bool:
    item = db.get(InventoryItem, item_id)
    if item is None:
        return False
    db.delete(item)
    commit_or_raise(db, "inventory item")
    return True


def find_page_by_category(db: Session, category_id: int, page_request: PageRequest) -> Page:
    stmt = select(InventoryItem).where(InventoryItem.category_id == category_id)
    return paginate(
        db,
        stmt,
        page_request,
        sortable=SORTABLE_COLUMNS,
        default_order=[InventoryItem.item_id.asc()],
    )


def search_by_name(db: Session, text: Optional[str], page_request: PageRequest) -> Page:
    pattern = "%{}%".format(escape_like(text or ""))
    stmt = select(InventoryItem).where(InventoryItem.item_name.ilike(pattern, escape="\\"))
    return paginate(
        db,
        stmt,
        page_request,
        sortable=SORTABLE_COLUMNS,
        default_order=[InventoryItem.item_id.asc()],
    )


def find_low_stock(db: Session) -> list[InventoryItem]:
    stmt = (
        select(InventoryItem)
        .where(InventoryItem.quantity <= InventoryItem.reorder_level)
        .order_by(InventoryItem.quantity.asc(), InventoryItem.item_id.asc())
    )
    return list(db.execute(stmt).scalars().all())


__all__ = [
    "create_item",
    "delete_item",
    "find_low_stock",
    "find_page_by_category",
    "get_item",
    "save_item",
    "search_by_name",
    "stamp_created",
    "stamp_updated",
    "update_item",
]
