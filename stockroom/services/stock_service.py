"""Inventory writes that touch more than one table.

Every function here is a single transaction: the item row, its stock
transaction and the activity log entry are committed together or not at all.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from stockroom.core.constants import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_UPDATE,
    INITIAL_STOCK_REASON,
    STOCK_ADJUSTMENT_REASON,
    TRANSACTION_ADD,
    TRANSACTION_ADJUST,
    TRANSACTION_REMOVE,
)
from stockroom.core.exceptions import NotFoundError
from stockroom.models.inventory_item import InventoryItem
from stockroom.models.stock_transaction import StockTransaction
from stockroom.repositories.activity_logs import add_log
from stockroom.repositories.common import unit_of_work
from stockroom.repositories.inventory_items import stamp_created, stamp_updated
from stockroom.repositories.stock_transactions import add_transaction
from stockroom.schemas.item import InventoryItemCreate, InventoryItemUpdate

logger = logging.getLogger(__name__)

_ENTITY = "InventoryItem"


def _load_for_update(db: Session, item_id: int) -> InventoryItem:
    item = db.get(InventoryItem, item_id, with_for_update=True)
    if item is None:
        raise NotFoundError(_ENTITY, item_id)
    return item


def create_item_with_stock(
    db: Session,
    payload: InventoryItemCreate,
    *,
    user_id: Optional[int] = None,
) -> InventoryItem:
    with unit_of_work(db, "inventory item"):
        item = InventoryItem(**payload.model_dump())
        stamp_created(item)
        db.add(item)
        db.flush()

        if item.quantity:
            add_transaction(
                db,
                item.item_id,
                TRANSACTION_ADD if item.quantity > 0 else TRANSACTION_REMOVE,
                item.quantity,
                reason=INITIAL_STOCK_REASON,
                performed_by=user_id,
            )
        add_log(
            db,
            ACTION_CREATE,
            user_id=user_id,
            entity_type=_ENTITY,
            entity_id=item.item_id,
            details={
                "item_name": item.item_name,
                "quantity": item.quantity,
                "price": item.price,
            },
        )

    logger.info("Created item %s (%s) with quantity %s", item.item_id, item.item_name, item.quantity)
    return item


def adjust_stock(
    db: Session,
    item_id: int,
    delta: int,
    *,
    reason: Optional[str] = None,
    user_id: Optional[int] = None,
) -> StockTransaction:
    """Apply a signed quantity change and record it.

    No lower bound is enforced; quantities may go negative.
    """
    if not delta:
        raise ValueError("delta must be a non-zero integer")

    with unit_of_work(db, "stock adjustment"):
        item = _load_for_update(db, item_id)
        previous_quantity = item.quantity
        item.quantity = previous_quantity + delta
        stamp_updated(db, item)

        transaction = add_transaction(
            db,
            item.item_id,
            TRANSACTION_ADD if delta > 0 else TRANSACTION_REMOVE,
            delta,
            reason=reason,
            performed_by=user_id,
        )
        add_log(
            db,
            ACTION_UPDATE,
            user_id=user_id,
            entity_type=_ENTITY,
            entity_id=item.item_id,
            details={
                "previous_quantity": previous_quantity,
                "quantity": item.quantity,
                "change": delta,
                "reason": reason,
            },
        )

    logger.info(
        "Adjusted stock for item %s: %s -> %s (%+d)",
        item_id,
        previous_quantity,
        item.quantity,
        delta,
    )
    return transaction


def update_item_fields(
    db: Session,
    item_id: int,
    payload: InventoryItemUpdate,
    *,
    user_id: Optional[int] = None,
) -> InventoryItem:
    changes = payload.model_dump(exclude_unset=True)

    with unit_of_work(db, "inventory item"):
        item = _load_for_update(db, item_id)
        previous_quantity = item.quantity
        for field_name, value in changes.items():
            setattr(item, field_name, value)
        stamp_updated(db, item)

        new_quantity = changes.get("quantity")
        if new_quantity is not None and new_quantity != previous_quantity:
            add_transaction(
                db,
                item.item_id,
                TRANSACTION_ADJUST,
                new_quantity - previous_quantity,
                reason=STOCK_ADJUSTMENT_REASON,
                performed_by=user_id,
            )
        add_log(
            db,
            ACTION_UPDATE,
            user_id=user_id,
            entity_type=_ENTITY,
            entity_id=item.item_id,
            details=changes,
        )
    return item


def remove_item(db: Session, item_id: int, *, user_id: Optional[int] = None) -> None:
    with unit_of_work(db, "inventory item"):
        item = _load_for_update(db, item_id)
        item_name = item.item_name
        db.delete(item)
        add_log(
            db,
            ACTION_DELETE,
            user_id=user_id,
            entity_type=_ENTITY,
            entity_id=item_id,
            details={"item_name": item_name},
        )
    logger.info("Removed item %s (%s)", item_id, item_name)


__all__ = [
    "adjust_stock",
    "create_item_with_stock",
    "remove_item",
    "update_item_fields",
]
