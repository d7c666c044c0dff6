from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from stockroom.models.stock_transaction import StockTransaction
from stockroom.repositories.common import paginate
from stockroom.schemas.paging import Page, PageRequest

SORTABLE_COLUMNS = {
    "transaction_id": StockTransaction.transaction_id,
    "created_at": StockTransaction.created_at,
    "quantity_change": StockTransaction.quantity_change,
    "transaction_type": StockTransaction.transaction_type,
}


def add_transaction(
    db: Session,
    item_id: int,
    transaction_type: str,
    quantity_change: int,
    *,
    reason: Optional[str] = None,
    performed_by: Optional[int] = None,
) -> StockTransaction:
    """Stage a transaction row; the caller commits."""
    transaction = StockTransaction(
        item_id=item_id,
        transaction_type=transaction_type,
        quantity_change=quantity_change,
        reason=reason,
        performed_by=performed_by,
    )
    db.add(transaction)
    return transaction


def find_page_by_item(db: Session, item_id: int, page_request: PageRequest) -> Page:
    stmt = select(StockTransaction).where(StockTransaction.item_id == item_id)
    return paginate(
        db,
        stmt,
        page_request,
        sortable=SORTABLE_COLUMNS,
        default_order=[StockTransaction.transaction_id.asc()],
    )


def find_all_by_item_newest_first(db: Session, item_id: int) -> list[StockTransaction]:
    # transaction_id breaks created_at ties so the order is total.
    stmt = (
        select(StockTransaction)
        .where(StockTransaction.item_id == item_id)
        .order_by(StockTransaction.created_at.desc(), StockTransaction.transaction_id.desc())
    )
    return list(db.execute(stmt).scalars().all())

