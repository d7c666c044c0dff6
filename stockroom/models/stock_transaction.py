from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from stockroom.core import dates
from stockroom.core.constants import TRANSACTION_TYPES
from stockroom.database.base import Base


class StockTransaction(Base):
    __tablename__ = "stock_transactions"

    transaction_id = Column(Integer, primary_key=True)
    item_id = Column(
        Integer,
        ForeignKey("inventory_items.item_id", ondelete="CASCADE"),
        nullable=False,
    )

    transaction_type = Column(String(20), nullable=False)
    # Signed: positive for stock added, negative for stock removed.
    quantity_change = Column(Integer, nullable=False)
    reason = Column(String(255))
    performed_by = Column(Integer, ForeignKey("users.user_id"))

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: dates.utcnow())

    item = relationship("InventoryItem", back_populates="transactions")

    __table_args__ = (
        CheckConstraint(
            "transaction_type IN ({})".format(", ".join("'{}'".format(kind) for kind in TRANSACTION_TYPES)),
            name="ck_stock_transactions_type",
        ),
        Index("idx_stock_transactions_item_created", "item_id", "created_at"),
    )


__all__ = ["StockTransaction"]
