from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from stockroom.config import get_settings
from stockroom.core.constants import ITEM_NAME_MAX_LENGTH
from stockroom.database.base import Base


class InventoryItem(Base):
    """A stocked product.

    ``created_at`` and ``updated_at`` have no column defaults: they are stamped
    by ``repositories.inventory_items`` when the item is created or updated, so
    rows written any other way are rejected by the NOT NULL constraints.
    """

    __tablename__ = "inventory_items"

    item_id = Column(Integer, primary_key=True)
    item_name = Column(String(ITEM_NAME_MAX_LENGTH), nullable=False)
    description = Column(Text)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2, asdecimal=False), nullable=False)

    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)

    reorder_level = Column(
        Integer, nullable=False, default=lambda: get_settings().DEFAULT_REORDER_LEVEL
    )
    location = Column(String(100))

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    category = relationship("Category", back_populates="items", lazy="select")
    transactions = relationship(
        "StockTransaction",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "length(item_name) <= {}".format(ITEM_NAME_MAX_LENGTH),
            name="ck_inventory_items_name_length",
        ),
        Index("idx_item_name", "item_name"),
        Index("idx_item_category", "category_id"),
    )

    @property
    def total_value(self) -> float:
        return float(self.quantity or 0) * float(self.price or 0)

    def __repr__(self):
        return "<InventoryItem {} {!r} qty={}>".format(self.item_id, self.item_name, self.quantity)


__all__ = ["InventoryItem"]
