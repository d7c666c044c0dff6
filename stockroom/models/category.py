from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from stockroom.core import dates
from stockroom.database.base import Base


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True)
    category_name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: dates.utcnow())

    # Deletes are left to the foreign key, which rejects them while items remain.
    items = relationship("InventoryItem", back_populates="category", passive_deletes="all")

    def __repr__(self):
        return "<Category {} {!r}>".format(self.category_id, self.category_name)


__all__ = ["Category"]
