from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stockroom.config import get_settings


class InventoryItemBase(BaseModel):
    item_name: str
    description: Optional[str] = None
    quantity: int
    price: float
    category_id: int
    reorder_level: int = Field(default_factory=lambda: get_settings().DEFAULT_REORDER_LEVEL)
    location: Optional[str] = None


class InventoryItemCreate(InventoryItemBase):
    pass


class InventoryItemUpdate(BaseModel):
    item_name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    category_id: Optional[int] = None
    reorder_level: Optional[int] = None
    location: Optional[str] = None


class InventoryItemRead(InventoryItemBase):
    item_id: int
    total_value: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
