from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class CategoryShare(BaseModel):
    category_name: str
    count: int
    value: float


class RecentTransaction(BaseModel):
    item_name: str
    transaction_type: str
    quantity_change: int
    created_at: datetime


class DashboardSummary(BaseModel):
    total_value: float = 0.0
    total_items: int = 0
    low_stock_items: int = 0
    category_distribution: List[CategoryShare] = Field(default_factory=list)
    recent_transactions: List[RecentTransaction] = Field(default_factory=list)
