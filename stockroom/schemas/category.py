from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CategoryCreate(BaseModel):
    category_name: str
    description: Optional[str] = None


class CategoryRead(CategoryCreate):
    category_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
