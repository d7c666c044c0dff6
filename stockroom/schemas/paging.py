import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field, field_validator

from stockroom.config import get_settings

T = TypeVar("T")


def _to_int(value, fallback):
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


class PageRequest(BaseModel):
    """1-based page request.

    Out-of-range values are clamped rather than rejected: ``page`` to at least 1,
    ``size`` to ``[1, MAX_PAGE_SIZE]``. ``sort`` holds column names, a leading
    ``-`` meaning descending; a comma-separated string is also accepted.
    """

    page: int = 1
    size: int = Field(default_factory=lambda: get_settings().DEFAULT_PAGE_SIZE)
    sort: List[str] = Field(default_factory=list)

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value):
        return max(1, _to_int(value, 1))

    @field_validator("size", mode="before")
    @classmethod
    def _clamp_size(cls, value):
        max_size = get_settings().MAX_PAGE_SIZE
        return min(max_size, max(1, _to_int(value, get_settings().DEFAULT_PAGE_SIZE)))

    @field_validator("sort", mode="before")
    @classmethod
    def _split_sort(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [entry.strip() for entry in value if entry and entry.strip()]

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    page: int = 1
    size: int = field(default_factory=lambda: get_settings().DEFAULT_PAGE_SIZE)
    total: int = 0

    @property
    def pages(self) -> int:
        if not self.total:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


__all__ = ["Page", "PageRequest"]
