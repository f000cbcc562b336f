"""Data models for receipt parsing."""

import re
from dataclasses import dataclass
from datetime import datetime

# Trailing price token on an item line, e.g. " 498", " 498円", " 498￥".
_TRAILING_PRICE = re.compile(r"\s+\d+(?:円|¥|￥)?$")


@dataclass(frozen=True)
class DateMatch:
    """A timestamp found in receipt text, before calendar validation."""

    year: int
    month: int
    day: int
    hour: int = 12
    minute: int = 0

    def to_datetime(self) -> datetime:
        """Return a naive local datetime; raises ValueError for impossible dates."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute)


@dataclass(frozen=True)
class CategoryMatch:
    """Category and shelf life assigned to one item line."""

    category: str
    days: int


@dataclass(frozen=True)
class CategorizedItem:
    """A single purchased item with its estimated expiry."""

    name: str
    category: str
    shelf_life_days: int
    expiry_date: datetime | None = None

    @property
    def display_name(self) -> str:
        # Price is kept in `name`; strip it for display only.
        return _TRAILING_PRICE.sub("", self.name).strip()


@dataclass(frozen=True)
class ParsedReceipt:
    """Parsed receipt data."""

    purchase_date: datetime
    date_is_placeholder: bool = False
    items: tuple[CategorizedItem, ...] = ()
    raw_text: str = ""  # Original OCR text for reference

    @property
    def has_items(self) -> bool:
        return bool(self.items)
