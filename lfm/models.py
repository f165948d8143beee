"""Domain model types for lost and found reports.

These dataclasses are read-only views of records owned by the external item
store. The matching engine borrows them for one scoring pass and never mutates
them. ``kind`` is an explicit discriminator so callers can tell the two record
shapes apart without probing for fields.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Dict, Any, Union


class ItemKind(str, Enum):
    LOST = "lost"
    FOUND = "found"


class ItemCategory(str, Enum):
    WALLET = "wallet"
    PHONE = "phone"
    KEYS = "keys"
    BAG = "bag"
    ELECTRONICS = "electronics"
    DOCUMENTS = "documents"
    CLOTHING = "clothing"
    ACCESSORIES = "accessories"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> Optional[ItemCategory]:
        """Parse a category value, returning None for missing or unknown values."""
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class ItemStatus(str, Enum):
    SEARCHING = "searching"
    FOUND = "found"
    CLAIMED = "claimed"
    EXPIRED = "expired"

    @classmethod
    def parse(cls, value: Any) -> ItemStatus:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown item status: {value!r}") from None


SECONDS_PER_DAY = 86400.0

# Found reports are offered to owners while still held or already handed over
FOUND_ELIGIBLE_STATUSES = frozenset({ItemStatus.FOUND, ItemStatus.CLAIMED})


def parse_datetime(value: Any) -> datetime:
    """Parse ISO-8601 strings, dates and datetimes into a datetime.

    Raises:
        ValueError: If the value is missing or cannot be parsed
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value:
        raise ValueError("Missing date value")
    txt = str(value).strip()
    if txt.endswith("Z"):
        txt = txt[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(txt)
    except ValueError:
        raise ValueError(f"Unparseable date: {value!r}") from None


def days_between(a: datetime, b: datetime) -> float:
    """Absolute distance in (fractional) days.

    Mixed naive/aware pairs are compared on their wall-clock values.
    """
    if (a.tzinfo is None) != (b.tzinfo is None):
        a = a.replace(tzinfo=None)
        b = b.replace(tzinfo=None)
    return abs((a - b).total_seconds()) / SECONDS_PER_DAY


def _pick(data: Dict[str, Any], *keys: str, required: bool = False) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    if required:
        raise ValueError(f"Missing required field '{keys[0]}'")
    return None


def _text(value: Any) -> Optional[str]:
    # Numeric values in text fields (e.g. a room number) are kept as text
    return None if value is None else str(value)


def _iso(value: datetime) -> str:
    return value.isoformat()


@dataclass(frozen=True)
class LostItem:
    """A report of an item somebody lost."""
    id: str
    item_name: str
    location_lost: str
    date_lost: datetime
    status: ItemStatus = ItemStatus.SEARCHING
    category: Optional[ItemCategory] = None
    description: Optional[str] = None
    matched_found_id: Optional[str] = None
    kind: ItemKind = field(default=ItemKind.LOST, init=False)

    @property
    def is_eligible(self) -> bool:
        """True while the owner is still searching and nothing is matched yet."""
        return self.status == ItemStatus.SEARCHING and not self.matched_found_id

    @property
    def event_date(self) -> datetime:
        return self.date_lost

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "itemName": self.item_name,
            "category": self.category.value if self.category else None,
            "description": self.description,
            "locationLost": self.location_lost,
            "dateLost": _iso(self.date_lost),
            "status": self.status.value,
            "matchedFoundId": self.matched_found_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LostItem:
        """Build a LostItem from an item-store record (camelCase or snake_case keys).

        Raises:
            ValueError: On missing required fields, bad dates or unknown status
        """
        return cls(
            id=str(_pick(data, "id", required=True)),
            item_name=_text(_pick(data, "itemName", "item_name", required=True)),
            location_lost=_text(_pick(data, "locationLost", "location_lost")) or "",
            date_lost=parse_datetime(_pick(data, "dateLost", "date_lost", required=True)),
            status=ItemStatus.parse(_pick(data, "status") or ItemStatus.SEARCHING),
            category=ItemCategory.parse(_pick(data, "category")),
            description=_text(_pick(data, "description")),
            matched_found_id=_text(_pick(data, "matchedFoundId", "matched_found_id")),
        )


@dataclass(frozen=True)
class FoundItem:
    """A report of an item somebody found and handed in."""
    id: str
    description: str
    location_found: str
    date_found: datetime
    status: ItemStatus = ItemStatus.FOUND
    matched_lost_id: Optional[str] = None
    kind: ItemKind = field(default=ItemKind.FOUND, init=False)

    @property
    def is_eligible(self) -> bool:
        return self.status in FOUND_ELIGIBLE_STATUSES and not self.matched_lost_id

    @property
    def event_date(self) -> datetime:
        return self.date_found

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "description": self.description,
            "locationFound": self.location_found,
            "dateFound": _iso(self.date_found),
            "status": self.status.value,
            "matchedLostId": self.matched_lost_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FoundItem:
        """Build a FoundItem from an item-store record (camelCase or snake_case keys).

        Raises:
            ValueError: On missing required fields, bad dates or unknown status
        """
        return cls(
            id=str(_pick(data, "id", required=True)),
            description=_text(_pick(data, "description")) or "",
            location_found=_text(_pick(data, "locationFound", "location_found")) or "",
            date_found=parse_datetime(_pick(data, "dateFound", "date_found", required=True)),
            status=ItemStatus.parse(_pick(data, "status") or ItemStatus.FOUND),
            matched_lost_id=_text(_pick(data, "matchedLostId", "matched_lost_id")),
        )


Item = Union[LostItem, FoundItem]


__all__ = [
    "ItemKind",
    "ItemCategory",
    "ItemStatus",
    "FOUND_ELIGIBLE_STATUSES",
    "LostItem",
    "FoundItem",
    "Item",
    "parse_datetime",
    "days_between",
]
