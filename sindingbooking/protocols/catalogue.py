"""Catalogue and pricing value types."""

from dataclasses import dataclass
from enum import Enum


class ItemType(str, Enum):
    """Kind of bookable item."""

    SESSION = "session"
    ADDON = "addon"


@dataclass(frozen=True)
class CatalogueItem:
    """Bookable item.

    Exactly one SESSION is chosen per booking (radio), any number of
    ADDON items may be added on top (checkbox).
    """

    id: str
    label: str
    price: int
    type: ItemType
    description: str = ""

    @property
    def is_addon(self) -> bool:
        return self.type is ItemType.ADDON

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "price": self.price,
            "type": self.type.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class LineItem:
    """One priced entry of a quote."""

    item_id: str
    label: str
    price: int
    is_addon: bool


@dataclass(frozen=True)
class Quote:
    """Price of a selection in whole NOK."""

    total: int
    line_items: tuple[LineItem, ...] = ()

    @property
    def session_labels(self) -> list[str]:
        return [li.label for li in self.line_items if not li.is_addon]

    @property
    def addon_labels(self) -> list[str]:
        return [li.label for li in self.line_items if li.is_addon]

    @property
    def has_session(self) -> bool:
        return any(not li.is_addon for li in self.line_items)

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "line_items": [
                {
                    "id": li.item_id,
                    "label": li.label,
                    "price": li.price,
                    "is_addon": li.is_addon,
                }
                for li in self.line_items
            ],
        }
