"""
Bookable catalogue.

The catalogue is an immutable value built once per process from
SINDING_BOOKING["CATALOGUE"] and handed explicitly to the pricing engine.
"""

import threading
from collections.abc import Iterable, Iterator

from django.core.exceptions import ImproperlyConfigured

from sindingbooking.protocols.catalogue import CatalogueItem, ItemType


class Catalogue:
    """Ordered, read-only collection of CatalogueItem keyed by id."""

    __slots__ = ("_items", "_by_id")

    def __init__(self, items: Iterable[CatalogueItem]):
        items = tuple(items)
        by_id: dict[str, CatalogueItem] = {}
        for item in items:
            if item.id in by_id:
                raise ImproperlyConfigured(f"Duplicate catalogue item id {item.id!r}")
            if isinstance(item.price, bool) or not isinstance(item.price, int) or item.price < 0:
                raise ImproperlyConfigured(
                    f"Catalogue item {item.id!r} must have a non-negative integer price"
                )
            by_id[item.id] = item
        self._items = items
        self._by_id = by_id

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "Catalogue":
        items = []
        for row in rows:
            try:
                item_type = ItemType(row["type"])
                items.append(
                    CatalogueItem(
                        id=row["id"],
                        label=row["label"],
                        price=row["price"],
                        type=item_type,
                        description=row.get("description", ""),
                    )
                )
            except (KeyError, ValueError) as e:
                raise ImproperlyConfigured(f"Invalid catalogue entry {row!r}: {e}") from e
        return cls(items)

    def __iter__(self) -> Iterator[CatalogueItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id) -> bool:
        return item_id in self._by_id

    def get(self, item_id: str) -> CatalogueItem | None:
        return self._by_id.get(item_id)

    def sessions(self) -> list[CatalogueItem]:
        return [i for i in self._items if i.type is ItemType.SESSION]

    def addons(self) -> list[CatalogueItem]:
        return [i for i in self._items if i.type is ItemType.ADDON]

    def as_dicts(self) -> list[dict]:
        """Plain representation for the client-side price preview."""
        return [i.as_dict() for i in self._items]


_catalogue_lock = threading.Lock()
_catalogue_instance: Catalogue | None = None


def get_catalogue() -> Catalogue:
    """Return the process-wide catalogue, building it on first use."""
    global _catalogue_instance
    if _catalogue_instance is not None:
        return _catalogue_instance
    from sindingbooking.conf import booking_settings

    with _catalogue_lock:
        if _catalogue_instance is None:
            _catalogue_instance = Catalogue.from_dicts(booking_settings.CATALOGUE)
    return _catalogue_instance


def reset_catalogue():
    """Reset catalogue cache (for tests)."""
    global _catalogue_instance
    _catalogue_instance = None
