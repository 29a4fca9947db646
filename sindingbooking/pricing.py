"""
Pricing engine.

Pure functions over a Catalogue. The same rules run for the live preview
and for the authoritative price stored on a Booking; unknown ids and ids
of the wrong item type are skipped without error.
"""

from collections.abc import Iterable

from sindingbooking.catalogue import Catalogue
from sindingbooking.protocols.catalogue import ItemType, LineItem, Quote


def _line_items(ids: Iterable[str], item_type: ItemType, catalogue: Catalogue) -> list[LineItem]:
    lines = []
    for item_id in ids:
        item = catalogue.get(item_id)
        if item is None or item.type is not item_type:
            continue
        lines.append(LineItem(item.id, item.label, item.price, item.is_addon))
    return lines


def price_selection(
    session_ids: Iterable[str],
    addon_ids: Iterable[str],
    catalogue: Catalogue,
) -> Quote:
    """
    Price any number of sessions plus add-ons.

    Returns:
        Quote with sessions first, then add-ons, each in the order supplied.
    """
    lines = _line_items(session_ids, ItemType.SESSION, catalogue)
    lines += _line_items(addon_ids, ItemType.ADDON, catalogue)
    return Quote(total=sum(li.price for li in lines), line_items=tuple(lines))


def compute_total(
    session_id: str | None,
    addon_ids: Iterable[str],
    catalogue: Catalogue,
) -> Quote:
    """
    Price one (optional) session plus add-ons.

    An absent or unknown session contributes 0 and no line item.

    Example:
        >>> compute_total("family", ["extra_hour", "digital_package"], catalogue).total
        4500
    """
    return price_selection([session_id] if session_id else [], addon_ids, catalogue)


def format_price(amount) -> str:
    """Whole NOK with spaces as thousands separator: 12500 -> '12 500'."""
    return f"{int(amount):,}".replace(",", " ")
