"""Sinding Booking protocols."""

from sindingbooking.protocols.booking import (
    BookingRequest,
    Field,
    FieldError,
    ValidatedFields,
    ValidationResult,
)
from sindingbooking.protocols.catalogue import CatalogueItem, ItemType, LineItem, Quote
from sindingbooking.protocols.notify import Notifier

__all__ = [
    "BookingRequest",
    "CatalogueItem",
    "Field",
    "FieldError",
    "ItemType",
    "LineItem",
    "Notifier",
    "Quote",
    "ValidatedFields",
    "ValidationResult",
]
