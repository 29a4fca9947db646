"""Sinding Booking models."""

from sindingbooking.models.booking import Booking, BookingQuerySet, BookingStatus

__all__ = [
    "Booking",
    "BookingQuerySet",
    "BookingStatus",
]
