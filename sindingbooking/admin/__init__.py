"""Sinding Booking admin."""

from sindingbooking.admin.booking import BookingAdmin

__all__ = [
    "BookingAdmin",
]
