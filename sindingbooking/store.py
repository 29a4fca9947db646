"""
Booking store.

Append-only persistence for accepted bookings. Id uniqueness and insert
atomicity are delegated to the database.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db import DatabaseError, transaction

from sindingbooking.exceptions import BookingError
from sindingbooking.models import Booking, BookingStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewBooking:
    """Fields of a booking about to be recorded."""

    name: str
    email: str
    phone: str
    booking_date: date
    session_labels: list[str]
    addon_labels: list[str]
    total_price: Decimal


class BookingStore:
    """
    Booking persistence.

    insert(fields) - record one booking atomically
    list_all()     - every booking, newest first
    """

    @classmethod
    def insert(cls, fields: NewBooking) -> Booking:
        """
        Record a new pending booking.

        Raises:
            BookingError: PERSISTENCE_FAILED if the database rejects the row
        """
        try:
            with transaction.atomic():
                return Booking.objects.create(
                    name=fields.name,
                    email=fields.email,
                    phone=fields.phone,
                    booking_date=fields.booking_date,
                    session_labels=list(fields.session_labels),
                    addon_labels=list(fields.addon_labels),
                    total_price=fields.total_price,
                    status=BookingStatus.PENDING,
                )
        except DatabaseError as e:
            logger.exception("Failed to store booking for %s", fields.email)
            raise BookingError("PERSISTENCE_FAILED") from e

    @classmethod
    def list_all(cls) -> list[Booking]:
        return list(Booking.objects.newest_first())
