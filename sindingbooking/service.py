"""
Sinding Booking public API.

CORE (essential):
    BookingService.submit(request)         - Validate, price, store and notify
    BookingService.quote(session, addons)  - Price a selection

CONVENIENCE (helpers):
    BookingService.validate(request)       - Validate contact fields only
    BookingService.list_bookings()         - Every booking, newest first
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from django.db import transaction
from django.utils.translation import gettext as _

from sindingbooking.catalogue import get_catalogue
from sindingbooking.conf import local_today
from sindingbooking.exceptions import ERROR_MESSAGES, BookingError
from sindingbooking.models import Booking
from sindingbooking.pricing import compute_total, price_selection
from sindingbooking.protocols import BookingRequest, FieldError, Quote, ValidationResult
from sindingbooking.store import BookingStore, NewBooking
from sindingbooking.validation import validate

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your booking has been received! Check your email for a confirmation."


class Outcome(str, Enum):
    """Terminal state of one submission."""

    ACCEPTED = "accepted"
    REJECTED_VALIDATION = "rejected_validation"
    REJECTED_NO_SESSION = "rejected_no_session"
    REJECTED_PERSISTENCE = "rejected_persistence"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: Outcome
    message: str
    booking: Booking | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.ACCEPTED

    def as_dict(self) -> dict:
        data = {"success": self.success, "message": self.message}
        if self.errors:
            data["errors"] = {e.field.value: e.message for e in self.errors}
        return data


class BookingService:
    """
    Sinding Booking public API.

    Uses @classmethod for extensibility.

    CORE (essential):
        submit(request) - Authoritative submission
        quote(...)      - Price preview

    CONVENIENCE (helpers):
        validate(request)
        list_bookings()
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def quote(cls, session_id: str | None, addon_ids: Iterable[str] = ()) -> Quote:
        """Price one session plus add-ons against the configured catalogue."""
        return compute_total(session_id, addon_ids, get_catalogue())

    @classmethod
    def submit(cls, request: BookingRequest, today: date | None = None) -> SubmissionResult:
        """
        Handle one booking submission.

        Received -> validated -> priced -> stored -> notified. Every
        rejection is terminal: nothing is priced or stored past it.

        Args:
            request: Raw submission
            today: Local date used for the future-date rule (default: today)

        Returns:
            SubmissionResult; ``booking`` is set only when accepted
        """
        validation = cls.validate(request, today=today)
        if not validation.valid:
            logger.warning(
                "Booking rejected: invalid %s",
                ", ".join(e.field.value for e in validation.errors),
            )
            return SubmissionResult(
                outcome=Outcome.REJECTED_VALIDATION,
                message=validation.errors[0].message,
                errors=validation.errors,
            )

        # Client-side totals are never trusted; price from the catalogue.
        quote = price_selection(request.session_ids, request.addon_ids, get_catalogue())
        if not quote.has_session:
            logger.warning("Booking rejected: no session in %r", request.session_ids)
            return SubmissionResult(
                outcome=Outcome.REJECTED_NO_SESSION,
                message=_(ERROR_MESSAGES["NO_SESSION"]),
            )

        fields = validation.fields
        try:
            booking = BookingStore.insert(
                NewBooking(
                    name=fields.name,
                    email=fields.email,
                    phone=fields.phone,
                    booking_date=fields.booking_date,
                    session_labels=quote.session_labels,
                    addon_labels=quote.addon_labels,
                    total_price=Decimal(quote.total),
                )
            )
        except BookingError as e:
            return SubmissionResult(outcome=Outcome.REJECTED_PERSISTENCE, message=_(e.message))

        logger.info("Booking #%s stored: %s, NOK %s", booking.pk, booking.booking_date, quote.total)
        cls._on_created(booking)
        return SubmissionResult(outcome=Outcome.ACCEPTED, message=_(SUCCESS_MESSAGE), booking=booking)

    @classmethod
    def _on_created(cls, booking: Booking) -> None:
        """Internal: announce the booking and schedule notifications."""
        from sindingbooking.notifications import dispatch_notifications
        from sindingbooking.signals import booking_created

        responses = booking_created.send_robust(
            sender=Booking, instance=booking, total_price=booking.total_price
        )
        for receiver, response in responses:
            if isinstance(response, Exception):
                logger.error(
                    "booking_created receiver %r failed for booking #%s: %r",
                    receiver,
                    booking.pk,
                    response,
                    exc_info=response,
                )
        transaction.on_commit(lambda: dispatch_notifications(booking))

    # ======================================================================
    # CONVENIENCE API
    # ======================================================================

    @classmethod
    def validate(cls, request: BookingRequest, today: date | None = None) -> ValidationResult:
        """Validate contact fields and date against today's local date."""
        return validate(request, today or local_today())

    @classmethod
    def list_bookings(cls) -> list[Booking]:
        """Every booking, newest first."""
        return BookingStore.list_all()
