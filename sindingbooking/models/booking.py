"""Booking model."""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


class BookingStatus(models.TextChoices):
    """Operator-managed booking status."""

    PENDING = "pending", _("Pending")
    CONFIRMED = "confirmed", _("Confirmed")
    CANCELLED = "cancelled", _("Cancelled")


class BookingQuerySet(models.QuerySet):
    """Custom QuerySet for Booking."""

    def newest_first(self):
        """Most recently submitted first; id breaks ties within a timestamp."""
        return self.order_by("-created_at", "-id")

    def pending(self):
        return self.filter(status=BookingStatus.PENDING)


class Booking(models.Model):
    """Submitted booking request."""

    # Contact
    name = models.CharField(_("name"), max_length=100)
    email = models.CharField(_("email"), max_length=100)
    phone = models.CharField(_("phone"), max_length=30)

    booking_date = models.DateField(_("booking date"))

    # Catalogue labels as they were at submission time
    session_labels = models.JSONField(_("sessions"), default=list, blank=True)
    addon_labels = models.JSONField(_("add-ons"), default=list, blank=True)

    total_price = models.DecimalField(
        _("total (NOK)"),
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0"))],
    )

    status = models.CharField(
        _("status"),
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING,
        db_index=True,
    )

    created_at = models.DateTimeField(_("submitted"), auto_now_add=True)

    # Audit of operator status changes
    history = HistoricalRecords()

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("booking")
        verbose_name_plural = _("bookings")
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"#{self.pk} {self.name} ({self.booking_date})"

    @property
    def sessions_display(self) -> str:
        return ", ".join(self.session_labels or [])

    @property
    def addons_display(self) -> str:
        return ", ".join(self.addon_labels or [])
