"""
Booking form validation.

All rules run on every call and every violation is collected, so the form
can flag each bad field at once. ``validate`` is pure: ``today`` is passed
in by the caller.
"""

from datetime import date, datetime

from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, RegexValidator
from django.utils.translation import gettext as _

from sindingbooking.protocols.booking import (
    BookingRequest,
    Field,
    FieldError,
    ValidatedFields,
    ValidationResult,
)


MESSAGES = {
    Field.NAME: "Please fill in all required fields.",
    Field.EMAIL: "Please enter a valid email address.",
    Field.PHONE: "Please enter a valid phone number.",
    Field.DATE: "Please select a future date.",
}

TOO_LONG_MESSAGE = "Please use at most %(limit)d characters."

DATE_FORMAT = "%Y-%m-%d"

# Column widths of the booking table
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100

email_validator = RegexValidator(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
phone_validator = RegexValidator(r"^[0-9\s+\-()]{6,20}$")
name_length_validator = MaxLengthValidator(NAME_MAX_LENGTH)
email_length_validator = MaxLengthValidator(EMAIL_MAX_LENGTH)


def _passes(validator, value: str) -> bool:
    try:
        validator(value)
    except ValidationError:
        return False
    return True


def parse_booking_date(value: str) -> date | None:
    """Parse YYYY-MM-DD, returning None when malformed."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        return None


def validate(request: BookingRequest, today: date) -> ValidationResult:
    """
    Validate contact fields and the booking date.

    Args:
        request: Raw submission
        today: Current local date; the booking date must be strictly later

    Returns:
        ValidationResult with trimmed fields, or every FieldError found
        (ordered name, email, phone, date)
    """
    name = (request.name or "").strip()
    email = (request.email or "").strip()
    phone = (request.phone or "").strip()
    booking_date = parse_booking_date(request.booking_date or "")

    errors = []
    if not name:
        errors.append(FieldError(Field.NAME, _(MESSAGES[Field.NAME])))
    elif not _passes(name_length_validator, name):
        errors.append(FieldError(Field.NAME, _(TOO_LONG_MESSAGE) % {"limit": NAME_MAX_LENGTH}))
    if not (
        email
        and _passes(email_length_validator, email)
        and _passes(email_validator, email)
    ):
        errors.append(FieldError(Field.EMAIL, _(MESSAGES[Field.EMAIL])))
    if not phone or not _passes(phone_validator, phone):
        errors.append(FieldError(Field.PHONE, _(MESSAGES[Field.PHONE])))
    if booking_date is None or booking_date <= today:
        errors.append(FieldError(Field.DATE, _(MESSAGES[Field.DATE])))

    if errors:
        return ValidationResult(errors=tuple(errors))

    return ValidationResult(
        fields=ValidatedFields(
            name=name,
            email=email,
            phone=phone,
            booking_date=booking_date,
        )
    )
