"""Booking request and validation result types."""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum


_SLUG_STRIP = re.compile(r"[^a-z0-9_\-]")


def _sanitize_key(value: str) -> str:
    """Lowercase slug of [a-z0-9_-]; anything else is removed."""
    return _SLUG_STRIP.sub("", str(value).lower())


def _sanitize_keys(values) -> tuple[str, ...]:
    return tuple(key for key in (_sanitize_key(v) for v in values) if key)


@dataclass(frozen=True)
class BookingRequest:
    """Raw, untrusted booking submission."""

    name: str = ""
    email: str = ""
    phone: str = ""
    booking_date: str = ""
    session_ids: tuple[str, ...] = ()
    addon_ids: tuple[str, ...] = ()

    @classmethod
    def from_post(cls, data) -> "BookingRequest":
        """
        Build a request from POST data (QueryDict).

        Accepts the form's ``session_items[]`` / ``addon_items[]`` lists
        and the ``session_ids[]`` / ``addon_ids[]`` aliases.
        """
        session_ids = data.getlist("session_items[]") or data.getlist("session_ids[]")
        addon_ids = data.getlist("addon_items[]") or data.getlist("addon_ids[]")
        return cls(
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            booking_date=data.get("booking_date", ""),
            session_ids=_sanitize_keys(session_ids),
            addon_ids=_sanitize_keys(addon_ids),
        )


class Field(str, Enum):
    """Validated contact field."""

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "booking_date"


@dataclass(frozen=True)
class FieldError:
    field: Field
    message: str


@dataclass(frozen=True)
class ValidatedFields:
    """Trimmed contact fields and the parsed booking date."""

    name: str
    email: str
    phone: str
    booking_date: date


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a BookingRequest.

    ``fields`` is set only when ``errors`` is empty.
    """

    fields: ValidatedFields | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    def errors_by_field(self) -> dict[str, str]:
        return {error.field.value: error.message for error in self.errors}
