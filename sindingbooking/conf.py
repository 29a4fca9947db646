"""
Sinding Booking configuration.

Usage in settings.py:
    SINDING_BOOKING = {
        "SITE_NAME": "Sinding Photography",
        "OPERATOR_EMAIL": "studio@example.com",
        "NOTIFIER": "sindingbooking.adapters.mail.DjangoMailNotifier",
        "NOTIFY_ASYNC": True,
        "CATALOGUE": [...],  # defaults to DEFAULT_CATALOGUE
    }
"""

import importlib
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from django.conf import settings
from django.utils import timezone


DEFAULT_CATALOGUE = [
    {
        "id": "portrait",
        "label": "Portrait Session",
        "price": 1500,
        "type": "session",
        "description": "A personalised 1-hour studio or outdoor portrait session.",
    },
    {
        "id": "family",
        "label": "Family Session",
        "price": 2000,
        "type": "session",
        "description": "Capture precious family memories in a relaxed 1.5-hour session.",
    },
    {
        "id": "couples",
        "label": "Couples Session",
        "price": 1750,
        "type": "session",
        "description": "A romantic 1-hour session for couples – indoors or outdoors.",
    },
    {
        "id": "wedding",
        "label": "Wedding Coverage",
        "price": 8000,
        "type": "session",
        "description": "Full-day wedding coverage from preparations to first dance.",
    },
    {
        "id": "event",
        "label": "Event / Occasion",
        "price": 3000,
        "type": "session",
        "description": "Corporate events, birthdays, graduations, and more.",
    },
    {
        "id": "extra_hour",
        "label": "Extra Hour",
        "price": 1000,
        "type": "addon",
        "description": "Add an extra hour to your session.",
    },
    {
        "id": "digital_package",
        "label": "Full Digital Package",
        "price": 1500,
        "type": "addon",
        "description": "Receive all edited photos as high-resolution digital files.",
    },
    {
        "id": "photo_album",
        "label": "Luxury Photo Album",
        "price": 2000,
        "type": "addon",
        "description": "A premium 30-page printed photo album.",
    },
    {
        "id": "canvas_print",
        "label": "Canvas Print (50×70 cm)",
        "price": 1200,
        "type": "addon",
        "description": "Your favourite image professionally printed on canvas.",
    },
    {
        "id": "rush_editing",
        "label": "Rush Editing (48 hrs)",
        "price": 750,
        "type": "addon",
        "description": "Receive your edited photos within 48 hours.",
    },
]


@dataclass
class BookingSettings:
    """Sinding Booking configuration settings."""

    CATALOGUE: list[dict[str, Any]] = field(default_factory=lambda: list(DEFAULT_CATALOGUE))
    SITE_NAME: str = "Sinding Photography"
    OPERATOR_EMAIL: str | None = None
    NOTIFIER: str = "sindingbooking.adapters.mail.DjangoMailNotifier"
    NOTIFY_ASYNC: bool = True


def get_booking_settings() -> BookingSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "SINDING_BOOKING", {})
    return BookingSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_booking_settings(), name)


booking_settings = _LazySettings()


# Notifier singleton
_notifier_lock = threading.Lock()
_notifier_instance = None


def get_notifier():
    """
    Return the configured Notifier instance.

    Loads from SINDING_BOOKING["NOTIFIER"] setting (dotted path).
    If _notifier_instance was set directly (e.g. in tests), returns it as-is.
    """
    global _notifier_instance
    if _notifier_instance is not None:
        return _notifier_instance
    with _notifier_lock:
        if _notifier_instance is None:
            module_path, cls_name = booking_settings.NOTIFIER.rsplit(".", 1)
            module = importlib.import_module(module_path)
            cls = getattr(module, cls_name)
            _notifier_instance = cls()
    return _notifier_instance


def reset_notifier():
    """Reset Notifier singleton (for tests)."""
    global _notifier_instance
    _notifier_instance = None


def get_operator_email() -> str | None:
    """Operator address: OPERATOR_EMAIL, else the first ADMINS entry."""
    if booking_settings.OPERATOR_EMAIL:
        return booking_settings.OPERATOR_EMAIL
    admins = getattr(settings, "ADMINS", None) or []
    if admins:
        admin = admins[0]
        # Django < 6 uses (name, email) tuples, later versions plain strings.
        return admin[1] if isinstance(admin, (tuple, list)) else admin
    return None


def local_today() -> date:
    """Today's date in the project time zone; naive date when USE_TZ is off."""
    if settings.USE_TZ:
        return timezone.localdate()
    return date.today()
