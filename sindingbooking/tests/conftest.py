"""Pytest fixtures for Sinding Booking tests."""

from datetime import date, timedelta

import pytest

from sindingbooking import conf
from sindingbooking.catalogue import get_catalogue, reset_catalogue
from sindingbooking.conf import local_today
from sindingbooking.protocols import BookingRequest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Catalogue and notifier are process-wide; rebuild them per test."""
    reset_catalogue()
    conf.reset_notifier()
    yield
    reset_catalogue()
    conf.reset_notifier()


@pytest.fixture
def catalogue():
    """The default studio catalogue."""
    return get_catalogue()


@pytest.fixture
def today():
    return date(2025, 6, 1)


@pytest.fixture
def make_request():
    """Factory for a valid BookingRequest with overrides."""

    def _make(**overrides):
        data = {
            "name": "Kari Nordmann",
            "email": "kari@example.no",
            "phone": "+47 123 45 678",
            "booking_date": (local_today() + timedelta(days=14)).isoformat(),
            "session_ids": ("family",),
            "addon_ids": ("extra_hour", "digital_package"),
        }
        data.update(overrides)
        return BookingRequest(**data)

    return _make


class RecordingNotifier:
    """Notifier that keeps every message in memory."""

    def __init__(self, fail_for=()):
        self.sent = []
        self.fail_for = set(fail_for)

    def send(self, recipient, subject, body):
        if recipient in self.fail_for:
            raise ConnectionError(f"SMTP refused {recipient}")
        self.sent.append((recipient, subject, body))


@pytest.fixture
def notifier():
    """Install a RecordingNotifier as the configured notifier."""
    recording = RecordingNotifier()
    conf._notifier_instance = recording
    return recording
