"""Sinding Booking adapters."""

from sindingbooking.adapters.mail import DjangoMailNotifier
from sindingbooking.adapters.noop import NoopNotifier

__all__ = [
    "DjangoMailNotifier",
    "NoopNotifier",
]
