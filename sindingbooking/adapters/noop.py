"""
Noop Notifier -- for projects that don't send booking e-mails.

Usage in settings.py:
    SINDING_BOOKING = {
        "NOTIFIER": "sindingbooking.adapters.noop.NoopNotifier",
    }

Bookings are still stored and listed; nothing is delivered.
"""

from __future__ import annotations

import logging

from sindingbooking.protocols.notify import Notifier

logger = logging.getLogger(__name__)


class NoopNotifier:
    """Notifier that discards every message."""

    def send(self, recipient: str, subject: str, body: str) -> None:
        """Log and drop the message."""
        logger.debug("Notification to %s dropped: %s", recipient, subject)


# Verify protocol compliance at import time.
if not isinstance(NoopNotifier(), Notifier):
    raise TypeError("NoopNotifier does not implement Notifier protocol")
