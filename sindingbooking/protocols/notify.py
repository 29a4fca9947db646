"""
Notifier protocol.

Sends the booking confirmation and the operator notification. Delivery is
best-effort: callers log failures and never surface them to the customer.

Usage:
    # In settings.py
    SINDING_BOOKING = {
        "NOTIFIER": "myproject.sms.SmsNotifier",
    }

    class SmsNotifier:
        def send(self, recipient: str, subject: str, body: str) -> None:
            ...
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Interface for delivering a plain-text message to one recipient."""

    def send(self, recipient: str, subject: str, body: str) -> None:
        """
        Deliver a message.

        Args:
            recipient: Address of the recipient
            subject: Subject line
            body: Plain-text body

        Raises:
            Any exception on delivery failure; callers treat it as non-fatal.
        """
        ...
