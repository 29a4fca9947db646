"""Notifier backed by Django's e-mail framework."""

from django.conf import settings
from django.core.mail import send_mail

from sindingbooking.protocols.notify import Notifier


class DjangoMailNotifier:
    """
    Notifier that sends plain-text e-mail with ``send_mail``.

    Uses DEFAULT_FROM_EMAIL and whatever EMAIL_BACKEND the project has
    configured. Errors from the backend propagate to the caller.
    """

    def send(self, recipient: str, subject: str, body: str) -> None:
        send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [recipient],
            fail_silently=False,
        )


# Verify protocol compliance at import time.
if not isinstance(DjangoMailNotifier(), Notifier):
    raise TypeError("DjangoMailNotifier does not implement Notifier protocol")
