"""
Booking notifications.

Two messages go out for every accepted booking: a confirmation to the
customer and a notice to the studio operator. Delivery is best-effort;
a failure is logged and never reaches the customer.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from django.utils.translation import gettext as _

from sindingbooking.conf import booking_settings, get_notifier, get_operator_email
from sindingbooking.models import Booking
from sindingbooking.pricing import format_price

logger = logging.getLogger(__name__)


def _labels(labels) -> str:
    return ", ".join(labels) if labels else _("None")


def build_customer_message(booking: Booking) -> tuple[str, str]:
    """Return (subject, body) of the customer confirmation."""
    site_name = booking_settings.SITE_NAME
    subject = _("Booking Confirmation – %(site)s") % {"site": site_name}
    body = _(
        "Hi %(name)s,\n\nThank you for your booking! Here is a summary:\n\n"
        "Session: %(sessions)s\nAdd-ons: %(addons)s\nDate: %(date)s\nTotal: NOK %(total)s\n\n"
        "We will be in touch to confirm your appointment.\n\nKind regards,\n%(site)s"
    ) % {
        "name": booking.name,
        "sessions": _labels(booking.session_labels),
        "addons": _labels(booking.addon_labels),
        "date": booking.booking_date.isoformat(),
        "total": format_price(booking.total_price),
        "site": site_name,
    }
    return subject, body


def build_operator_message(booking: Booking) -> tuple[str, str]:
    """Return (subject, body) of the operator notice."""
    subject = _("New Booking Request – %(site)s") % {"site": booking_settings.SITE_NAME}
    body = _(
        "A new booking has been submitted.\n\n"
        "Name: %(name)s\nEmail: %(email)s\nPhone: %(phone)s\n"
        "Session: %(sessions)s\nAdd-ons: %(addons)s\nDate: %(date)s\nTotal: NOK %(total)s\n\n"
        "Log in to the admin to manage bookings."
    ) % {
        "name": booking.name,
        "email": booking.email,
        "phone": booking.phone,
        "sessions": _labels(booking.session_labels),
        "addons": _labels(booking.addon_labels),
        "date": booking.booking_date.isoformat(),
        "total": format_price(booking.total_price),
    }
    return subject, body


def _send(notifier, recipient: str, message: tuple[str, str], booking: Booking) -> bool:
    subject, body = message
    try:
        notifier.send(recipient, subject, body)
    except Exception:
        logger.exception("Failed to notify %s about booking #%s", recipient, booking.pk)
        return False
    return True


def notify_booking(booking: Booking, notifier=None) -> int:
    """
    Send the customer confirmation and the operator notice.

    Never raises on delivery failure.

    Returns:
        Number of messages delivered
    """
    if notifier is None:
        try:
            notifier = get_notifier()
        except Exception:
            logger.exception("Notifier unavailable; booking #%s not announced", booking.pk)
            return 0
    sent = int(_send(notifier, booking.email, build_customer_message(booking), booking))

    operator_email = get_operator_email()
    if operator_email:
        sent += _send(notifier, operator_email, build_operator_message(booking), booking)
    else:
        logger.warning("No operator e-mail configured; booking #%s notice not sent", booking.pk)
    return sent


# Background executor, created on first use
_executor_lock = threading.Lock()
_executor: ThreadPoolExecutor | None = None


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sindingbooking-notify")
    return _executor


def _log_outcome(booking_id, future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("Notification task for booking #%s crashed: %r", booking_id, exc)
    else:
        logger.info("Booking #%s: %d notification(s) delivered", booking_id, future.result())


def dispatch_notifications(booking: Booking) -> Future | None:
    """
    Fire-and-forget notify_booking().

    Runs on a background thread unless NOTIFY_ASYNC is False, in which case
    it runs inline. The returned future is never awaited by the submission
    path.
    """
    if not booking_settings.NOTIFY_ASYNC:
        sent = notify_booking(booking)
        logger.info("Booking #%s: %d notification(s) delivered", booking.pk, sent)
        return None

    future = _get_executor().submit(notify_booking, booking)
    future.add_done_callback(lambda f: _log_outcome(booking.pk, f))
    return future
