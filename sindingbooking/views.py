"""Booking form page and its JSON endpoints."""

from datetime import timedelta

from django.http import JsonResponse
from django.shortcuts import render
from django.utils.translation import gettext as _
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from sindingbooking.catalogue import get_catalogue
from sindingbooking.conf import local_today
from sindingbooking.exceptions import ERROR_MESSAGES
from sindingbooking.protocols import BookingRequest, Field
from sindingbooking.service import SUCCESS_MESSAGE, BookingService, Outcome
from sindingbooking.validation import MESSAGES


STATUS_CODES = {
    Outcome.ACCEPTED: 200,
    Outcome.REJECTED_VALIDATION: 400,
    Outcome.REJECTED_NO_SESSION: 400,
    Outcome.REJECTED_PERSISTENCE: 500,
}


def _client_messages() -> dict[str, str]:
    """Strings used by booking.js."""
    return {
        "required": _(ERROR_MESSAGES["VALIDATION_FAILED"]),
        "selectSession": _(ERROR_MESSAGES["NO_SESSION"]),
        "invalidEmail": _(MESSAGES[Field.EMAIL]),
        "invalidPhone": _(MESSAGES[Field.PHONE]),
        "invalidDate": _(MESSAGES[Field.DATE]),
        "submitting": _("Submitting…"),
        "success": _(SUCCESS_MESSAGE),
        "error": _("Something went wrong. Please try again."),
    }


@require_GET
@ensure_csrf_cookie
def booking_form(request):
    catalogue = get_catalogue()
    context = {
        "sessions": catalogue.sessions(),
        "addons": catalogue.addons(),
        "catalogue": catalogue.as_dicts(),
        "messages_i18n": _client_messages(),
        "min_date": (local_today() + timedelta(days=1)).isoformat(),
    }
    return render(request, "sindingbooking/booking_form.html", context)


@require_POST
def quote(request):
    """Server-side price of the posted selection."""
    addon_ids = request.POST.getlist("addon_items[]") or request.POST.getlist("addon_ids[]")
    result = BookingService.quote(request.POST.get("session_id") or None, addon_ids)
    return JsonResponse(result.as_dict())


@require_POST
def submit_booking(request):
    """Authoritative booking submission; CSRF-protected by middleware."""
    result = BookingService.submit(BookingRequest.from_post(request.POST))
    return JsonResponse(result.as_dict(), status=STATUS_CODES[result.outcome])
