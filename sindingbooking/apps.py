from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SindingBookingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sindingbooking"
    verbose_name = _("Bookings")

    def ready(self):
        from sindingbooking.catalogue import get_catalogue

        # Fail at startup on a malformed SINDING_BOOKING["CATALOGUE"].
        get_catalogue()
