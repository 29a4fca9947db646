"""Booking admin."""

from django.contrib import admin
from django.utils.html import format_html
from simple_history.admin import SimpleHistoryAdmin

from sindingbooking.models import Booking, BookingStatus
from sindingbooking.pricing import format_price


STATUS_COLORS = {
    BookingStatus.PENDING: ("#ffc107", "#000"),
    BookingStatus.CONFIRMED: ("#28a745", "#fff"),
    BookingStatus.CANCELLED: ("#dc3545", "#fff"),
}


@admin.register(Booking)
class BookingAdmin(SimpleHistoryAdmin):
    list_display = [
        "id",
        "name",
        "email_link",
        "phone",
        "booking_date",
        "sessions",
        "addons",
        "formatted_total",
        "status_badge",
        "created_at",
    ]
    list_filter = ["status", "booking_date"]
    search_fields = ["name", "email", "phone"]
    date_hierarchy = "booking_date"
    ordering = ["-created_at", "-id"]
    readonly_fields = [
        "name",
        "email",
        "phone",
        "booking_date",
        "session_labels",
        "addon_labels",
        "total_price",
        "created_at",
    ]

    fieldsets = [
        (None, {"fields": ("status",)}),
        ("Customer", {"fields": ("name", "email", "phone")}),
        ("Booking", {"fields": ("booking_date", "session_labels", "addon_labels", "total_price")}),
        ("Audit", {"fields": ("created_at",), "classes": ("collapse",)}),
    ]

    def has_add_permission(self, request):
        # Bookings only come in through the public form.
        return False

    def email_link(self, obj):
        return format_html('<a href="mailto:{0}">{0}</a>', obj.email)

    email_link.short_description = "Email"
    email_link.admin_order_field = "email"

    def sessions(self, obj):
        return obj.sessions_display

    sessions.short_description = "Session"

    def addons(self, obj):
        return obj.addons_display or "-"

    addons.short_description = "Add-ons"

    def formatted_total(self, obj):
        return format_price(obj.total_price)

    formatted_total.short_description = "Total (NOK)"
    formatted_total.admin_order_field = "total_price"

    def status_badge(self, obj):
        background, color = STATUS_COLORS.get(obj.status, ("#6c757d", "#fff"))
        return format_html(
            '<span style="background-color:{};color:{};'
            'padding:2px 6px;border-radius:3px;font-size:11px;">{}</span>',
            background,
            color,
            obj.get_status_display(),
        )

    status_badge.short_description = "Status"
    status_badge.admin_order_field = "status"

    actions = ["confirm_bookings", "cancel_bookings"]

    @admin.action(description="Mark selected bookings as confirmed")
    def confirm_bookings(self, request, queryset):
        updated = self._set_status(queryset, BookingStatus.CONFIRMED)
        self.message_user(request, f"{updated} booking(s) confirmed.")

    @admin.action(description="Mark selected bookings as cancelled")
    def cancel_bookings(self, request, queryset):
        updated = self._set_status(queryset, BookingStatus.CANCELLED)
        self.message_user(request, f"{updated} booking(s) cancelled.")

    def _set_status(self, queryset, status) -> int:
        """Save one by one so each change lands in the history table."""
        updated = 0
        for booking in queryset.exclude(status=status):
            booking.status = status
            booking.save(update_fields=["status"])
            updated += 1
        return updated
