"""
Sinding Booking signals.

Signals:
    booking_created:
        Sent after a submitted Booking has been stored.

        Kwargs:
            sender: Booking class
            instance: The Booking instance that was created
            total_price: Decimal, the authoritative total in NOK

        Example handler::

            from sindingbooking.signals import booking_created

            def on_booking_created(sender, instance, total_price, **kwargs):
                logger.info("New booking #%s: NOK %s", instance.pk, total_price)

            booking_created.connect(on_booking_created)
"""

from django.dispatch import Signal

booking_created = Signal()
