"""
Sinding Booking - photography session booking intake.

Usage:
    from sindingbooking import BookingService, BookingError

    quote = BookingService.quote("family", ["extra_hour"])
    result = BookingService.submit(request)
"""


def __getattr__(name):
    if name == "BookingService":
        from sindingbooking.service import BookingService

        return BookingService
    elif name == "BookingError":
        from sindingbooking.exceptions import BookingError

        return BookingError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["BookingService", "BookingError"]
__version__ = "1.0.0"
