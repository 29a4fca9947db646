"""Sinding Booking exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "VALIDATION_FAILED": "Please fill in all required fields.",
    "NO_SESSION": "Please select at least one session type.",
    "PERSISTENCE_FAILED": "Could not save your booking. Please try again.",
}


class BookingError(Exception):
    """
    Structured exception for booking operations.

    Usage:
        try:
            booking = BookingStore.insert(fields)
        except BookingError as e:
            if e.code == "PERSISTENCE_FAILED":
                return JsonResponse({"success": False, "message": e.message})
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
