"""Booking intent rejections."""

from __future__ import annotations


class BookingError(ValueError):
    """An intent that was rejected without changing booking state."""


class NoSeatSelectedError(BookingError):
    def __init__(self) -> None:
        super().__init__("Please select a seat first")


class SeatUnavailableError(BookingError):
    def __init__(self, seat_id: str, time: str) -> None:
        super().__init__(f"{seat_id} is unavailable at {time}")
        self.seat_id = seat_id
        self.time = time


class InvalidTransitionError(BookingError):
    def __init__(self, action: str, step: object) -> None:
        super().__init__(f"Cannot {action} while {step}")
        self.action = action
        self.step = step


class PastDateError(BookingError):
    def __init__(self, day: object) -> None:
        super().__init__(f"{day} is in the past")
        self.day = day


class InvalidTimeError(BookingError):
    def __init__(self, time: str) -> None:
        super().__init__(f"{time!r} is not a bookable time")
        self.time = time


class InvalidSlotLengthError(BookingError):
    def __init__(self, hours: object) -> None:
        super().__init__(f"Slot length must be 1 or 2 hours, got {hours!r}")
        self.hours = hours
