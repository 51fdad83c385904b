"""Bookable dates, times and slot lengths."""

from __future__ import annotations

import calendar
from dataclasses import replace
from datetime import date

from yuka.config import CLOSING_HOUR, OPENING_HOUR, SLOT_LENGTH_CHOICES, SLOT_MINUTES
from yuka.errors import InvalidSlotLengthError, InvalidTimeError, PastDateError
from yuka.models import BookingSelection

_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


def time_options() -> list[str]:
    """Half-hour start times from opening up to and including closing hour."""
    options: list[str] = []
    for hour in range(OPENING_HOUR, CLOSING_HOUR + 1):
        for minute in range(0, 60, SLOT_MINUTES):
            if hour == CLOSING_HOUR and minute > 0:
                break
            options.append(f"{hour:02d}:{minute:02d}")
    return options


def is_past(day: date, today: date) -> bool:
    """Days strictly before today are shown but not selectable."""
    return day < today


def set_date(selection: BookingSelection, day: date, today: date) -> BookingSelection:
    if is_past(day, today):
        raise PastDateError(day)
    return replace(selection, date=day)


def set_time(selection: BookingSelection, time: str) -> BookingSelection:
    """Change the start time; the selected seat is left as-is."""
    if time not in time_options():
        raise InvalidTimeError(time)
    return replace(selection, time=time)


def set_slot_length(selection: BookingSelection, hours: int) -> BookingSelection:
    if hours not in SLOT_LENGTH_CHOICES:
        raise InvalidSlotLengthError(hours)
    return replace(selection, slot_length_hours=hours)


def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Weeks of the month starting on Sunday, padded with ``None``."""
    return [
        [day or None for day in week]
        for week in _SUNDAY_FIRST.monthdayscalendar(year, month)
    ]


def shift_month(day: date, delta: int) -> date:
    """First day of the month ``delta`` months away from ``day``."""
    index = day.year * 12 + (day.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def format_long_date(day: date) -> str:
    """Render as ``Monday, October 19, 2026``."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
