"""Seat availability and selection."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Mapping

from yuka.data import UNAVAILABLE_SEATS
from yuka.errors import SeatUnavailableError
from yuka.models import BookingSelection

_TABLE_SEAT_RE = re.compile(r"table(\d+)-seat(\d+)")
_LONG_TABLE_SEAT_RE = re.compile(r"long-table-seat(\d+)")


def is_available(
    seat_id: str,
    time: str,
    availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
) -> bool:
    """Return False only when the seat is known and blocked at ``time``."""
    blocked = availability.get(seat_id)
    if blocked is None:
        return True
    return time not in blocked


def select_seat(
    selection: BookingSelection,
    seat_id: str,
    availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
) -> BookingSelection:
    """Return ``selection`` with ``seat_id`` chosen, if free at the selected time."""
    if not is_available(seat_id, selection.time, availability):
        raise SeatUnavailableError(seat_id, selection.time)
    return replace(selection, selected_seat=seat_id)


def selected_seat_available(
    selection: BookingSelection,
    availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
) -> bool:
    """Whether the chosen seat is still free at the current time.

    Changing the time does not clear the seat, so the map uses this to
    flag a selection that has since become blocked.
    """
    if selection.selected_seat is None:
        return True
    return is_available(selection.selected_seat, selection.time, availability)


def format_seat_name(seat_id: str | None) -> str:
    """Convert ``table1-seat2`` to ``Table 1, Seat 2``."""
    if not seat_id:
        return "No seat selected"
    long_match = _LONG_TABLE_SEAT_RE.fullmatch(seat_id)
    if long_match:
        return f"Long Table, Seat {long_match.group(1)}"
    table_match = _TABLE_SEAT_RE.fullmatch(seat_id)
    if table_match:
        return f"Table {table_match.group(1)}, Seat {table_match.group(2)}"
    return seat_id
