"""Tests for seat availability and selection."""

from datetime import date

import pytest

from yuka.data import SEAT_IDS, UNAVAILABLE_SEATS
from yuka.errors import SeatUnavailableError
from yuka.models import BookingSelection
from yuka.seating import format_seat_name, is_available, select_seat, selected_seat_available


def _selection(time, seat=None):
    return BookingSelection(date=date(2026, 10, 19), time=time, selected_seat=seat)


class TestIsAvailable:
    def test_blocked_time_is_unavailable(self):
        assert is_available("table1-seat1", "10:00") is False

    def test_other_time_is_available(self):
        assert is_available("table1-seat1", "09:00") is True

    def test_unknown_seat_is_available(self):
        assert is_available("patio-seat9", "10:00") is True

    def test_custom_availability_mapping(self):
        availability = {"table1-seat2": frozenset({"09:30"})}
        assert is_available("table1-seat2", "09:30", availability) is False
        assert is_available("table1-seat1", "10:00", availability) is True

    def test_layout_covers_every_blocked_seat(self):
        assert set(UNAVAILABLE_SEATS) <= set(SEAT_IDS)
        assert len(SEAT_IDS) == 12


class TestSelectSeat:
    def test_rejects_blocked_seat_and_keeps_selection(self):
        selection = _selection("10:00", seat="table2-seat1")
        with pytest.raises(SeatUnavailableError):
            select_seat(selection, "table1-seat1")
        assert selection.selected_seat == "table2-seat1"

    def test_accepts_free_seat(self):
        chosen = select_seat(_selection("09:00"), "table1-seat1")
        assert chosen.selected_seat == "table1-seat1"

    def test_selected_seat_can_become_blocked_after_time_change(self):
        chosen = select_seat(_selection("09:00"), "table1-seat1")
        later = BookingSelection(date=chosen.date, time="10:00", selected_seat=chosen.selected_seat)
        assert later.selected_seat == "table1-seat1"
        assert selected_seat_available(later) is False


class TestFormatSeatName:
    @pytest.mark.parametrize(
        "seat_id, expected",
        [
            ("table1-seat2", "Table 1, Seat 2"),
            ("long-table-seat3", "Long Table, Seat 3"),
            (None, "No seat selected"),
            ("bar-stool", "bar-stool"),
        ],
    )
    def test_format(self, seat_id, expected):
        assert format_seat_name(seat_id) == expected
