"""Pilot tests for the Textual booking app."""

from yuka.booking_app import BookingApp
from yuka.date_picker_modal import DatePickerModal
from yuka.models import WizardStep
from yuka.notice_modal import NoticeModal
from yuka.pages import SitePage
from yuka.time_picker_modal import TimePickerModal


async def test_starts_on_home_page(store):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.current_page is SitePage.HOME
        assert app.query_one("#booking-layout").display is False


async def test_proceed_without_seat_shows_notice(store):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("f5", "p")
        await pilot.pause()
        assert isinstance(app.screen, NoticeModal)
        assert store.state.step is WizardStep.SELECTING

        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, NoticeModal)


async def test_keyboard_booking_flow(store):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        # Seat cursor starts on long-table-seat1.
        await pilot.press("f5", "enter")
        assert store.state.selection.selected_seat == "long-table-seat1"

        # Menu pane: add the first savoury item twice.
        await pilot.press("tab", "enter", "enter")
        assert store.subtotal == 360

        # Order pane: remove one.
        await pilot.press("tab", "down", "minus")
        assert store.subtotal == 180

        await pilot.press("p")
        assert store.state.step is WizardStep.REVIEWING

        await pilot.press("c")
        assert store.state.step is WizardStep.CONFIRMED
        assert store.state.reference == "YK-TEST0001"

        await pilot.press("n")
        assert store.state.step is WizardStep.SELECTING
        assert store.state.food_order.is_empty()
        assert store.state.selection.selected_seat is None


async def test_time_picker_changes_time(store):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("f5", "t")
        await pilot.pause()
        assert isinstance(app.screen, TimePickerModal)

        await pilot.press("right", "enter")
        await pilot.pause()
        assert store.state.selection.time == "12:30"


async def test_date_picker_refuses_past_day(store, today):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("f5", "d")
        await pilot.pause()
        assert isinstance(app.screen, DatePickerModal)

        await pilot.press("left", "enter")
        await pilot.pause()
        assert isinstance(app.screen, DatePickerModal)

        await pilot.press("right", "right", "enter")
        await pilot.pause()
        assert store.state.selection.date == today.replace(day=today.day + 1)


async def test_slot_length_toggles(store):
    app = BookingApp(store=store)
    async with app.run_test() as pilot:
        await pilot.press("f5", "s")
        assert store.state.selection.slot_length_hours == 2
        await pilot.press("s")
        assert store.state.selection.slot_length_hours == 1
