"""Main Textual app class."""

from __future__ import annotations

from datetime import date

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from yuka import ledger
from yuka.booking import BookingStore
from yuka.config import SLOT_LENGTH_CHOICES
from yuka.data import MENU_BY_CATEGORY, SEAT_IDS
from yuka.date_picker_modal import DatePickerModal
from yuka.errors import NoSeatSelectedError
from yuka.logging_setup import get_logger
from yuka.models import BookingState, Category, MenuItem, WizardStep
from yuka.notice_modal import NoticeModal
from yuka.pages import SitePage, format_nav, render_page
from yuka.rendering import (
    format_category_tabs,
    format_confirmation,
    format_menu_items,
    format_order_lines,
    format_price,
    format_seat_map,
    format_selection,
    format_summary,
)
from yuka.time_picker_modal import TimePickerModal

logger = get_logger(__name__)

_PANES = ("seats", "menu", "order")
_SEATS_PER_ROW = 4


class BookingApp(App):
    """A Textual app for the cafe site and its seat and food pre-order flow."""

    TITLE = "Yuka Coffee"
    SUB_TITLE = "Book a Spot"

    CSS = """
    Screen {
        layout: vertical;
    }

    #nav {
        height: 1;
        padding: 0 1;
        background: #6f0619;
        color: #ffeecc;
    }

    #page-body {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
    }

    #booking-layout {
        height: 1fr;
    }

    #seat-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 1fr;
        border: round $secondary;
        padding: 1;
    }

    .active-pane {
        border: heavy #fe8c01;
    }

    #seat-map {
        height: auto;
        margin-bottom: 1;
    }

    #menu-items {
        height: auto;
        border: tall $surface;
        padding: 0 1;
        margin-bottom: 1;
    }

    #order-lines {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #review-pane {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
    }

    #status-bar {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    current_page = reactive(SitePage.HOME)
    focus_pane = reactive("seats")
    seat_index = reactive(0)
    menu_index = reactive(0)
    order_index = reactive(None)
    active_category = reactive(Category.SAVOURY)

    BINDINGS = [
        ("f1", "show_page('home')", "Home"),
        ("f2", "show_page('about')", "About"),
        ("f3", "show_page('menu')", "Menu"),
        ("f4", "show_page('blog')", "Blog"),
        ("f5", "show_page('booking')", "Book"),
        Binding("tab", "cycle_pane(1)", "Next pane", priority=True),
        Binding("shift+tab", "cycle_pane(-1)", "Previous pane", priority=True),
        ("up", "move_cursor(-1)", "Up"),
        ("down", "move_cursor(1)", "Down"),
        ("left", "move_seat(-1)", "Previous seat"),
        ("right", "move_seat(1)", "Next seat"),
        ("left_square_bracket", "cycle_category(-1)", "Previous tab"),
        ("right_square_bracket", "cycle_category(1)", "Next tab"),
        ("enter", "activate", "Select / add"),
        ("plus", "increment_line", "Add one"),
        ("minus", "decrement_line", "Remove one"),
        ("x", "delete_line", "Delete line"),
        ("d", "pick_date", "Date"),
        ("t", "pick_time", "Time"),
        ("s", "toggle_slot_length", "Slot length"),
        ("p", "proceed", "Proceed to book"),
        ("b", "back", "Back"),
        ("c", "confirm", "Confirm"),
        ("n", "new_booking", "Book another"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: BookingStore | None = None) -> None:
        super().__init__()
        self.store = store or BookingStore()
        self.store.subscribe(self._on_state_change)
        logger.debug("app_init step=%s", self.store.state.step)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="nav")
        yield Static(id="page-body")
        with Horizontal(id="booking-layout"):
            with Vertical(id="seat-pane"):
                yield Static("Select Your Seat", classes="pane-title")
                yield Static(id="seat-map")
                yield Static(id="selection-details")
            with Vertical(id="order-pane"):
                yield Static("Pre-order (optional)", classes="pane-title")
                yield Static(id="category-tabs")
                yield Static(id="menu-items")
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-lines")
        with Vertical(id="review-pane"):
            yield Static(id="review-body")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        logger.debug(
            "on_key key=%r page=%s pane=%s step=%s",
            event.key,
            self.current_page.value,
            self.focus_pane,
            self.store.state.step,
        )

    @property
    def booking(self) -> BookingState:
        return self.store.state

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _booking_active(self, step: WizardStep | None = None) -> bool:
        if self._modal_open() or self.current_page is not SitePage.BOOKING:
            return False
        return step is None or self.booking.step is step

    # Navigation

    def action_show_page(self, page: str) -> None:
        if self._modal_open():
            return
        self.current_page = SitePage(page)
        self.store.clear_notice()
        self._refresh_all()

    def action_cycle_pane(self, delta: int) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        idx = _PANES.index(self.focus_pane)
        self.focus_pane = _PANES[(idx + delta) % len(_PANES)]
        self._refresh_booking()

    def action_move_cursor(self, delta: int) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return

        if self.focus_pane == "seats":
            self._move_seat_index(delta * _SEATS_PER_ROW)
        elif self.focus_pane == "menu":
            items = self._menu_items()
            self.menu_index = (self.menu_index + delta) % len(items)
        else:
            self._move_order_selection(delta)
        self._refresh_booking()

    def action_move_seat(self, delta: int) -> None:
        if not self._booking_active(WizardStep.SELECTING) or self.focus_pane != "seats":
            return
        self._move_seat_index(delta)
        self._refresh_booking()

    def action_cycle_category(self, delta: int) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        categories = list(Category)
        idx = categories.index(self.active_category)
        self.active_category = categories[(idx + delta) % len(categories)]
        self.menu_index = 0
        self._refresh_booking()

    # Selection step intents

    def action_activate(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return

        if self.focus_pane == "seats":
            self.store.select_seat(SEAT_IDS[self.seat_index])
        elif self.focus_pane == "menu":
            item = self._menu_items()[self.menu_index]
            self.store.add_item(self.active_category, item)
        else:
            self.action_increment_line()

    def action_increment_line(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        row = self._selected_order_row()
        if row is None:
            return
        category, item = row
        self.store.add_item(category, item)

    def action_decrement_line(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        row = self._selected_order_row()
        if row is None:
            return
        category, item = row
        self.store.decrement_item(category, item.id)

    def action_delete_line(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        row = self._selected_order_row()
        if row is None:
            return
        category, item = row
        self.store.delete_item(category, item.id)

    def action_pick_date(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        self.push_screen(DatePickerModal(self.booking.selection.date, self.store.today()), self._apply_date)

    def action_pick_time(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        self.push_screen(TimePickerModal(self.booking.selection.time), self._apply_time)

    def action_toggle_slot_length(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        current = self.booking.selection.slot_length_hours
        choices = list(SLOT_LENGTH_CHOICES)
        next_hours = choices[(choices.index(current) + 1) % len(choices)] if current in choices else choices[0]
        self.store.set_slot_length(next_hours)

    # Wizard intents

    def action_proceed(self) -> None:
        if not self._booking_active(WizardStep.SELECTING):
            return
        if not self.store.advance():
            self.push_screen(NoticeModal(self.booking.notice or str(NoSeatSelectedError())))

    def action_back(self) -> None:
        if not self._booking_active(WizardStep.REVIEWING):
            return
        self.store.back()

    def action_confirm(self) -> None:
        if not self._booking_active(WizardStep.REVIEWING):
            return
        self.store.confirm()

    def action_new_booking(self) -> None:
        if not self._booking_active(WizardStep.CONFIRMED):
            return
        if self.store.reset_for_new_booking():
            self.focus_pane = "seats"
            self.order_index = None

    def _apply_date(self, chosen: date | None) -> None:
        if chosen is None:
            return
        self.store.set_date(chosen)

    def _apply_time(self, chosen: str | None) -> None:
        if chosen is None:
            return
        self.store.set_time(chosen)

    # Cursor helpers

    def _menu_items(self) -> list[MenuItem]:
        return MENU_BY_CATEGORY[self.active_category]

    def _move_seat_index(self, delta: int) -> None:
        self.seat_index = (self.seat_index + delta) % len(SEAT_IDS)

    def _order_rows(self) -> list[tuple[Category, MenuItem]]:
        return [(category, line.item) for category, line in ledger.lines(self.booking.food_order)]

    def _move_order_selection(self, delta: int) -> None:
        rows = self._order_rows()
        if not rows:
            return

        if self.order_index is None:
            self.order_index = 0 if delta > 0 else len(rows) - 1
        else:
            self.order_index = (self.order_index + delta) % len(rows)

    def _selected_order_row(self) -> tuple[Category, MenuItem] | None:
        rows = self._order_rows()
        if self.order_index is None:
            return None
        if not (0 <= self.order_index < len(rows)):
            return None
        return rows[self.order_index]

    # Rendering

    def _on_state_change(self, state: BookingState) -> None:
        rows = self._order_rows()
        if not rows:
            self.order_index = None
        elif self.order_index is not None and self.order_index >= len(rows):
            self.order_index = len(rows) - 1
        self._refresh_all()

    def _refresh_all(self) -> None:
        try:
            self.query_one("#nav", Static).update(format_nav(self.current_page))
        except NoMatches:
            return

        on_booking = self.current_page is SitePage.BOOKING
        page_body = self.query_one("#page-body", Static)
        page_body.display = not on_booking
        if not on_booking:
            page_body.update(render_page(self.current_page))
        self._refresh_booking()

    def _refresh_booking(self) -> None:
        try:
            layout = self.query_one("#booking-layout", Horizontal)
            review = self.query_one("#review-pane", Vertical)
        except NoMatches:
            return

        on_booking = self.current_page is SitePage.BOOKING
        selecting = self.booking.step is WizardStep.SELECTING
        layout.display = on_booking and selecting
        review.display = on_booking and not selecting
        self._refresh_status()
        if not on_booking:
            return

        if selecting:
            self._refresh_selecting()
        else:
            self._refresh_review()

    def _refresh_selecting(self) -> None:
        state = self.booking
        seat_pane = self.query_one("#seat-pane", Vertical)
        order_pane = self.query_one("#order-pane", Vertical)
        seat_pane.set_class(self.focus_pane == "seats", "active-pane")
        order_pane.set_class(self.focus_pane != "seats", "active-pane")

        cursor_seat = SEAT_IDS[self.seat_index] if self.focus_pane == "seats" else None
        self.query_one("#seat-map", Static).update(format_seat_map(state, cursor_seat, self.store.availability))
        self.query_one("#selection-details", Static).update(format_selection(state, self.store.availability))

        self.query_one("#category-tabs", Static).update(format_category_tabs(state.food_order, self.active_category))
        menu_cursor = self.menu_index if self.focus_pane == "menu" else None
        self.query_one("#menu-items", Static).update(format_menu_items(state.food_order, self.active_category, menu_cursor))
        order_cursor = self.order_index if self.focus_pane == "order" else None
        self.query_one("#order-lines", Static).update(format_order_lines(state.food_order, order_cursor))

    def _refresh_review(self) -> None:
        body = self.query_one("#review-body", Static)
        if self.booking.step is WizardStep.CONFIRMED:
            body.update(format_confirmation(self.booking))
            return
        body.update(format_summary(self.booking))

    def _refresh_status(self) -> None:
        bar = self.query_one("#status-bar", Static)
        if self.current_page is not SitePage.BOOKING:
            bar.update("F1–F5 switch page. Ctrl+Q to quit.")
            return

        step = self.booking.step
        if step is WizardStep.SELECTING:
            hint = "Tab pane, Enter select/add, +/- qty, x delete, d date, t time, s slot, p proceed"
        elif step is WizardStep.REVIEWING:
            hint = f"b back, c confirm booking ({format_price(self.store.total)})"
        else:
            hint = "n book another spot"
        status = self.booking.notice or f"Total {format_price(self.store.total)}"
        bar.update(f"{hint}\n{status}")
