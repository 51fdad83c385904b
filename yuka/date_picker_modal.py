"""Calendar date picker modal screen."""

from __future__ import annotations

from datetime import date, timedelta

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from yuka.schedule import format_long_date, is_past, month_grid, shift_month

_WEEKDAY_HEADER = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


class DatePickerModal(ModalScreen[date | None]):
    """Month calendar; past days are shown dimmed and cannot be chosen."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("q", "cancel", "Cancel"),
        ("left", "move_days(-1)", "Previous day"),
        ("right", "move_days(1)", "Next day"),
        ("up", "move_days(-7)", "Previous week"),
        ("down", "move_days(7)", "Next week"),
        ("h", "move_days(-1)", "Previous day"),
        ("l", "move_days(1)", "Next day"),
        ("k", "move_days(-7)", "Previous week"),
        ("j", "move_days(7)", "Next week"),
        ("left_square_bracket", "move_month(-1)", "Previous month"),
        ("right_square_bracket", "move_month(1)", "Next month"),
        ("enter", "choose", "Choose"),
    ]

    CSS = """
    DatePickerModal {
        align: center middle;
        background: $background 60%;
    }

    #date-dialog {
        width: 40;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #date-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #date-error {
        color: #ffb3b3;
    }

    #date-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, current: date, today: date) -> None:
        super().__init__()
        self.current = current
        self.today = today
        self.cursor = current
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="date-dialog"):
            yield Static(id="date-title")
            yield Static(id="date-grid")
            yield Static(id="date-error")
            yield Static("Arrows move, [ ] month, Enter choose, Esc cancel", id="date-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_move_days(self, delta: int) -> None:
        self.cursor = self.cursor + timedelta(days=delta)
        self.error = ""
        self._refresh_content()

    def action_move_month(self, delta: int) -> None:
        self.cursor = shift_month(self.cursor, delta)
        self.error = ""
        self._refresh_content()

    def action_choose(self) -> None:
        if is_past(self.cursor, self.today):
            self.error = "Past dates cannot be booked."
            self._refresh_content()
            return
        self.dismiss(self.cursor)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _refresh_content(self) -> None:
        self.query_one("#date-title", Static).update(f"{self.cursor:%B} {self.cursor.year}")

        grid = Text()
        grid.append(" ".join(f"{name:>3}" for name in _WEEKDAY_HEADER), style="bold")
        for week in month_grid(self.cursor.year, self.cursor.month):
            grid.append("\n")
            for idx, day_num in enumerate(week):
                if idx > 0:
                    grid.append(" ")
                if day_num is None:
                    grid.append("   ")
                    continue
                day = self.cursor.replace(day=day_num)
                if day == self.cursor:
                    style = "bold #ffffff on #6f0619"
                elif is_past(day, self.today):
                    style = "dim"
                elif day == self.current:
                    style = "bold underline"
                else:
                    style = "white"
                grid.append(f"{day_num:>3}", style=style)
        grid.append(f"\n\n{format_long_date(self.cursor)}", style="dim")
        self.query_one("#date-grid", Static).update(grid)
        self.query_one("#date-error", Static).update(self.error)
