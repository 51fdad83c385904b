"""Time slot picker modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from yuka.schedule import time_options

_COLUMNS = 4


class TimePickerModal(ModalScreen[str | None]):
    """Grid of half-hour start times; dismisses with the chosen time."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("q", "cancel", "Cancel"),
        ("left", "move_cursor(-1)", "Previous"),
        ("right", "move_cursor(1)", "Next"),
        ("h", "move_cursor(-1)", "Previous"),
        ("l", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-4)", "Up"),
        ("down", "move_cursor(4)", "Down"),
        ("k", "move_cursor(-4)", "Up"),
        ("j", "move_cursor(4)", "Down"),
        ("enter", "choose", "Choose"),
    ]

    CSS = """
    TimePickerModal {
        align: center middle;
        background: $background 60%;
    }

    #time-dialog {
        width: 44;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #time-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #time-help {
        margin-top: 1;
        color: #dddddd;
    }
    """


    def __init__(self, current: str) -> None:
        super().__init__()
        self.options = time_options()
        self.current = current
        self.cursor_index = self.options.index(current) if current in self.options else 0

    def compose(self) -> ComposeResult:
        with Container(id="time-dialog"):
            yield Static("Select Time", id="time-title")
            yield Static(id="time-grid")
            yield Static("←/→/↑/↓ move, Enter choose, Esc cancel", id="time-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_move_cursor(self, delta: int) -> None:
        target = self.cursor_index + delta
        if not (0 <= target < len(self.options)):
            return
        self.cursor_index = target
        self._refresh_content()

    def action_choose(self) -> None:
        self.dismiss(self.options[self.cursor_index])

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _refresh_content(self) -> None:
        grid = Text()
        for idx, option in enumerate(self.options):
            if idx and idx % _COLUMNS == 0:
                grid.append("\n")
            if idx == self.cursor_index:
                style = "bold #ffffff on #6f0619"
            elif option == self.current:
                style = "bold underline"
            else:
                style = "white"
            grid.append(f" {option} ", style=style)
            grid.append(" ")
        self.query_one("#time-grid", Static).update(grid)
