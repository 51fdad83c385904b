"""Blocking notice modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class NoticeModal(ModalScreen[None]):
    """Centered message that must be dismissed before continuing."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    NoticeModal {
        align: center middle;
        background: $background 60%;
    }

    #notice-dialog {
        width: 48;
        height: auto;
        border: round $warning;
        background: $panel;
        padding: 1 2;
    }

    #notice-message {
        text-style: bold;
        color: white;
        margin-bottom: 1;
    }

    #notice-help {
        color: #dddddd;
    }
    """

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(id="notice-dialog"):
            yield Static(self.message, id="notice-message")
            yield Static("Enter / Esc to close", id="notice-help")

    def action_close(self) -> None:
        self.dismiss()
