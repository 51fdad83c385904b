"""Entry point for the Yuka Coffee booking Textual app."""

from __future__ import annotations

from yuka.booking_app import BookingApp
from yuka.logging_setup import setup_logging


def main() -> None:
    """Run the Textual application."""
    logger = setup_logging()
    logger.info("app_start")
    BookingApp().run()


if __name__ == "__main__":
    main()
