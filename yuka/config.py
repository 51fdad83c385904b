"""Runtime configuration defaults for booking and logging."""

from __future__ import annotations

import os

BOOKING_FEE = 200
CURRENCY_LABEL = "Rs."

DEFAULT_TIME = "12:00"
DEFAULT_SLOT_LENGTH_HOURS = 1
SLOT_LENGTH_CHOICES = (1, 2)

# Cafe hours; the last bookable start is the closing hour itself.
OPENING_HOUR = 9
CLOSING_HOUR = 20
SLOT_MINUTES = 30

BOOKING_REFERENCE_PREFIX = "YK-"
BOOKING_REFERENCE_LENGTH = 8

DEBUG_LOG_PATH = os.environ.get("YUKA_DEBUG_LOG_PATH", "/tmp/yuka-debug.log")
LOG_LEVEL = os.environ.get("YUKA_LOG_LEVEL", "INFO").upper()
