"""Pytest configuration and fixtures for booking tests."""

from datetime import date

import pytest

from yuka.booking import BookingStore
from yuka.data import MENU_BY_CATEGORY
from yuka.models import Category

TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def reference_generator():
    """Deterministic references: YK-TEST0001, YK-TEST0002, ..."""
    issued = []

    def _generate():
        issued.append(f"YK-TEST{len(issued) + 1:04d}")
        return issued[-1]

    return _generate


@pytest.fixture
def store(today, reference_generator):
    """A fresh booking store with a fixed clock."""
    return BookingStore(today=lambda: today, generate_reference=reference_generator)


@pytest.fixture
def menu_item():
    """Factory fixture to look up catalog items by category and id."""
    def _get(category, item_id):
        matches = [item for item in MENU_BY_CATEGORY[Category.parse(category)] if item.id == item_id]
        assert matches, f"missing catalog item {category}/{item_id}"
        return matches[0]
    return _get
