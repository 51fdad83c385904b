"""Static catalog and seating data."""

from __future__ import annotations

from yuka.constant import (
    CATEGORY_LABELS,
    MENU_ITEMS_BY_CATEGORY,
    SEAT_LAYOUT,
    UNAVAILABLE_SEATS as _UNAVAILABLE_SEATS_RAW,
)
from yuka.models import Category, MenuItem

MENU_BY_CATEGORY: dict[Category, list[MenuItem]] = {
    Category.parse(category): [
        MenuItem(
            id=str(raw["id"]),
            name=str(raw["name"]),
            price=int(raw["price"]),
            image=str(raw.get("image", "")),
        )
        for raw in items
    ]
    for category, items in MENU_ITEMS_BY_CATEGORY.items()
}

UNAVAILABLE_SEATS: dict[str, frozenset[str]] = {
    seat_id: frozenset(times) for seat_id, times in _UNAVAILABLE_SEATS_RAW.items()
}

SEAT_IDS: list[str] = [seat_id for seats in SEAT_LAYOUT.values() for seat_id in seats]


def category_label(category: Category) -> str:
    """Get the display label for a category."""
    category = Category.parse(category)
    return CATEGORY_LABELS.get(category.value, category.value.title())

