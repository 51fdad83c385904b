"""Editable static menu, seating and schedule configuration."""

from __future__ import annotations

# Pre-order catalog values consumed by yuka.data (which wraps these into MenuItem instances).
MENU_ITEMS_BY_CATEGORY: dict[str, list[dict[str, str | int]]] = {
    "savoury": [
        {"id": "s1", "name": "Avocado Toast", "price": 180, "image": "/api/placeholder/80/80"},
        {"id": "s2", "name": "Egg Sandwich", "price": 150, "image": "/api/placeholder/80/80"},
        {"id": "s3", "name": "Chicken Wrap", "price": 220, "image": "/api/placeholder/80/80"},
        {"id": "s4", "name": "Vegetable Quiche", "price": 190, "image": "/api/placeholder/80/80"},
    ],
    "sweet": [
        {"id": "sw1", "name": "Chocolate Croissant", "price": 120, "image": "/api/placeholder/80/80"},
        {"id": "sw2", "name": "Blueberry Muffin", "price": 100, "image": "/api/placeholder/80/80"},
        {"id": "sw3", "name": "Cheesecake", "price": 160, "image": "/api/placeholder/80/80"},
        {"id": "sw4", "name": "Cinnamon Roll", "price": 130, "image": "/api/placeholder/80/80"},
    ],
    "beverage": [
        {"id": "b1", "name": "Cappuccino", "price": 140, "image": "/api/placeholder/80/80"},
        {"id": "b2", "name": "Latte", "price": 150, "image": "/api/placeholder/80/80"},
        {"id": "b3", "name": "Espresso", "price": 110, "image": "/api/placeholder/80/80"},
        {"id": "b4", "name": "Matcha Latte", "price": 170, "image": "/api/placeholder/80/80"},
        {"id": "b5", "name": "Iced Coffee", "price": 130, "image": "/api/placeholder/80/80"},
    ],
}

CATEGORY_LABELS: dict[str, str] = {
    "savoury": "Savoury",
    "sweet": "Sweet",
    "beverage": "Beverage",
}

# Mock schedule: seat id -> blocked start times.
UNAVAILABLE_SEATS: dict[str, list[str]] = {
    "table1-seat1": ["10:00", "11:00"],
    "table2-seat3": ["12:00", "13:00"],
    "long-table-seat2": ["15:00", "16:00", "17:00"],
}

# Table label -> seat ids, in map order (window long table first).
SEAT_LAYOUT: dict[str, list[str]] = {
    "Long Table": [
        "long-table-seat1",
        "long-table-seat2",
        "long-table-seat3",
        "long-table-seat4",
    ],
    "Table 1": ["table1-seat1", "table1-seat2", "table1-seat3", "table1-seat4"],
    "Table 2": ["table2-seat1", "table2-seat2", "table2-seat3", "table2-seat4"],
}
