"""Food order bookkeeping.

Every function takes a ``FoodOrder`` snapshot and returns a new one; the
input is never mutated. Decrementing or deleting a line that is not in
the order returns the order unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from yuka.models import Category, FoodOrder, MenuItem, OrderLine


def _with_lines(order: FoodOrder, category: Category, lines: tuple[OrderLine, ...]) -> FoodOrder:
    return replace(order, **{category.value: lines})


def _index_of(lines: tuple[OrderLine, ...], item_id: str) -> int | None:
    for idx, line in enumerate(lines):
        if line.item.id == item_id:
            return idx
    return None


def add_item(order: FoodOrder, category: Category, item: MenuItem) -> FoodOrder:
    """Increment the line for ``item`` or append a new line with quantity 1."""
    category = Category.parse(category)
    lines = order.lines_for(category)
    idx = _index_of(lines, item.id)
    if idx is None:
        return _with_lines(order, category, lines + (OrderLine(item=item, quantity=1),))

    current = lines[idx]
    bumped = replace(current, quantity=current.quantity + 1)
    return _with_lines(order, category, lines[:idx] + (bumped,) + lines[idx + 1 :])


def decrement_item(order: FoodOrder, category: Category, item_id: str) -> FoodOrder:
    """Drop one from a line's quantity, removing the line when it reaches zero."""
    category = Category.parse(category)
    lines = order.lines_for(category)
    idx = _index_of(lines, item_id)
    if idx is None:
        return order

    current = lines[idx]
    if current.quantity > 1:
        lowered = replace(current, quantity=current.quantity - 1)
        return _with_lines(order, category, lines[:idx] + (lowered,) + lines[idx + 1 :])
    return _with_lines(order, category, lines[:idx] + lines[idx + 1 :])


def delete_item(order: FoodOrder, category: Category, item_id: str) -> FoodOrder:
    """Remove a line regardless of its quantity."""
    category = Category.parse(category)
    lines = order.lines_for(category)
    if _index_of(lines, item_id) is None:
        return order
    return _with_lines(order, category, tuple(line for line in lines if line.item.id != item_id))


def line_count(order: FoodOrder, category: Category) -> int:
    """Count distinct lines (not quantities) in one category."""
    return len(order.lines_for(category))


def total_line_count(order: FoodOrder) -> int:
    return sum(line_count(order, category) for category in Category)


def lines(order: FoodOrder) -> Iterator[tuple[Category, OrderLine]]:
    """Yield every line with its category, in category order."""
    for category in Category:
        for line in order.lines_for(category):
            yield category, line


def quantity_of(order: FoodOrder, category: Category, item_id: str) -> int:
    current = order.lines_for(category)
    idx = _index_of(current, item_id)
    return 0 if idx is None else current[idx].quantity


def subtotal(order: FoodOrder) -> int:
    """Sum of price * quantity across all categories."""
    return sum(line.line_total for _, line in lines(order))
