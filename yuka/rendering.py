"""Rendering helpers for booking snapshots."""

from __future__ import annotations

from typing import Mapping

from rich.text import Text

from yuka import ledger
from yuka.config import BOOKING_FEE, CURRENCY_LABEL
from yuka.constant import SEAT_LAYOUT
from yuka.data import MENU_BY_CATEGORY, UNAVAILABLE_SEATS, category_label
from yuka.models import BookingState, Category, FoodOrder
from yuka.schedule import format_long_date
from yuka.seating import format_seat_name, is_available, selected_seat_available

SEAT_SELECTED_STYLE = "bold #ffffff on #6f0619"
SEAT_AVAILABLE_STYLE = "#000000 on #e2e8f0"
SEAT_UNAVAILABLE_STYLE = "dim #000000 on #fecaca"
SEAT_CONFLICT_STYLE = "bold #ffffff on #b23a48"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    category = Category.parse(category)
    if category is Category.SWEET:
        return "bold #ffffff on #b23a48"
    if category is Category.BEVERAGE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_price(amount: int) -> str:
    return f"{CURRENCY_LABEL} {amount}"


def format_duration(hours: int) -> str:
    return f"{hours} {'Hour' if hours == 1 else 'Hours'}"


def format_category_tabs(order: FoodOrder, active: Category) -> Text:
    """Render category tabs with distinct-line count badges."""
    text = Text()
    for idx, category in enumerate(Category):
        if idx > 0:
            text.append("  ")
        label = f" {category_label(category)} "
        if category is active:
            text.append(label, style="bold #ffffff on #6f0619")
        else:
            text.append(label, style="underline")
        count = ledger.line_count(order, category)
        if count:
            text.append(f" {count} ", style="bold #000000 on #fe8c01")
    return text


def format_menu_items(order: FoodOrder, category: Category, cursor: int | None) -> Text:
    """Render one category of the catalog, marking items already ordered."""
    lines = Text()
    for idx, item in enumerate(MENU_BY_CATEGORY[Category.parse(category)]):
        if idx > 0:
            lines.append("\n")
        pointer = "➤ " if idx == cursor else "  "
        lines.append(f"{pointer}{item.name}")
        lines.append(f"  {format_price(item.price)}", style="dim")
        quantity = ledger.quantity_of(order, category, item.id)
        if quantity:
            lines.append(f"  x{quantity}", style=badge_style(category))
    return lines


def format_order_lines(order: FoodOrder, cursor: int | None) -> Text:
    """Render the "Your Order" list with quantities."""
    if not ledger.total_line_count(order):
        return Text("(no items yet)", style="dim")

    lines = Text()
    for idx, (category, line) in enumerate(ledger.lines(order)):
        if idx > 0:
            lines.append("\n")
        pointer = "➤ " if idx == cursor else "  "
        lines.append(pointer)
        lines.append(category.value[0].upper(), style=badge_style(category))
        lines.append(f" {line.item.name}  ")
        lines.append(format_price(line.item.price), style="dim")
        lines.append(f"  − {line.quantity} +")
    return lines


def format_seat_map(
    state: BookingState,
    cursor_seat: str | None,
    availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
) -> Text:
    """Render the cafe layout with each seat styled for the current time."""
    selection = state.selection
    text = Text()
    for table_idx, (table_label, seat_ids) in enumerate(SEAT_LAYOUT.items()):
        if table_idx > 0:
            text.append("\n")
        text.append(f"{table_label:<11}", style="bold")
        for seat_id in seat_ids:
            seat_num = seat_id.rsplit("seat", 1)[-1]
            available = is_available(seat_id, selection.time, availability)
            selected = seat_id == selection.selected_seat
            if selected and not available:
                style = SEAT_CONFLICT_STYLE
            elif selected:
                style = SEAT_SELECTED_STYLE
            elif available:
                style = SEAT_AVAILABLE_STYLE
            else:
                style = SEAT_UNAVAILABLE_STYLE
            marker = ">" if seat_id == cursor_seat else " "
            text.append(marker)
            text.append(f" {seat_num} ", style=style)
    text.append("\n\n")
    text.append("   ", style=SEAT_AVAILABLE_STYLE)
    text.append(" Available  ")
    text.append("   ", style=SEAT_UNAVAILABLE_STYLE)
    text.append(" Unavailable  ")
    text.append("   ", style=SEAT_SELECTED_STYLE)
    text.append(" Selected")
    return text


def format_selection(
    state: BookingState,
    availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
) -> Text:
    selection = state.selection
    text = Text()
    text.append("Date: ", style="bold")
    text.append(format_long_date(selection.date))
    text.append("\nTime: ", style="bold")
    text.append(selection.time)
    text.append("\nSlot: ", style="bold")
    text.append(format_duration(selection.slot_length_hours))
    text.append("\nSeat: ", style="bold")
    text.append(format_seat_name(selection.selected_seat))
    if not selected_seat_available(selection, availability):
        text.append("  (unavailable at this time)", style="bold #b23a48")
    return text


def format_summary(state: BookingState) -> Text:
    """Render the review step: booking details, food order, payment."""
    selection = state.selection
    order = state.food_order
    text = Text()
    text.append("Booking Details\n", style="bold underline")
    text.append(f"Date:      {format_long_date(selection.date)}\n")
    text.append(f"Time:      {selection.time}\n")
    text.append(f"Duration:  {format_duration(selection.slot_length_hours)}\n")
    text.append(f"Seat:      {format_seat_name(selection.selected_seat)}\n")

    if not order.is_empty():
        text.append("\nFood Order\n", style="bold underline")
        for category in Category:
            category_lines = order.lines_for(category)
            if not category_lines:
                continue
            text.append(f"{category_label(category)}\n", style="bold")
            for line in category_lines:
                text.append(f"  {line.item.name} x{line.quantity}")
                text.append(f"  {format_price(line.line_total)}\n", style="dim")

    subtotal = ledger.subtotal(order)
    text.append("\nPayment Summary\n", style="bold underline")
    text.append(f"Food & Beverage Subtotal  {format_price(subtotal)}\n")
    text.append(f"Booking Fee               {format_price(BOOKING_FEE)}\n")
    text.append(f"Total                     {format_price(BOOKING_FEE + subtotal)}", style="bold")
    return text


def format_confirmation(state: BookingState) -> Text:
    selection = state.selection
    text = Text()
    text.append("✔ Booking Confirmed!\n\n", style="bold #5fbf72")
    text.append("Thank you for your booking!\n")
    text.append(f"We look forward to serving you on {format_long_date(selection.date)} at {selection.time}\n\n")
    text.append(f"Booking Reference: {state.reference}", style="bold")
    return text
