"""Domain models for yuka booking."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Category(str, Enum):
    """Pre-order menu category."""

    SAVOURY = "savoury"
    SWEET = "sweet"
    BEVERAGE = "beverage"

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown menu category: {value!r}") from None


class WizardStep(str, Enum):
    SELECTING = "selecting"
    REVIEWING = "reviewing"
    CONFIRMED = "confirmed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MenuItem:
    """An orderable pre-order item."""

    id: str
    name: str
    price: int
    image: str = ""


@dataclass(frozen=True)
class OrderLine:
    """One distinct menu item with its quantity."""

    item: MenuItem
    quantity: int = 1

    @property
    def line_total(self) -> int:
        return self.item.price * self.quantity


@dataclass(frozen=True)
class FoodOrder:
    """Ordered lines per category; at most one line per item id in a category."""

    savoury: tuple[OrderLine, ...] = ()
    sweet: tuple[OrderLine, ...] = ()
    beverage: tuple[OrderLine, ...] = ()

    def lines_for(self, category: Category) -> tuple[OrderLine, ...]:
        return getattr(self, Category.parse(category).value)

    def is_empty(self) -> bool:
        return not (self.savoury or self.sweet or self.beverage)


@dataclass(frozen=True)
class BookingSelection:
    """Seat, date and time choices for one booking."""

    date: date
    time: str
    slot_length_hours: int = 1
    selected_seat: str | None = None


@dataclass(frozen=True)
class BookingState:
    """Snapshot of one booking session."""

    selection: BookingSelection
    step: WizardStep = WizardStep.SELECTING
    food_order: FoodOrder = field(default_factory=FoodOrder)
    reference: str | None = None
    notice: str | None = None
