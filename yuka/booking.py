"""Booking wizard state machine and the store that owns it.

Transitions are plain functions from one ``BookingState`` to the next and
raise a ``BookingError`` when an intent is not allowed. ``BookingStore``
holds the current snapshot, applies intents, and tells listeners about
every change.
"""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import date
from typing import Callable, Mapping

from yuka import ledger, schedule, seating
from yuka.config import (
    BOOKING_FEE,
    BOOKING_REFERENCE_LENGTH,
    BOOKING_REFERENCE_PREFIX,
    DEFAULT_SLOT_LENGTH_HOURS,
    DEFAULT_TIME,
)
from yuka.data import UNAVAILABLE_SEATS
from yuka.errors import BookingError, InvalidTransitionError, NoSeatSelectedError
from yuka.logging_setup import get_logger
from yuka.models import BookingSelection, BookingState, Category, FoodOrder, MenuItem, WizardStep

logger = get_logger(__name__)

ReferenceGenerator = Callable[[], str]
Listener = Callable[[BookingState], None]

_BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def random_reference(rng: random.Random | None = None) -> str:
    """Generate ``YK-`` plus eight uppercase base-36 characters.

    References are not checked against earlier ones.
    """
    chooser = rng or random
    suffix = "".join(chooser.choices(_BASE36_ALPHABET, k=BOOKING_REFERENCE_LENGTH))
    return f"{BOOKING_REFERENCE_PREFIX}{suffix}"


def total_price(order: FoodOrder) -> int:
    """Booking fee plus the food subtotal."""
    return BOOKING_FEE + ledger.subtotal(order)


def new_booking(today: date) -> BookingState:
    selection = BookingSelection(
        date=today,
        time=DEFAULT_TIME,
        slot_length_hours=DEFAULT_SLOT_LENGTH_HOURS,
    )
    return BookingState(selection=selection)


def _require_step(state: BookingState, step: WizardStep, action: str) -> None:
    if state.step is not step:
        raise InvalidTransitionError(action, state.step)


def advance(state: BookingState) -> BookingState:
    """Selecting -> Reviewing, only once a seat is chosen."""
    _require_step(state, WizardStep.SELECTING, "advance")
    if state.selection.selected_seat is None:
        raise NoSeatSelectedError()
    return replace(state, step=WizardStep.REVIEWING)


def back(state: BookingState) -> BookingState:
    _require_step(state, WizardStep.REVIEWING, "go back")
    return replace(state, step=WizardStep.SELECTING)


def confirm(state: BookingState, generate_reference: ReferenceGenerator = random_reference) -> BookingState:
    _require_step(state, WizardStep.REVIEWING, "confirm")
    return replace(state, step=WizardStep.CONFIRMED, reference=generate_reference())


def reset_for_new_booking(state: BookingState) -> BookingState:
    """Confirmed -> Selecting with an empty order and no seat.

    Date, time and slot length carry over to the next booking.
    """
    _require_step(state, WizardStep.CONFIRMED, "book another")
    selection = replace(state.selection, selected_seat=None)
    return replace(
        state,
        step=WizardStep.SELECTING,
        selection=selection,
        food_order=FoodOrder(),
        reference=None,
    )


class BookingStore:
    """Single owner of one booking session's state."""

    def __init__(
        self,
        today: Callable[[], date] = date.today,
        generate_reference: ReferenceGenerator = random_reference,
        availability: Mapping[str, frozenset[str]] = UNAVAILABLE_SEATS,
    ) -> None:
        self._today = today
        self._generate_reference = generate_reference
        self.availability = availability
        self._state = new_booking(today())
        self._listeners: list[Listener] = []

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def total(self) -> int:
        return total_price(self._state.food_order)

    @property
    def subtotal(self) -> int:
        return ledger.subtotal(self._state.food_order)

    def today(self) -> date:
        return self._today()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def is_seat_available(self, seat_id: str) -> bool:
        return seating.is_available(seat_id, self._state.selection.time, self.availability)

    # Selection intents

    def select_seat(self, seat_id: str) -> bool:
        return self._update_selection(
            f"select_seat seat={seat_id}",
            lambda selection: seating.select_seat(selection, seat_id, self.availability),
        )

    def set_date(self, day: date) -> bool:
        return self._update_selection(
            f"set_date date={day.isoformat()}",
            lambda selection: schedule.set_date(selection, day, self._today()),
        )

    def set_time(self, time: str) -> bool:
        return self._update_selection(
            f"set_time time={time}",
            lambda selection: schedule.set_time(selection, time),
        )

    def set_slot_length(self, hours: int) -> bool:
        return self._update_selection(
            f"set_slot_length hours={hours}",
            lambda selection: schedule.set_slot_length(selection, hours),
        )

    # Food order intents

    def add_item(self, category: Category, item: MenuItem) -> bool:
        return self._update_order(
            f"add_item category={Category.parse(category).value} item={item.id}",
            lambda order: ledger.add_item(order, category, item),
        )

    def decrement_item(self, category: Category, item_id: str) -> bool:
        return self._update_order(
            f"decrement_item category={Category.parse(category).value} item={item_id}",
            lambda order: ledger.decrement_item(order, category, item_id),
        )

    def delete_item(self, category: Category, item_id: str) -> bool:
        return self._update_order(
            f"delete_item category={Category.parse(category).value} item={item_id}",
            lambda order: ledger.delete_item(order, category, item_id),
        )

    # Wizard intents

    def advance(self) -> bool:
        return self._dispatch("advance", advance)

    def back(self) -> bool:
        return self._dispatch("back", back)

    def confirm(self) -> bool:
        return self._dispatch("confirm", lambda state: confirm(state, self._generate_reference))

    def reset_for_new_booking(self) -> bool:
        return self._dispatch("reset_for_new_booking", reset_for_new_booking)

    def clear_notice(self) -> None:
        if self._state.notice is None:
            return
        self._state = replace(self._state, notice=None)
        self._notify()

    def _update_selection(self, action: str, change: Callable[[BookingSelection], BookingSelection]) -> bool:
        def transition(state: BookingState) -> BookingState:
            _require_step(state, WizardStep.SELECTING, action.split(" ", 1)[0])
            return replace(state, selection=change(state.selection))

        return self._dispatch(action, transition)

    def _update_order(self, action: str, change: Callable[[FoodOrder], FoodOrder]) -> bool:
        def transition(state: BookingState) -> BookingState:
            _require_step(state, WizardStep.SELECTING, action.split(" ", 1)[0])
            return replace(state, food_order=change(state.food_order))

        return self._dispatch(action, transition)

    def _dispatch(self, action: str, transition: Callable[[BookingState], BookingState]) -> bool:
        try:
            next_state = transition(self._state)
        except BookingError as exc:
            logger.info("intent_rejected action=%s reason=%r", action, str(exc))
            self._state = replace(self._state, notice=str(exc))
            self._notify()
            return False

        self._state = replace(next_state, notice=None)
        logger.debug(
            "intent_applied action=%s step=%s total=%d",
            action,
            self._state.step,
            total_price(self._state.food_order),
        )
        if self._state.step is WizardStep.CONFIRMED and self._state.reference:
            logger.info("booking_confirmed reference=%s seat=%s", self._state.reference, self._state.selection.selected_seat)
        self._notify()
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
