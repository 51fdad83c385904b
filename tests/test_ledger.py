"""Tests for food order bookkeeping."""

import pytest

from yuka import ledger
from yuka.models import Category, FoodOrder, MenuItem

AVOCADO = MenuItem(id="s1", name="Avocado Toast", price=180)
QUICHE = MenuItem(id="s4", name="Vegetable Quiche", price=190)
CAPPUCCINO = MenuItem(id="b1", name="Cappuccino", price=140)


class TestAddItem:
    def test_first_add_creates_line_with_quantity_one(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        assert len(order.savoury) == 1
        assert order.savoury[0].item == AVOCADO
        assert order.savoury[0].quantity == 1

    @pytest.mark.parametrize("times", [1, 2, 5])
    def test_repeated_adds_increment_single_line(self, times):
        order = FoodOrder()
        for _ in range(times):
            order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        assert len(order.savoury) == 1
        assert ledger.quantity_of(order, Category.SAVOURY, "s1") == times

    def test_new_lines_append_and_keep_existing_order(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.SAVOURY, QUICHE)
        order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        assert [line.item.id for line in order.savoury] == ["s1", "s4"]

    def test_add_does_not_mutate_input(self):
        empty = FoodOrder()
        ledger.add_item(empty, Category.BEVERAGE, CAPPUCCINO)
        assert empty.is_empty()

    def test_accepts_category_string(self):
        order = ledger.add_item(FoodOrder(), "beverage", CAPPUCCINO)
        assert ledger.line_count(order, Category.BEVERAGE) == 1

    def test_rejects_unknown_category(self):
        with pytest.raises(ValueError):
            ledger.add_item(FoodOrder(), "dessert", CAPPUCCINO)


class TestDecrementAndDelete:
    def test_decrement_quantity_times_removes_line(self):
        order = FoodOrder()
        for _ in range(3):
            order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        for _ in range(3):
            order = ledger.decrement_item(order, Category.SAVOURY, "s1")
        assert order.savoury == ()

        again = ledger.decrement_item(order, Category.SAVOURY, "s1")
        assert again == order

    def test_decrement_keeps_line_above_one(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        order = ledger.decrement_item(order, Category.SAVOURY, "s1")
        assert ledger.quantity_of(order, Category.SAVOURY, "s1") == 1

    def test_decrement_absent_is_noop(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        assert ledger.decrement_item(order, Category.SWEET, "s1") is order

    def test_delete_removes_regardless_of_quantity(self):
        order = FoodOrder()
        for _ in range(4):
            order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.SAVOURY, QUICHE)
        order = ledger.delete_item(order, Category.SAVOURY, "s1")
        assert [line.item.id for line in order.savoury] == ["s4"]

    def test_delete_absent_is_noop(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        assert ledger.delete_item(order, Category.SAVOURY, "s9") is order


class TestCountsAndSubtotal:
    def test_line_count_counts_distinct_lines(self):
        order = FoodOrder()
        for _ in range(3):
            order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.SAVOURY, QUICHE)
        assert ledger.line_count(order, Category.SAVOURY) == 2
        assert ledger.line_count(order, Category.SWEET) == 0

    def test_total_line_count_spans_categories(self):
        order = ledger.add_item(FoodOrder(), Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.BEVERAGE, CAPPUCCINO)
        order = ledger.add_item(order, Category.BEVERAGE, CAPPUCCINO)
        assert ledger.total_line_count(order) == 2

    def test_subtotal_sums_price_times_quantity(self):
        order = ledger.add_item(FoodOrder(), Category.BEVERAGE, CAPPUCCINO)
        order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        assert ledger.subtotal(order) == 140 + 2 * 180

    def test_empty_subtotal_is_zero(self):
        assert ledger.subtotal(FoodOrder()) == 0

    def test_lines_yield_in_category_order(self):
        order = ledger.add_item(FoodOrder(), Category.BEVERAGE, CAPPUCCINO)
        order = ledger.add_item(order, Category.SAVOURY, AVOCADO)
        assert [category for category, _ in ledger.lines(order)] == [Category.SAVOURY, Category.BEVERAGE]
