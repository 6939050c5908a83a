"""Unit tests for OrderItem, the line entity owned by Order."""

import dataclasses

import pytest

from storefront.domain.exceptions import ProgrammingError
from storefront.domain.model.order import OrderItem
from storefront.domain.model.value_objects import Money
from tests.builders import product


def _make_item(qty: int = 1, price: str = "15.00") -> OrderItem:
    return OrderItem(product_id=1, product_name="Widget", unit_price=Money.of(price), quantity=qty)


class TestOrderItem:

    def test_create_snapshots_product(self):
        lamp = product(9, price="42.50", name="Lamp")
        item = OrderItem.create(lamp, 2)
        assert (item.product_id, item.product_name, item.unit_price, item.quantity) == (
            9, "Lamp", Money.of("42.50"), 2,
        )

    def test_subtotal_is_computed(self):
        item = _make_item(qty=3, price="15.00")
        assert item.subtotal == Money.of("45.00")
        assert item.increment_quantity(1).subtotal == Money.of("60.00")

    def test_increment_returns_new_line(self):
        item = _make_item(qty=3)
        bigger = item.increment_quantity(4)
        assert bigger.quantity == 7
        assert item.quantity == 3
        assert (bigger.product_id, bigger.product_name, bigger.unit_price) == (
            item.product_id, item.product_name, item.unit_price,
        )

    def test_fields_cannot_be_reassigned(self):
        item = _make_item(qty=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.quantity = 5000  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.unit_price = Money.of("0.01")  # type: ignore[misc]
        assert item.quantity == 3

    @pytest.mark.parametrize("additional", [0, -2])
    def test_non_positive_increment_is_a_programming_error(self, additional):
        item = _make_item(qty=3)
        with pytest.raises(ProgrammingError, match="positive"):
            item.increment_quantity(additional)
        assert item.quantity == 3

    def test_increment_past_999_is_a_programming_error(self):
        item = _make_item(qty=990)
        with pytest.raises(ProgrammingError, match="999"):
            item.increment_quantity(10)
        assert item.quantity == 990
