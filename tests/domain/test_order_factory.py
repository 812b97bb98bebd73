"""Unit tests for the OrderFactory domain service."""

import random
import uuid
from decimal import Decimal

import pytest

from ordersim.domain.exceptions import ValidationError, ValidationReason
from ordersim.domain.model.order import OrderStatus
from ordersim.domain.model.value_objects import Money
from ordersim.domain.service.order_factory import CATALOG, OrderFactory, parse_items


def _factory(seed: int = 7) -> OrderFactory:
    return OrderFactory(rng=random.Random(seed), clock=lambda: 1_700_000_000_000)


class TestParseItems:

    def test_blank_tokens_dropped(self):
        assert parse_items("Laptop, , Mouse,") == ["Laptop", "Mouse"]

    def test_only_blanks(self):
        assert parse_items(" , , ") == []

    def test_duplicates_kept(self):
        assert parse_items("Mouse,Mouse") == ["Mouse", "Mouse"]


class TestCreateFromInput:

    def test_scenario(self):
        order = _factory().create_from_input("CUST-1", "Laptop, Mouse", 99.99)
        assert order.status == OrderStatus.PENDING
        assert order.items == ["Laptop", "Mouse"]
        assert order.total_amount == Money(Decimal("99.99"))
        assert order.customer_id == "CUST-1"
        assert order.timestamp == 1_700_000_000_000

    def test_id_is_uuid4(self):
        order = _factory().create_from_input("CUST-1", "Laptop", "10")
        assert uuid.UUID(order.id).version == 4

    def test_ids_are_unique(self):
        factory = _factory()
        ids = {factory.create_from_input("C", "Laptop", "10").id for _ in range(200)}
        assert len(ids) == 200

    @pytest.mark.parametrize("amount", ["0.01", "10000.00", 10000, "5000"])
    def test_amount_bounds_accepted(self, amount):
        order = _factory().create_from_input("CUST-1", "Laptop", amount)
        assert order.total_amount.amount == Decimal(str(amount))

    @pytest.mark.parametrize("amount", [0, "0.009", "10000.01", -5, "abc", "NaN", "Infinity"])
    def test_amount_out_of_range_rejected(self, amount):
        with pytest.raises(ValidationError) as excinfo:
            _factory().create_from_input("CUST-1", "Laptop", amount)
        assert excinfo.value.reason is ValidationReason.AMOUNT_OUT_OF_RANGE

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            _factory().create_from_input("CUST-1", " , , ", "10")
        assert excinfo.value.reason is ValidationReason.NO_ITEMS

    def test_amount_checked_before_items(self):
        with pytest.raises(ValidationError) as excinfo:
            _factory().create_from_input("CUST-1", "", "0")
        assert excinfo.value.reason is ValidationReason.AMOUNT_OUT_OF_RANGE


class TestCreateRandom:

    def test_always_well_formed(self):
        factory = _factory(seed=123)
        for _ in range(500):
            order = factory.create_random()
            assert 1 <= len(order.items) <= 3
            assert len(set(order.items)) == len(order.items)
            assert all(item in CATALOG for item in order.items)
            assert Decimal("10") <= order.total_amount.amount <= Decimal("510")
            assert order.total_amount.amount == order.total_amount.amount.quantize(
                Decimal("0.01")
            )
            assert order.customer_id.startswith("CUST-")
            assert 0 <= int(order.customer_id.removeprefix("CUST-")) < 1000
            assert order.status == OrderStatus.PENDING

    def test_uses_injected_id_factory(self):
        factory = OrderFactory(rng=random.Random(1), id_factory=lambda: "fixed-id")
        assert factory.create_random().id == "fixed-id"
