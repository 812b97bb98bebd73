"""Domain service: Order Factory.

Builds well-formed PENDING orders either from what a customer typed or
from random data, so that an invalid Order is never constructed.
"""

from __future__ import annotations

import random
import uuid
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from ordersim.domain.exceptions import ValidationError, ValidationReason
from ordersim.domain.model.order import Order, now_ms
from ordersim.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_ORDER_AMOUNT = Decimal("0.01")
MAX_ORDER_AMOUNT = Decimal("10000.00")
ITEM_DELIMITER = ","

CATALOG: tuple[str, ...] = (
    "Laptop",
    "Mouse",
    "Keyboard",
    'Monitor 27"',
    "Headset",
    "HD Webcam",
    "USB Hub",
    "SSD 1TB",
    "RAM 16GB",
    "HDMI Cable",
    "Printer",
    "Scanner",
    "Tablet",
    "Smartphone",
    "Charger",
)


def parse_items(raw: str, delimiter: str = ITEM_DELIMITER) -> list[str]:
    """Parse 'Laptop, , Mouse,' into ['Laptop', 'Mouse']."""
    return [token.strip() for token in raw.split(delimiter) if token.strip()]


def _new_order_id() -> str:
    return str(uuid.uuid4())


class OrderFactory:

    def __init__(
        self,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] = _new_order_id,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._rng = rng or random.Random()
        self._id_factory = id_factory
        self._clock = clock

    def create_from_input(
        self,
        customer_id: str,
        raw_items_text: str,
        amount: str | float | int | Decimal,
    ) -> Order:
        """Build an order from submitted fields.

        The amount is checked before the items, so a submission that is
        wrong on both counts reports AmountOutOfRange.
        """
        total = self._checked_amount(amount)

        items = parse_items(raw_items_text)
        if not items:
            raise ValidationError(
                "Please add at least one item", ValidationReason.NO_ITEMS
            )

        return Order.create(
            order_id=self._id_factory(),
            customer_id=customer_id,
            items=items,
            total_amount=total,
            timestamp=self._clock(),
        )

    def create_random(self) -> Order:
        """Build a synthetic order: 1-3 catalog items, amount in [10, 510)."""
        count = self._rng.randint(1, 3)
        items: list[str] = []
        for _ in range(count):
            item = self._rng.choice(CATALOG)
            if item not in items:
                items.append(item)

        amount = Money.of(self._rng.random() * 500 + 10).rounded()

        return Order.create(
            order_id=self._id_factory(),
            customer_id=f"CUST-{self._rng.randrange(1000)}",
            items=items,
            total_amount=amount,
            timestamp=self._clock(),
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _checked_amount(amount: str | float | int | Decimal) -> Money:
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError):
            value = None
        if value is None or not value.is_finite() or not (
            MIN_ORDER_AMOUNT <= value <= MAX_ORDER_AMOUNT
        ):
            raise ValidationError(
                f"Amount must be between {MIN_ORDER_AMOUNT}€ and "
                f"{MAX_ORDER_AMOUNT}€, got {amount!r}",
                ValidationReason.AMOUNT_OUT_OF_RANGE,
            )
        return Money(value)
