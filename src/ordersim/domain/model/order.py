"""Order entity and its lifecycle.

An order moves through a short pipeline:

    PENDING -> PROCESSING -> COMPLETED
                          -> FAILED

COMPLETED corresponds to a message acknowledged onto the success topic,
FAILED to a message routed to the dead-letter topic.  Status never regresses.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from ordersim.domain.exceptions import InvalidTransitionError, ValidationError
from ordersim.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.FAILED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.FAILED: frozenset(),
}


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class Order:
    """A unit of work flowing through the simulated pipeline.

    Use ``Order.create()`` for new orders.  The ``__init__`` is intentionally
    simple so the history store can reconstitute persisted orders without
    re-validating them.
    """

    id: str
    customer_id: str
    items: list[str]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    timestamp: int = field(default_factory=now_ms)

    @staticmethod
    def create(
        order_id: str,
        customer_id: str,
        items: list[str],
        total_amount: Money,
        timestamp: int | None = None,
    ) -> Order:
        """Create a new PENDING order, enforcing the entity invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=order_id,
            customer_id=customer_id,
            items=list(items),
            total_amount=total_amount,
            timestamp=now_ms() if timestamp is None else timestamp,
        )

    # --- State transitions ----------------------------------------------------

    def can_advance_to(self, new_status: OrderStatus) -> bool:
        return new_status in _ALLOWED_TRANSITIONS[self.status]

    def advance_to(self, new_status: OrderStatus) -> None:
        """Move along a legal lifecycle edge, raising on anything else."""
        if not self.can_advance_to(new_status):
            raise InvalidTransitionError(
                f"Cannot move order {self.id} from {self.status.value} "
                f"to {new_status.value}"
            )
        self.status = new_status


@dataclass(frozen=True)
class StatusChange:
    """A request to move one order to a new status.

    Scheduled transitions post these to the history store instead of
    touching the order list themselves.
    """

    order_id: str
    status: OrderStatus
