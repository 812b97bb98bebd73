"""Domain service: Lifecycle Simulator.

Stands in for a message-queue backend.  Once started for an order it drives
two time-triggered transitions:

  t + 1s  PENDING    -> PROCESSING   (the processor picked the message up)
  t + 3s  PROCESSING -> COMPLETED    (acked onto ``orders-processed``, p=0.9)
                     -> FAILED       (routed to ``orders-dlq``, p=0.1)

Both transitions are posted to the history store as ``StatusChange`` events.
If the order has been evicted from the store in the meantime the event is
dropped; nothing is ever re-inserted.  Orders a previous run left PENDING or
PROCESSING are picked up again with ``resume``.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import partial

from ordersim.domain.model.history import HistoryStore
from ordersim.domain.model.order import Order, OrderStatus, StatusChange

logger = logging.getLogger(__name__)

PROCESSING_DELAY_SECONDS = 1.0
COMPLETION_DELAY_SECONDS = 3.0
SUCCESS_PROBABILITY = 0.9

PROCESSED_TOPIC = "orders-processed"
DEAD_LETTER_TOPIC = "orders-dlq"


class Scheduler(ABC):

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        """Run *callback* once, *delay* seconds from now, on the scheduler's thread."""


class LifecycleSimulator:

    def __init__(
        self,
        store: HistoryStore,
        scheduler: Scheduler,
        rng: random.Random | None = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._rng = rng or random.Random()

    def start(self, order_id: str) -> None:
        """Schedule both transitions for *order_id*. There is no way to cancel them."""
        logger.debug("Simulating pipeline for order %s", order_id)
        self._scheduler.call_later(
            PROCESSING_DELAY_SECONDS,
            partial(self._post, StatusChange(order_id, OrderStatus.PROCESSING)),
        )
        self._scheduler.call_later(
            COMPLETION_DELAY_SECONDS, partial(self._finish, order_id)
        )

    def resume(self, order: Order) -> None:
        """Reschedule the outstanding transitions of an order loaded mid-pipeline."""
        if order.status is OrderStatus.PENDING:
            self.start(order.id)
        elif order.status is OrderStatus.PROCESSING:
            logger.debug("Resuming order %s at the outcome draw", order.id)
            self._scheduler.call_later(
                COMPLETION_DELAY_SECONDS - PROCESSING_DELAY_SECONDS,
                partial(self._finish, order.id),
            )

    def draw_outcome(self) -> OrderStatus:
        """One Bernoulli trial: COMPLETED with probability SUCCESS_PROBABILITY."""
        if self._rng.random() < SUCCESS_PROBABILITY:
            return OrderStatus.COMPLETED
        return OrderStatus.FAILED

    # --- Scheduled callbacks --------------------------------------------------

    def _finish(self, order_id: str) -> None:
        self._post(StatusChange(order_id, self.draw_outcome()))

    def _post(self, change: StatusChange) -> None:
        if not self._store.apply(change):
            logger.debug(
                "Order %s left the history before %s; dropping transition",
                change.order_id,
                change.status.value,
            )
            return

        if change.status is OrderStatus.PROCESSING:
            logger.info("Order %s is being processed", change.order_id)
        elif change.status is OrderStatus.COMPLETED:
            logger.info("Order %s processed -> %s", change.order_id, PROCESSED_TOPIC)
        else:
            logger.warning(
                "Order %s failed -> dead letter %s", change.order_id, DEAD_LETTER_TOPIC
            )
