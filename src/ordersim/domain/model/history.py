"""HistoryStore aggregate: the bounded list of recent orders.

The store is the single source of truth the rest of the system reads and
writes.  It keeps at most ``capacity`` orders, newest first, and evicts the
oldest entry when a new one pushes it over the limit.  Every mutation
rewrites the whole snapshot through the injected storage and then notifies
observers with the full ordered list.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from decimal import Decimal, InvalidOperation

from ordersim.domain.exceptions import (
    PersistenceUnavailable,
    ValidationError,
    ValidationReason,
)
from ordersim.domain.model.order import Order, OrderStatus, StatusChange
from ordersim.domain.model.value_objects import Money
from ordersim.domain.repository.snapshot_storage import SnapshotStorage

logger = logging.getLogger(__name__)

HISTORY_KEY = "order-history"
MAX_ORDERS = 10

Observer = Callable[[Sequence[Order]], None]

_BAD_RECORD = (ValueError, KeyError, TypeError, InvalidOperation, ValidationError)


class HistoryStore:

    def __init__(
        self,
        storage: SnapshotStorage,
        key: str = HISTORY_KEY,
        capacity: int = MAX_ORDERS,
    ) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._storage = storage
        self._key = key
        self._capacity = capacity
        self._observers: list[Observer] = []
        self._orders: list[Order] = self._load()

    # --- Queries --------------------------------------------------------------

    def load_all(self) -> list[Order]:
        """Return the current orders, most recently inserted first."""
        return self._orders

    def get(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def __len__(self) -> int:
        return len(self._orders)

    @property
    def capacity(self) -> int:
        return self._capacity

    # --- Mutations ------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        """Register a callable invoked with the full order list after each mutation."""
        self._observers.append(observer)

    def insert(self, order: Order) -> None:
        """Prepend *order*, evicting the oldest entry beyond capacity."""
        self._orders.insert(0, order)
        while len(self._orders) > self._capacity:
            evicted = self._orders.pop()
            logger.debug("Evicted order %s from history", evicted.id)
        self._commit()

    def update_status(self, order_id: str, new_status: OrderStatus) -> bool:
        """Advance the status of an order in place.

        Returns False when the order is no longer held (evicted); that is
        a normal outcome, not an error.
        """
        order = self.get(order_id)
        if order is None:
            return False
        order.advance_to(new_status)
        self._commit()
        return True

    def apply(self, change: StatusChange) -> bool:
        """Entry point for status changes posted by scheduled transitions."""
        return self.update_status(change.order_id, change.status)

    # --- Persistence ----------------------------------------------------------

    def _commit(self) -> None:
        self._persist()
        for observer in self._observers:
            observer(self._orders)

    def _persist(self) -> None:
        snapshot = json.dumps([self._to_raw(o) for o in self._orders], indent=2)
        try:
            self._storage.write(self._key, snapshot)
        except PersistenceUnavailable as exc:
            # In-memory state stays authoritative for this process.
            logger.warning("Could not persist order history: %s", exc)

    def _load(self) -> list[Order]:
        try:
            snapshot = self._storage.read(self._key)
        except PersistenceUnavailable as exc:
            logger.warning("Could not read order history, starting empty: %s", exc)
            return []
        if snapshot is None:
            return []
        try:
            records = json.loads(snapshot)
        except ValueError as exc:
            logger.warning("Discarding unreadable order history: %s", exc)
            return []
        if not isinstance(records, list):
            logger.warning("Discarding unreadable order history: not a list of orders")
            return []

        orders = []
        for raw in records[: self._capacity]:
            try:
                orders.append(self._to_domain(raw))
            except _BAD_RECORD as exc:
                logger.warning("Skipping unreadable order record: %s", exc)
        return orders

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customerId": order.customer_id,
            "items": list(order.items),
            "totalAmount": str(order.total_amount.amount),
            "status": order.status.value,
            "timestamp": order.timestamp,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = raw["items"]
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise TypeError(f"items of order {raw['id']} is not a list of names")
        if not items:
            raise ValidationError(
                f"Order {raw['id']} has no items", ValidationReason.NO_ITEMS
            )
        return Order(
            id=raw["id"],
            customer_id=raw["customerId"],
            items=list(items),
            total_amount=Money(Decimal(str(raw["totalAmount"]))),
            status=OrderStatus(raw["status"]),
            timestamp=int(raw["timestamp"]),
        )
