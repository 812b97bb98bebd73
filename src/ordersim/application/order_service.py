"""Application service: submit and generate orders.

Orchestrates the flow between the factory, the history store, the
lifecycle simulator and the backend gateway.  The local simulation always
proceeds as if the order had been queued, whatever happens to the backend
notification.
"""

from __future__ import annotations

import logging

from ordersim.application.backend_gateway import BackendGateway
from ordersim.application.dto import OrderInput, to_payload
from ordersim.domain.model.history import HistoryStore
from ordersim.domain.model.order import Order
from ordersim.domain.service.lifecycle_simulator import LifecycleSimulator
from ordersim.domain.service.order_factory import OrderFactory

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(
        self,
        factory: OrderFactory,
        store: HistoryStore,
        simulator: LifecycleSimulator,
        backend: BackendGateway,
    ) -> None:
        self._factory = factory
        self._store = store
        self._simulator = simulator
        self._backend = backend

    def submit(self, order_input: OrderInput) -> Order:
        """Create an order from user input and start its simulated processing.

        Raises ValidationError, leaving the history untouched, when the
        input is rejected.
        """
        order = self._factory.create_from_input(
            order_input.customer_id, order_input.items_text, order_input.amount
        )
        self._enqueue(order)
        return order

    def generate(self) -> Order:
        """Create a random order and start its simulated processing."""
        order = self._factory.create_random()
        self._enqueue(order)
        return order

    def _enqueue(self, order: Order) -> None:
        self._store.insert(order)
        self._simulator.start(order.id)
        self._backend.notify(to_payload(order))
        logger.info(
            "Order %s queued for %s (%s)", order.id, order.customer_id, order.total_amount
        )
