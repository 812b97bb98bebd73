"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordersim.application.backend_gateway import BackendGateway, NullBackendGateway
from ordersim.application.order_service import OrderService
from ordersim.domain.model.history import HistoryStore
from ordersim.domain.service.lifecycle_simulator import LifecycleSimulator
from ordersim.domain.service.order_factory import OrderFactory
from ordersim.infrastructure.backend.http_backend_gateway import HttpBackendGateway
from ordersim.infrastructure.persistence.json_snapshot_storage import (
    JsonSnapshotStorage,
)
from ordersim.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler
from ordersim.infrastructure.settings import Settings


@dataclass
class Application:
    store: HistoryStore
    scheduler: AsyncioScheduler
    backend: BackendGateway
    service: OrderService

    async def settle(self) -> None:
        """Let scheduled transitions and in-flight notifications finish."""
        await self.scheduler.drain()
        await self.backend.wait_closed()


def history_store(settings: Settings) -> HistoryStore:
    return HistoryStore(JsonSnapshotStorage(settings.data_dir))


def backend_gateway(settings: Settings) -> BackendGateway:
    if not settings.backend_enabled:
        return NullBackendGateway()
    return HttpBackendGateway(settings.backend_url, settings.backend_timeout_seconds)


def build_application(settings: Settings) -> Application:
    """Assemble the full pipeline. Must be called with an event loop running."""
    store = history_store(settings)
    scheduler = AsyncioScheduler()
    backend = backend_gateway(settings)
    simulator = LifecycleSimulator(store, scheduler)
    for order in store.load_all():
        if not order.status.is_terminal:
            simulator.resume(order)
    service = OrderService(
        factory=OrderFactory(),
        store=store,
        simulator=simulator,
        backend=backend,
    )
    return Application(store=store, scheduler=scheduler, backend=backend, service=service)
