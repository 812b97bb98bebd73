"""HTTP implementation of BackendGateway using requests.

``notify`` spawns a detached asyncio task that runs the blocking POST in a
worker thread.  Failures are logged and otherwise ignored; the local
simulation never waits on them.
"""

from __future__ import annotations

import asyncio
import logging

import requests

from ordersim.application.backend_gateway import BackendGateway
from ordersim.domain.exceptions import BackendUnreachable

logger = logging.getLogger(__name__)

ORDERS_PATH = "/api/orders"


class HttpBackendGateway(BackendGateway):

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + ORDERS_PATH
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._tasks: set[asyncio.Task] = set()

    # --- BackendGateway interface ---------------------------------------------

    def notify(self, payload: dict) -> None:
        task = asyncio.get_running_loop().create_task(self._send(payload))
        # Hold a reference until done so the task is not garbage collected.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_closed(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks)

    # --- Transport ------------------------------------------------------------

    async def _send(self, payload: dict) -> None:
        try:
            await asyncio.to_thread(self.post, payload)
        except BackendUnreachable as exc:
            logger.warning(
                "Backend did not accept order %s, continuing locally: %s",
                payload.get("id"),
                exc,
            )
        else:
            logger.debug("Backend accepted order %s", payload.get("id"))

    def post(self, payload: dict) -> None:
        """Blocking POST of one order payload."""
        try:
            response = self._session.post(self._url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise BackendUnreachable(f"POST {self._url} failed: {exc}") from exc
