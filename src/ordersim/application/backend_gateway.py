"""Abstract gateway to the remote order backend.

Notifications are fire-and-forget: ``notify`` returns immediately and the
outcome of the remote call never reaches the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BackendGateway(ABC):

    @abstractmethod
    def notify(self, payload: dict) -> None:
        """Dispatch *payload* to the backend without waiting for the result."""

    async def wait_closed(self) -> None:
        """Wait for notifications still in flight. Nothing to wait for by default."""


class NullBackendGateway(BackendGateway):
    """Used when no backend is configured; drops every notification."""

    def notify(self, payload: dict) -> None:
        return None
