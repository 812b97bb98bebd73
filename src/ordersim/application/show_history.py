"""Application service: Show History use case (query)."""

from __future__ import annotations

from ordersim.application.dto import OrderDTO, to_dto
from ordersim.domain.model.history import HistoryStore


class ShowHistoryHandler:

    def __init__(self, store: HistoryStore) -> None:
        self._store = store

    def handle(self) -> list[OrderDTO]:
        return [to_dto(order) for order in self._store.load_all()]
