"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI, the application layer and the backend
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ordersim.domain.model.order import Order

_STATUS_ICONS = {
    "PENDING": "⏳",
    "PROCESSING": "🔄",
    "COMPLETED": "✅",
    "FAILED": "❌",
}


@dataclass(frozen=True)
class OrderInput:
    """Input: what the customer typed into the order form."""

    customer_id: str
    items_text: str  # comma-separated, e.g. "Laptop, Mouse"
    amount: str | float | int | Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to the user."""

    id: str
    short_id: str
    customer_id: str
    status: str
    status_label: str
    items: str
    total: str  # formatted, e.g. "99.99€"
    time: str


def to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        short_id=f"#{order.id[:8]}...",
        customer_id=order.customer_id,
        status=order.status.value,
        status_label=f"{_STATUS_ICONS.get(order.status.value, '?')} {order.status.value}",
        items=", ".join(order.items),
        total=str(order.total_amount),
        time=datetime.fromtimestamp(order.timestamp / 1000).strftime("%H:%M:%S"),
    )


def to_payload(order: Order) -> dict:
    """Serialize *order* the way the backend's ``POST /api/orders`` expects it."""
    return {
        "id": order.id,
        "customerId": order.customer_id,
        "items": list(order.items),
        "totalAmount": float(order.total_amount.amount),
        "status": order.status.value,
        "timestamp": order.timestamp,
    }
