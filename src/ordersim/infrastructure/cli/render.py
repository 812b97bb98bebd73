"""Terminal rendering of the order history."""

from __future__ import annotations

from collections.abc import Sequence

import click

from ordersim.application.dto import OrderDTO, to_dto
from ordersim.domain.model.order import Order


def render_table(orders: Sequence[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders yet. Submit or generate one to get started.")
        return

    click.echo(
        f"  {'Order':<13} {'Status':<15} {'Customer':<12} {'Amount':>10} {'Time':>9}  Items"
    )
    click.echo(f"  {'-'*80}")
    for dto in orders:
        click.echo(
            f"  {dto.short_id:<13} {dto.status_label:<15} {dto.customer_id:<12} "
            f"{dto.total:>10} {dto.time:>9}  {dto.items}"
        )
    click.echo()


def render_history(orders: Sequence[Order]) -> None:
    """HistoryStore observer: redraw the table after every mutation."""
    render_table([to_dto(order) for order in orders])
