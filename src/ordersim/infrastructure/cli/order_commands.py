"""CLI commands for orders and their history."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import click

from ordersim.application.dto import OrderInput
from ordersim.application.order_service import OrderService
from ordersim.application.show_history import ShowHistoryHandler
from ordersim.domain.exceptions import DomainException, ValidationError
from ordersim.domain.model.order import Order
from ordersim.infrastructure.bootstrap import build_application, history_store
from ordersim.infrastructure.cli.render import render_history, render_table
from ordersim.infrastructure.settings import Settings


async def _run_pipeline(
    settings: Settings,
    action: Callable[[OrderService], list[Order]],
) -> list[Order]:
    app = build_application(settings)
    app.store.subscribe(render_history)
    orders = action(app.service)
    await app.settle()
    return orders


def _fail(exc: DomainException) -> click.ClickException:
    if isinstance(exc, ValidationError) and exc.reason is not None:
        return click.ClickException(f"{exc.reason.value}: {exc}")
    return click.ClickException(str(exc))


@click.command("submit")
@click.option("--customer", required=True, help="Customer ID, e.g. CUST-001.")
@click.option("--items", required=True, help="Items as 'Laptop, Mouse'.")
@click.option("--amount", required=True, help="Total amount (0.01 to 10000).")
@click.pass_obj
def order_submit(
    settings: Settings, customer: str, items: str, amount: str
) -> None:
    """Submit an order and simulate its processing."""
    order_input = OrderInput(customer_id=customer, items_text=items, amount=amount)

    try:
        (order,) = asyncio.run(
            _run_pipeline(settings, lambda svc: [svc.submit(order_input)])
        )
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order {order.id}: {order.status.value}")


@click.command("generate")
@click.option("--count", default=1, show_default=True, type=click.IntRange(1, 50),
              help="Number of random orders.")
@click.pass_obj
def order_generate(settings: Settings, count: int) -> None:
    """Generate random orders and simulate their processing."""
    try:
        orders = asyncio.run(
            _run_pipeline(
                settings, lambda svc: [svc.generate() for _ in range(count)]
            )
        )
    except DomainException as exc:
        raise _fail(exc)

    for order in orders:
        click.echo(f"Order {order.id}: {order.status.value}")


@click.command("history")
@click.pass_obj
def order_history(settings: Settings) -> None:
    """Show the most recent orders."""
    handler = ShowHistoryHandler(history_store(settings))
    render_table(handler.handle())
