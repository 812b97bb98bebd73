import click

from ordersim.infrastructure.cli.order_commands import (
    order_generate,
    order_history,
    order_submit,
)
from ordersim.infrastructure.logging_config import configure_logging
from ordersim.infrastructure.settings import load_settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override ORDERSIM_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """ordersim: simulated order-processing pipeline"""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Submit, generate and list orders."""


# Register subcommands
order.add_command(order_submit)
order.add_command(order_generate)
order.add_command(order_history)
