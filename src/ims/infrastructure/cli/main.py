import click

from ims.infrastructure.bootstrap import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_LOG_LEVEL,
    Settings,
    inventory_manager,
)
from ims.infrastructure.cli.menu import run_menu
from ims.infrastructure.logging import VALID_LOG_LEVELS, setup_logging


@click.command()
@click.option(
    "--currency-symbol",
    default=DEFAULT_CURRENCY_SYMBOL,
    show_default=True,
    envvar="IMS_CURRENCY_SYMBOL",
    help="Symbol shown in front of prices and totals.",
)
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar="IMS_LOG_LEVEL",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    help="Diagnostics written to stderr.",
)
def cli(currency_symbol: str, log_level: str) -> None:
    """IMS: Inventory Management System"""
    settings = Settings(currency_symbol=currency_symbol, log_level=log_level.upper())
    setup_logging(settings.log_level)
    run_menu(inventory_manager(), settings)
