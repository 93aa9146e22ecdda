"""Interactive menu loop: one action per inventory use case."""

from __future__ import annotations

import logging
from typing import Callable

import click

from ims.application.add_product import AddProductHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_inventory import ListProductsHandler, TotalValueHandler
from ims.application.update_product import UpdatePriceHandler
from ims.application.update_stock import UpdateStockHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.inventory import InventoryManager
from ims.infrastructure.bootstrap import Settings
from ims.infrastructure.cli.formatting import render_product_table
from ims.infrastructure.cli.prompts import (
    PromptCancelled,
    prompt_non_negative_int,
    prompt_price,
    prompt_product_name,
    prompt_quantity,
    show_cancel_banner,
)

logger = logging.getLogger(__name__)

TITLE = "🏪 Inventory Management System"
EMPTY_MESSAGE = "❌ Inventory is empty."


def add_product(inventory: InventoryManager, _settings: Settings) -> None:
    show_cancel_banner()
    name = prompt_product_name("Enter Product Name")
    quantity = prompt_quantity("Enter Quantity")
    price = prompt_price("Enter Price")

    dto = AddProductHandler(inventory).handle(name=name, quantity=quantity, price=price)
    click.echo(f"✅ Product '{dto.name}' added successfully with ID: {dto.id}.")


def remove_product(inventory: InventoryManager, _settings: Settings) -> None:
    show_cancel_banner()
    product_id = prompt_non_negative_int("Enter the Product ID")

    dto = RemoveProductHandler(inventory).handle(product_id)
    click.echo(f"✅ {dto.name} removed.")


def update_stock(inventory: InventoryManager, _settings: Settings) -> None:
    show_cancel_banner()
    product_id = prompt_non_negative_int("Enter the Product ID")
    new_quantity = prompt_quantity("Enter the new quantity")

    dto = UpdateStockHandler(inventory).handle(product_id, new_quantity)
    click.echo(f"✅ Updated {dto.name}, quantity: {dto.quantity}.")


def update_price(inventory: InventoryManager, settings: Settings) -> None:
    show_cancel_banner()
    product_id = prompt_non_negative_int("Enter the Product ID")
    new_price = prompt_price("Enter the new price")

    dto = UpdatePriceHandler(inventory).handle(product_id, new_price)
    click.echo(f"✅ Updated {dto.name}, price: {dto.price.format(settings.currency_symbol)}.")


def list_products(inventory: InventoryManager, settings: Settings) -> None:
    listing = ListProductsHandler(inventory).handle()

    if listing.is_empty:
        click.echo(EMPTY_MESSAGE)
        return

    click.echo()
    click.echo("📦 Inventory List:")
    for line in render_product_table(listing.products, settings.currency_symbol):
        click.echo(line)


def show_total_value(inventory: InventoryManager, settings: Settings) -> None:
    value = TotalValueHandler(inventory).handle()

    if value.is_empty:
        click.echo(EMPTY_MESSAGE)
    click.echo(f"✅ Total Inventory Value: {value.total.format(settings.currency_symbol)}")


Action = Callable[[InventoryManager, Settings], None]

# Menu number -> (label, action).  ``None`` marks the exit entry.
MENU: dict[int, tuple[str, Action | None]] = {
    1: ("Add Product", add_product),
    2: ("Remove Product", remove_product),
    3: ("Update Stock", update_stock),
    4: ("Update Price", update_price),
    5: ("Product List", list_products),
    6: ("Get Total Inventory Value", show_total_value),
    7: ("Exit", None),
}


def _show_menu() -> None:
    click.echo("=" * 31)
    click.echo(TITLE)
    click.echo("=" * 31)
    for number, (label, _) in MENU.items():
        click.echo(f"{number}. {label}")


def run_menu(inventory: InventoryManager, settings: Settings) -> None:
    """Loop over menu choices until Exit or end of input.

    Domain errors and cancelled prompts end only the current action.
    """
    while True:
        _show_menu()
        try:
            raw = click.prompt("Choose an option", default="", show_default=False)
            try:
                option = int(raw.strip())
            except ValueError:
                click.echo("❌ Invalid option")
                continue

            if option not in MENU:
                click.echo("❌ Invalid option. Please choose again.")
                continue

            label, action = MENU[option]
            if action is None:
                click.echo("Exiting...")
                return

            logger.debug("Menu action selected: %s", label)
            try:
                action(inventory, settings)
            except PromptCancelled:
                click.echo("🚫 Operation canceled. Returning to main menu.")
            except DomainException as exc:
                logger.debug("Action %r failed: %s", label, exc)
                click.echo(f"❌ {exc}")
        except click.Abort:
            # End of input (or Ctrl+C) at any prompt
            click.echo()
            click.echo("Exiting...")
            return
