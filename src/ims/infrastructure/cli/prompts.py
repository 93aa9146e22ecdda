"""Interactive prompts with retry-until-valid and a cancel keyword.

Every prompt re-asks until the input is acceptable.  Typing ``cancel``
(any case) at any prompt raises PromptCancelled so the menu can abandon
the current action.
"""

from __future__ import annotations

from decimal import Decimal

import click

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import MAX_QUANTITY, coerce_price

CANCEL_KEYWORD = "cancel"
INVALID_INPUT = "❌ Invalid input. Please try again."


class PromptCancelled(Exception):
    """The user typed the cancel keyword at a prompt."""


def show_cancel_banner(width: int = 26) -> None:
    click.echo("=" * width)
    click.echo(f"Type '{CANCEL_KEYWORD}' to abort 🚫")
    click.echo("=" * width)


def ask(text: str) -> str:
    """Read one stripped line, raising PromptCancelled on the cancel keyword."""
    raw = click.prompt(text, default="", show_default=False).strip()
    if raw.lower() == CANCEL_KEYWORD:
        raise PromptCancelled()
    return raw


def prompt_product_name(text: str) -> str:
    while True:
        name = ask(text)
        if name:
            return name
        click.echo("❌ Product name cannot be empty.")


def prompt_non_negative_int(text: str, maximum: int | None = None) -> int:
    while True:
        raw = ask(text)
        try:
            value = int(raw)
        except ValueError:
            value = -1
        if value >= 0 and (maximum is None or value <= maximum):
            return value
        click.echo(INVALID_INPUT)


def prompt_quantity(text: str) -> int:
    return prompt_non_negative_int(text, maximum=MAX_QUANTITY)


def prompt_price(text: str) -> Decimal:
    while True:
        raw = ask(text)
        try:
            return coerce_price(raw).amount
        except ValidationError:
            click.echo(INVALID_INPUT)
