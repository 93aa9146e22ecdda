"""Composition root: wires the session's settings and inventory together.

This is the only place in the codebase that knows about *all* layers.
The inventory lives only in memory, so every call to
``inventory_manager()`` starts an empty catalog whose ids begin at 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.inventory import InventoryManager

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Session settings, resolved from CLI options and environment."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = DEFAULT_LOG_LEVEL


def inventory_manager() -> InventoryManager:
    return InventoryManager()
