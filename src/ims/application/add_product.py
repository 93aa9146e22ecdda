"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import ProductDTO
from ims.domain.model.inventory import InventoryManager


class AddProductHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self, name: str, quantity: int, price: str | float | int | Decimal) -> ProductDTO:
        """Add a new product; the inventory issues its id."""
        product = self._inventory.create_product(name=name, quantity=quantity, price=price)
        return ProductDTO.from_product(product)
