"""Application service: Update Product Price use case."""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import ProductDTO
from ims.domain.model.inventory import InventoryManager


class UpdatePriceHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self, product_id: int, new_price: str | float | int | Decimal) -> ProductDTO:
        """Update a product's unit price.

        Changes the total inventory value immediately; there are no price
        snapshots to preserve.
        """
        product = self._inventory.update_price(product_id, new_price)
        return ProductDTO.from_product(product)
