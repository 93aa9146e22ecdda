"""Application service: Update Stock use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.model.inventory import InventoryManager


class UpdateStockHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self, product_id: int, new_quantity: int) -> ProductDTO:
        """Set the quantity on hand for a product."""
        product = self._inventory.update_product(product_id, new_quantity)
        return ProductDTO.from_product(product)
