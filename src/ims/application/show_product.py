"""Application service: Find Product use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.model.inventory import InventoryManager


class FindProductHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self, product_id: int) -> ProductDTO | None:
        product = self._inventory.find_product(product_id)
        if product is None:
            return None
        return ProductDTO.from_product(product)
