"""Application services: List Products and Total Value use cases (queries)."""

from __future__ import annotations

from ims.application.dto import InventoryListingDTO, InventoryValueDTO, ProductDTO
from ims.domain.model.inventory import InventoryManager


class ListProductsHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self) -> InventoryListingDTO:
        return InventoryListingDTO(
            products=[
                ProductDTO.from_product(product)
                for product in self._inventory.list_products()
            ]
        )


class TotalValueHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self) -> InventoryValueDTO:
        return InventoryValueDTO(
            total=self._inventory.total_value(),
            product_count=len(self._inventory),
        )
