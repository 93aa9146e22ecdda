"""Application service: Remove Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.model.inventory import InventoryManager


class RemoveProductHandler:

    def __init__(self, inventory: InventoryManager) -> None:
        self._inventory = inventory

    def handle(self, product_id: int) -> ProductDTO:
        """Remove a product and return what was removed.

        Raises EntityNotFoundError, leaving the inventory untouched, if
        no product has this id.
        """
        product = self._inventory.remove_product(product_id)
        return ProductDTO.from_product(product)
