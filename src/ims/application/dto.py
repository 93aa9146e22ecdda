"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the mutable domain entities to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    quantity: int
    price: Money
    value: Money  # quantity x price

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            quantity=product.quantity,
            price=product.price,
            value=product.value,
        )


@dataclass(frozen=True)
class InventoryListingDTO:
    """Output: the current products in insertion order.

    ``is_empty`` lets the caller show an "inventory is empty" message
    instead of an empty table.
    """

    products: list[ProductDTO]

    @property
    def is_empty(self) -> bool:
        return not self.products


@dataclass(frozen=True)
class InventoryValueDTO:
    """Output: total inventory value across ``product_count`` products."""

    total: Money
    product_count: int

    @property
    def is_empty(self) -> bool:
        return self.product_count == 0
