"""InventoryManager aggregate: the ordered, in-memory product catalog.

The manager owns every Product it holds and issues product ids from a
counter that only ever moves forward, so an id is never handed out twice
even after the product carrying it has been removed.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class InventoryManager:
    """Aggregate root for the inventory.

    Invariants:
    - every product in ``products`` has a unique id
    - ``next_product_id`` is greater than any id issued so far
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._next_product_id = 1

    @property
    def next_product_id(self) -> int:
        return self._next_product_id

    @property
    def is_empty(self) -> bool:
        return not self._products

    def __len__(self) -> int:
        return len(self._products)

    # --- Lookup ---------------------------------------------------------------

    def find_product(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        logger.debug("Product #%s not found", product_id)
        return None

    def find_next_product_id(self) -> int:
        """Issue a fresh product id."""
        product_id = self._next_product_id
        self._next_product_id += 1
        return product_id

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Append a product built with an id from ``find_next_product_id``."""
        if self.find_product(product.id) is not None:
            raise ValidationError(f"Product ID {product.id} already exists")
        self._products.append(product)
        logger.info("Product '%s' added with ID %s", product.name, product.id)

    def create_product(
        self,
        name: str,
        quantity: int,
        price: str | float | int | Decimal | Money,
    ) -> Product:
        """Issue an id, build the product and add it in one step.

        The id is only consumed once the product has passed validation.
        """
        product = Product.create(self._next_product_id, name, quantity, price)
        self.find_next_product_id()
        self.add_product(product)
        return product

    def remove_product(self, product_id: int) -> Product:
        product = self._get(product_id)
        self._products.remove(product)
        logger.info("Product '%s' (ID %s) removed", product.name, product.id)
        return product

    def update_product(self, product_id: int, new_quantity: int) -> Product:
        """Set the quantity on hand of an existing product."""
        product = self._get(product_id)
        product.update_stock(new_quantity)
        logger.info("Product '%s' quantity set to %s", product.name, new_quantity)
        return product

    def update_price(
        self,
        product_id: int,
        new_price: str | float | int | Decimal | Money,
    ) -> Product:
        product = self._get(product_id)
        product.update_price(new_price)
        logger.info("Product '%s' price set to %s", product.name, product.price.format())
        return product

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> list[Product]:
        """Return the products in insertion order."""
        return list(self._products)

    def total_value(self) -> Money:
        """Sum of quantity x price over all products; zero when empty."""
        result = Money.zero()
        for product in self._products:
            result = result + product.value
        return result

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: int) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product
