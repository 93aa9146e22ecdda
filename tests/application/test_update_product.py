"""Integration tests for the RemoveProduct, UpdateStock and UpdatePrice use cases."""

import pytest

from ims.application.remove_product import RemoveProductHandler
from ims.application.update_product import UpdatePriceHandler
from ims.application.update_stock import UpdateStockHandler
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.inventory import InventoryManager
from ims.domain.model.value_objects import Money


def _setup() -> InventoryManager:
    inventory = InventoryManager()
    inventory.create_product("Widget", 10, "2.50")
    inventory.create_product("Gadget", 5, "9.99")
    return inventory


class TestRemoveProduct:

    def test_remove_returns_removed_product(self):
        inventory = _setup()
        dto = RemoveProductHandler(inventory).handle(1)

        assert dto.name == "Widget"
        assert inventory.find_product(1) is None
        assert inventory.find_product(2).name == "Gadget"

    def test_remove_absent_is_not_found(self):
        inventory = _setup()
        with pytest.raises(EntityNotFoundError, match="Product with ID 9 not found"):
            RemoveProductHandler(inventory).handle(9)
        assert len(inventory) == 2

    def test_remove_twice_is_not_found(self):
        inventory = _setup()
        handler = RemoveProductHandler(inventory)
        handler.handle(2)
        with pytest.raises(EntityNotFoundError):
            handler.handle(2)


class TestUpdateStock:

    def test_update_sets_quantity(self):
        inventory = _setup()
        dto = UpdateStockHandler(inventory).handle(2, 0)

        assert dto.quantity == 0
        assert dto.value == Money.zero()

    def test_negative_quantity_rejected(self):
        inventory = _setup()
        with pytest.raises(ValidationError):
            UpdateStockHandler(inventory).handle(2, -1)
        assert inventory.find_product(2).quantity == 5

    def test_absent_product_rejected(self):
        with pytest.raises(EntityNotFoundError):
            UpdateStockHandler(_setup()).handle(3, 1)


class TestUpdatePrice:

    def test_update_price_changes_value(self):
        inventory = _setup()
        dto = UpdatePriceHandler(inventory).handle(1, "3.00")

        assert dto.price == Money.of("3.00")
        assert dto.value == Money.of("30.00")

    def test_negative_price_rejected(self):
        inventory = _setup()
        with pytest.raises(ValidationError, match="Invalid price"):
            UpdatePriceHandler(inventory).handle(1, "-3")
        assert inventory.find_product(1).price == Money.of("2.50")

    def test_absent_product_rejected(self):
        with pytest.raises(EntityNotFoundError):
            UpdatePriceHandler(_setup()).handle(7, "1")
