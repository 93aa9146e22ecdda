"""Integration tests for the AddProduct and FindProduct use cases."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.show_product import FindProductHandler
from ims.domain.exceptions import ValidationError
from ims.domain.model.inventory import InventoryManager
from ims.domain.model.value_objects import Money


class TestAddProductHappyPath:

    def test_add_returns_dto_with_issued_id(self):
        inventory = InventoryManager()
        dto = AddProductHandler(inventory).handle("Widget", 10, "2.50")

        assert dto.id == 1
        assert dto.name == "Widget"
        assert dto.quantity == 10
        assert dto.price == Money.of("2.50")
        assert dto.value == Money.of("25.00")

    def test_find_returns_added_fields(self):
        inventory = InventoryManager()
        added = AddProductHandler(inventory).handle("  Gadget ", 5, "9.99")

        found = FindProductHandler(inventory).handle(added.id)
        assert found == added
        assert found.name == "Gadget"

    def test_find_absent_returns_none(self):
        assert FindProductHandler(InventoryManager()).handle(1) is None

    def test_dto_is_a_snapshot(self):
        inventory = InventoryManager()
        dto = AddProductHandler(inventory).handle("Widget", 10, "2.50")

        inventory.update_product(dto.id, 3)
        assert dto.quantity == 10


class TestAddProductValidation:

    @pytest.mark.parametrize(
        "name, quantity, price, field",
        [
            ("", 1, "1", "name"),
            ("Widget", -1, "1", "quantity"),
            ("Widget", 1, "-1", "price"),
        ],
    )
    def test_invalid_input_names_the_field(self, name, quantity, price, field):
        inventory = InventoryManager()
        with pytest.raises(ValidationError, match=field):
            AddProductHandler(inventory).handle(name, quantity, price)
        assert inventory.is_empty
