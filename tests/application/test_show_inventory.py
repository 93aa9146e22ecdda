"""Integration tests for the ListProducts and TotalValue queries."""

from ims.application.add_product import AddProductHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_inventory import ListProductsHandler, TotalValueHandler
from ims.application.show_product import FindProductHandler
from ims.application.update_stock import UpdateStockHandler
from ims.domain.model.inventory import InventoryManager
from ims.domain.model.value_objects import Money


class TestListProducts:

    def test_empty_inventory_signals_empty(self):
        listing = ListProductsHandler(InventoryManager()).handle()
        assert listing.is_empty
        assert listing.products == []

    def test_list_preserves_insertion_order(self):
        inventory = InventoryManager()
        add = AddProductHandler(inventory)
        for name in ("Zeta", "Alpha", "Mu"):
            add.handle(name, 1, "1")

        listing = ListProductsHandler(inventory).handle()
        assert not listing.is_empty
        assert [p.name for p in listing.products] == ["Zeta", "Alpha", "Mu"]

    def test_list_reflects_removals(self):
        inventory = InventoryManager()
        add = AddProductHandler(inventory)
        add.handle("Widget", 1, "1")
        add.handle("Gadget", 1, "1")
        RemoveProductHandler(inventory).handle(1)

        listing = ListProductsHandler(inventory).handle()
        assert [p.id for p in listing.products] == [2]


class TestTotalValue:

    def test_empty_inventory_is_zero_and_empty(self):
        value = TotalValueHandler(InventoryManager()).handle()
        assert value.is_empty
        assert value.total == Money.zero()

    def test_zero_stock_is_not_empty(self):
        inventory = InventoryManager()
        AddProductHandler(inventory).handle("Widget", 0, "2.50")

        value = TotalValueHandler(inventory).handle()
        assert not value.is_empty
        assert value.product_count == 1
        assert value.total == Money.zero()


class TestInventoryScenario:

    def test_full_session(self):
        inventory = InventoryManager()
        add = AddProductHandler(inventory)
        total = TotalValueHandler(inventory)

        assert add.handle("Widget", 10, 2.50).id == 1
        assert add.handle("Gadget", 5, 9.99).id == 2
        assert total.handle().total == Money.of("74.95")

        RemoveProductHandler(inventory).handle(1)
        assert total.handle().total == Money.of("49.95")

        UpdateStockHandler(inventory).handle(2, 0)
        assert total.handle().total == Money.of("0.0")
        assert FindProductHandler(inventory).handle(1) is None
