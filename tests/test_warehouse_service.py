import unittest
from unittest.mock import MagicMock

from src.application.warehouse_service import WarehouseManager
from src.infrastructure.repository import KeyedRepository


class TestWarehouseManager(unittest.TestCase):
    def setUp(self) -> None:
        self.manager = WarehouseManager()
        self.manager.seed_data()

    def test_seed_data(self) -> None:
        self.assertEqual([i.id for i in self.manager.electronics.get_all()], [1, 2, 3])
        self.assertEqual([i.id for i in self.manager.groceries.get_all()], [101, 102, 103])

    def test_increase_stock(self) -> None:
        with self.assertLogs("src.application.warehouse_service", level="INFO") as logs:
            ok = self.manager.increase_stock(self.manager.electronics, 2, 5)

        self.assertTrue(ok)
        self.assertEqual(self.manager.electronics.get_by_id(2).quantity, 15)
        self.assertIn("New quantity: 15", logs.output[0])

    def test_increase_stock_missing_item(self) -> None:
        with self.assertLogs("src.application.warehouse_service", level="WARNING") as logs:
            ok = self.manager.increase_stock(self.manager.groceries, 999, 5)

        self.assertFalse(ok)
        self.assertIn("Not Found", logs.output[0])

    def test_increase_stock_below_zero_is_invalid(self) -> None:
        with self.assertLogs("src.application.warehouse_service", level="WARNING") as logs:
            ok = self.manager.increase_stock(self.manager.electronics, 1, -50)

        self.assertFalse(ok)
        self.assertIn("Invalid Quantity", logs.output[0])
        self.assertEqual(self.manager.electronics.get_by_id(1).quantity, 5)

    def test_unexpected_error_is_reported(self) -> None:
        repo = MagicMock(spec=KeyedRepository)
        repo.get_by_id.side_effect = RuntimeError("boom")

        with self.assertLogs("src.application.warehouse_service", level="ERROR") as logs:
            ok = self.manager.increase_stock(repo, 1, 1)

        self.assertFalse(ok)
        self.assertIn("Unexpected error", logs.output[0])

    def test_remove_item_by_id(self) -> None:
        with self.assertLogs("src.application.warehouse_service", level="INFO"):
            self.assertTrue(self.manager.remove_item_by_id(self.manager.groceries, 103))
            self.assertFalse(self.manager.remove_item_by_id(self.manager.groceries, 103))

        self.assertEqual(len(self.manager.groceries), 2)

    def test_describe_items(self) -> None:
        lines = self.manager.describe_items(self.manager.electronics)

        self.assertEqual(lines[0], "[Electronic] ID:1 Name:Laptop Brand:HP Qty:5 Warranty:24mo")
        self.assertEqual(self.manager.describe_items(KeyedRepository()), ["No items found."])
