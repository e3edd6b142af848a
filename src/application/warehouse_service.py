import logging
from datetime import datetime, timedelta
from typing import List

from src.domain.exceptions import (
    DuplicateKeyException,
    EntityNotFoundException,
    InvalidValueException,
)
from src.domain.models import ElectronicItem, GroceryItem
from src.infrastructure.repository import KeyedRepository

logger = logging.getLogger(__name__)


class WarehouseManager:
    """
    Keeps electronics and groceries in separate repositories and wraps the
    stock operations with per-error-kind reporting.
    """

    def __init__(self):
        self.electronics: KeyedRepository[ElectronicItem] = KeyedRepository()
        self.groceries: KeyedRepository[GroceryItem] = KeyedRepository()

    def seed_data(self) -> None:
        self.electronics.add(ElectronicItem(id=1, name="Laptop", quantity=5, brand="HP", warranty_months=24))
        self.electronics.add(ElectronicItem(id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12))
        self.electronics.add(ElectronicItem(id=3, name="Headphones", quantity=15, brand="JBL", warranty_months=6))

        now = datetime.now()
        self.groceries.add(GroceryItem(id=101, name="Butter", quantity=50, expiry_date=now + timedelta(days=10)))
        self.groceries.add(GroceryItem(id=102, name="Milk", quantity=30, expiry_date=now + timedelta(days=5)))
        self.groceries.add(GroceryItem(id=103, name="Bread", quantity=20, expiry_date=now + timedelta(days=3)))

    @staticmethod
    def describe_items(repo: KeyedRepository) -> List[str]:
        items = repo.get_all()
        if not items:
            return ["No items found."]
        return [str(item) for item in items]

    @staticmethod
    def increase_stock(repo: KeyedRepository, item_id: int, quantity: int) -> bool:
        """
        Adds quantity to the stock of an item.

        Returns:
            bool: True if the stock was updated, False if the error was reported instead.
        """
        try:
            item = repo.get_by_id(item_id)
            new_quantity = item.quantity + quantity
            repo.update_quantity(item_id, new_quantity)
            logger.info(f"Increased stock for '{item.name}' (ID: {item_id}). New quantity: {new_quantity}")
            return True
        except DuplicateKeyException as e:
            logger.warning(f"Duplicate Error: {e}")
        except EntityNotFoundException as e:
            logger.warning(f"Not Found: {e}")
        except InvalidValueException as e:
            logger.warning(f"Invalid Quantity: {e}")
        except Exception as e:
            logger.error(f"Unexpected error while increasing stock: {e}")
        return False

    @staticmethod
    def remove_item_by_id(repo: KeyedRepository, item_id: int) -> bool:
        try:
            repo.remove(item_id)
            logger.info(f"Item with ID {item_id} removed successfully.")
            return True
        except EntityNotFoundException as e:
            logger.warning(f"Not Found: {e}")
        except Exception as e:
            logger.error(f"Unexpected error while removing item: {e}")
        return False
