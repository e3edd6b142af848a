import logging
from datetime import datetime, timedelta
from typing import List

from src.domain.exceptions import SnapshotParseException, SnapshotWriteException
from src.domain.models import InventoryItem
from src.infrastructure.repository import KeyedRepository
from src.infrastructure.snapshot_store import JsonSnapshotStore

logger = logging.getLogger(__name__)


class InventoryLogService:
    """
    Inventory log backed by a single JSON snapshot file.
    Each instance behaves like a fresh session until load_data() is called.
    """

    def __init__(self, file_path: str):
        self.store: JsonSnapshotStore[InventoryItem] = JsonSnapshotStore(file_path, InventoryItem)
        self.items: KeyedRepository[InventoryItem] = KeyedRepository()

    def seed_sample_data(self) -> None:
        now = datetime.now()
        self.items.add(InventoryItem(id=1, name="Nails", quantity=500, date_added=now - timedelta(days=10)))
        self.items.add(InventoryItem(id=2, name="Saw", quantity=20, date_added=now - timedelta(days=5)))
        self.items.add(InventoryItem(id=3, name="Screwdriver", quantity=80, date_added=now - timedelta(days=8)))
        self.items.add(InventoryItem(id=4, name="Hammer", quantity=40, date_added=now - timedelta(days=15)))
        self.items.add(InventoryItem(id=5, name="Drill", quantity=20, date_added=now - timedelta(days=12)))

    def save_data(self) -> bool:
        """Writes the log to disk. Returns False, after logging the error, if the write fails."""
        try:
            self.store.save(self.items)
        except SnapshotWriteException as e:
            logger.error(f"Error saving file: {e}")
            return False
        logger.info(f"Saved {len(self.items)} items to {self.store.path}.")
        return True

    def load_data(self) -> None:
        """
        Replaces the in-memory log with the snapshot on disk.
        A missing or unreadable snapshot leaves the log empty.
        """
        if not self.store.exists():
            logger.info("File not found, starting with empty log.")
            self.items = KeyedRepository()
            return

        try:
            self.items = self.store.load()
        except SnapshotParseException as e:
            logger.error(f"Error loading file: {e}")
            self.items = KeyedRepository()
            return
        logger.info(f"Loaded {len(self.items)} items from {self.store.path}.")

    def describe_items(self) -> List[str]:
        items = self.items.get_all()
        if not items:
            return ["No items found."]
        return [
            f"Id: {item.id}, Name: {item.name}, Quantity: {item.quantity}, Date Added: {item.date_added:%Y-%m-%d %H:%M}"
            for item in items
        ]
