from typing import Any


class RecordKeeperException(Exception):
    """Base exception for all record-keeper errors."""
    pass

class RepositoryException(RecordKeeperException):
    """Base exception for keyed repository failures."""
    pass

class DuplicateKeyException(RepositoryException):
    """Raised when an entity is added under an id that is already stored."""
    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} already exists.")

class EntityNotFoundException(RepositoryException):
    """Raised when a lookup, removal or update references an absent id."""
    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} not found.")

class InvalidValueException(RepositoryException):
    """Raised when a value fails a domain constraint (e.g. negative quantity)."""
    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for '{field}': {reason}")

class SnapshotException(RecordKeeperException):
    """Base exception for snapshot file failures."""
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message} ({path})")

class SnapshotParseException(SnapshotException):
    """Raised when a snapshot file exists but cannot be read back into entities."""
    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"Could not parse snapshot: {reason}")

class SnapshotWriteException(SnapshotException):
    """Raised when a snapshot file cannot be written."""
    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(path, f"Could not write snapshot: {reason}")
