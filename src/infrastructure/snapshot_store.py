import os
from typing import Generic, List, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.domain.exceptions import DuplicateKeyException, SnapshotParseException, SnapshotWriteException
from src.domain.protocols import Identifiable
from src.infrastructure.repository import KeyedRepository

T = TypeVar("T", bound=Identifiable)


class JsonSnapshotStore(Generic[T]):
    """
    Saves and loads a whole KeyedRepository as one indented JSON array.
    There is no schema header; the file holds exactly the entity fields.
    """

    def __init__(self, path: str, entity_type: Type[T]):
        self.path = path
        self.entity_type = entity_type
        self._adapter = TypeAdapter(List[entity_type])

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def save(self, repository: KeyedRepository[T]) -> None:
        """
        Overwrites the snapshot file with every entity in the repository.

        Raises:
            SnapshotWriteException: if the file cannot be opened or written.
        """
        payload = self._adapter.dump_json(repository.get_all(), indent=2)
        try:
            with open(self.path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise SnapshotWriteException(self.path, str(e)) from e

    def load(self) -> KeyedRepository[T]:
        """
        Builds a fresh repository from the snapshot file.

        A missing file yields an empty repository. Anything that cannot be
        read back into entities raises SnapshotParseException; no partially
        populated repository is ever returned.
        """
        if not self.exists():
            return KeyedRepository()

        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise SnapshotParseException(self.path, str(e)) from e

        try:
            entities = self._adapter.validate_json(raw)
        except ValidationError as e:
            errors = e.errors()
            first = errors[0] if errors else {}
            raise SnapshotParseException(
                self.path,
                first.get("msg", "Snapshot does not match the expected entity shape"),
            ) from e

        try:
            return KeyedRepository(entities)
        except DuplicateKeyException as e:
            raise SnapshotParseException(self.path, str(e)) from e
