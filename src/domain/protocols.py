from typing import Protocol, runtime_checkable

from src.domain.models import Transaction


@runtime_checkable
class Identifiable(Protocol):
    """Anything exposing a unique integer id can be stored in a KeyedRepository."""

    @property
    def id(self) -> int:
        ...


class TransactionProcessor(Protocol):
    """A payment channel that handles a transaction and describes what it did."""

    def process(self, transaction: Transaction) -> str:
        ...
