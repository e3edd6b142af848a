from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.domain.exceptions import (
    DuplicateKeyException,
    EntityNotFoundException,
    InvalidValueException,
)
from src.domain.protocols import Identifiable

T = TypeVar("T", bound=Identifiable)

# A constraint returns a reason string when the value is rejected, None otherwise.
FieldConstraint = Callable[[Any], Optional[str]]


_INT_ADAPTER = TypeAdapter(int)


def non_negative(value: Any) -> Optional[str]:
    # Coerce the way the models will, so "-5" is checked as -5
    try:
        quantity = _INT_ADAPTER.validate_python(value)
    except ValidationError as e:
        errors = e.errors()
        return errors[0]["msg"] if errors else "Quantity must be a whole number."
    if quantity < 0:
        return "Quantity cannot be negative."
    return None


DEFAULT_FIELD_CONSTRAINTS: Dict[str, FieldConstraint] = {"quantity": non_negative}


class KeyedRepository(Generic[T]):
    """
    In-memory store of entities keyed by their unique integer id.

    Entities keep their insertion order. Every failure is raised as one of
    DuplicateKeyException, EntityNotFoundException or InvalidValueException;
    the repository itself never logs or prints.

    Not safe for concurrent mutation: callers sharing an instance across
    threads must hold a single lock around every call.
    """

    def __init__(
        self,
        entities: Iterable[T] = (),
        field_constraints: Optional[Dict[str, FieldConstraint]] = None,
    ):
        self._items: Dict[int, T] = {}
        self.field_constraints = dict(
            DEFAULT_FIELD_CONSTRAINTS if field_constraints is None else field_constraints
        )
        for entity in entities:
            self.add(entity)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def add(self, entity: T) -> None:
        """
        Stores an entity under its id.

        Raises:
            DuplicateKeyException: if the id is already taken. The stored entity is left untouched.
        """
        if entity.id in self._items:
            raise DuplicateKeyException(entity.id)
        self._items[entity.id] = entity

    def get_by_id(self, entity_id: int) -> T:
        try:
            return self._items[entity_id]
        except KeyError:
            raise EntityNotFoundException(entity_id) from None

    def remove(self, entity_id: int) -> T:
        """Removes and returns the entity stored under entity_id, freeing the id for reuse."""
        try:
            return self._items.pop(entity_id)
        except KeyError:
            raise EntityNotFoundException(entity_id) from None

    def get_all(self) -> List[T]:
        """Returns a new list of all entities in insertion order."""
        return list(self._items.values())

    def update_field(self, entity_id: int, field_name: str, new_value: Any) -> T:
        """
        Assigns a single field of a stored entity in place.

        Value checks run before the existence check, so a negative quantity
        for an unknown id is reported as InvalidValueException.

        Args:
            entity_id (int): Id of the entity to update.
            field_name (str): Attribute to assign. The id itself cannot be changed.
            new_value (Any): The new value for the field.

        Returns:
            T: The updated entity.
        """
        if field_name == "id":
            raise InvalidValueException(field_name, new_value, "The id of a stored entity cannot be changed.")

        constraint = self.field_constraints.get(field_name)
        if constraint is not None:
            reason = constraint(new_value)
            if reason:
                raise InvalidValueException(field_name, new_value, reason)

        entity = self.get_by_id(entity_id)
        if not hasattr(entity, field_name):
            raise InvalidValueException(field_name, new_value, f"{type(entity).__name__} has no such field.")

        try:
            setattr(entity, field_name, new_value)
        except (ValueError, AttributeError, TypeError) as e:
            # pydantic validates before assigning, so the stored entity is unchanged here
            raise InvalidValueException(field_name, new_value, str(e)) from e

        return entity

    def update_quantity(self, entity_id: int, new_quantity: int) -> T:
        return self.update_field(entity_id, "quantity", new_quantity)
