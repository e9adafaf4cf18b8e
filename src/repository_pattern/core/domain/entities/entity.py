"""Base entity type shared by everything a repository can persist."""
from typing import Any, Generic, TypeVar

K = TypeVar('K')  # Key type (e.g., bson.ObjectId)


class Entity(Generic[K]):
    """
    Mixin for records identified by a unique key.

    Concrete entities are dataclasses that declare an ``id`` field. Two
    entities describe the same logical record when they are of the same
    type and their keys are equal, regardless of any other field values.
    """

    id: K

    def has_same_identity(self, other: Any) -> bool:
        """Return True if ``other`` is an entity of the same type with the same key."""
        if type(self) is not type(other):
            return False
        return self.id is not None and self.id == other.id
