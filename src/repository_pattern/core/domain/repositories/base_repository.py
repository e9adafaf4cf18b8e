"""Base repository interface for all repository implementations."""
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar('T')  # Generic type for entities
K = TypeVar('K')  # Generic type for entity keys

# A filter document expressed over entity field names
Predicate = Mapping[str, Any]


class BaseRepository(Generic[T, K], ABC):
    """
    Base repository interface defining standard CRUD operations.

    All concrete repository implementations should inherit from this interface.
    Every operation takes an optional ``session`` that is handed to the
    underlying driver untouched.

    Read operations let driver errors propagate. Write operations never raise
    for a failed write; they report success as a boolean instead.
    """

    def __getitem__(self, entity_id: K) -> Optional[T]:
        """Shorthand for :meth:`get`; returns None rather than raising KeyError."""
        return self.get(entity_id)

    @abstractmethod
    def get(self, entity_id: K, *, session: Any = None) -> Optional[T]:
        """
        Retrieve an entity by its unique identifier.

        Args:
            entity_id: The unique identifier of the entity
            session: Optional driver session

        Returns:
            The first matching entity if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all(self, *, session: Any = None) -> List[T]:
        """Retrieve every entity in the repository, in the store's natural order."""
        pass

    @abstractmethod
    def find(self, predicate: Predicate, *, session: Any = None) -> List[T]:
        """
        Retrieve all entities matching a predicate.

        Args:
            predicate: Filter document over entity fields
            session: Optional driver session

        Returns:
            The matching entities; an empty list if nothing matched
        """
        pass

    @abstractmethod
    def single_or_default(self, predicate: Predicate, *, session: Any = None) -> Optional[T]:
        """
        Retrieve the single entity matching a predicate.

        Returns:
            The matching entity, or None if nothing matched

        Raises:
            AmbiguousMatchError: If more than one entity matches
        """
        pass

    @abstractmethod
    def add(self, entity: T, *, session: Any = None) -> bool:
        """
        Persist a new entity.

        Returns:
            True if the entity was added, False if the store rejected it
        """
        pass

    @abstractmethod
    def add_range(self, entities: Iterable[T], *, session: Any = None) -> bool:
        """
        Persist several entities at once.

        Returns:
            True only if every entity was added. A partial insert is reported
            as False.
        """
        pass

    @abstractmethod
    def update(self, entity: T, *, session: Any = None) -> bool:
        """
        Update an existing entity.

        Update semantics (full replace, partial merge, versioning) depend on
        the entity, so every concrete repository must decide them.

        Returns:
            True if the entity was updated, False otherwise
        """
        pass

    @abstractmethod
    def remove(self, entity: T, *, session: Any = None) -> bool:
        """Delete the stored entity with the same key; returns whether the store acknowledged it."""
        pass

    @abstractmethod
    def remove_by_id(self, entity_id: K, *, session: Any = None) -> bool:
        """
        Delete an entity by its unique identifier.

        Returns:
            True if the store acknowledged the delete, even if nothing matched
        """
        pass

    @abstractmethod
    def remove_all(self, *, session: Any = None) -> bool:
        """Delete every entity; returns whether the store acknowledged it."""
        pass

    @abstractmethod
    def remove_where(self, predicate: Predicate, *, session: Any = None) -> bool:
        """Delete every entity matching a predicate in one store-side operation."""
        pass

    @abstractmethod
    def remove_range(self, entities: Optional[Iterable[T]], *, session: Any = None) -> bool:
        """
        Delete several entities, one delete per entity.

        Returns:
            True only if every delete was acknowledged. None or an empty
            iterable returns False.
        """
        pass

    @abstractmethod
    def remove_range_by_ids(self, entity_ids: Optional[Iterable[K]], *, session: Any = None) -> bool:
        """Same as :meth:`remove_range`, keyed by identifiers."""
        pass
