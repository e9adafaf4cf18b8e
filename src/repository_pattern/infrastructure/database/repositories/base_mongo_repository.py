"""Base MongoDB repository implementation."""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, TypeVar

from bson.errors import BSONError
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from repository_pattern.core.domain.repositories.base_repository import BaseRepository, Predicate
from repository_pattern.core.errors import (
    AmbiguousMatchError,
    CollectionNotFoundError,
    ConfigurationError,
    ValidationError,
)
from repository_pattern.infrastructure.database.config import MongoSettings
from repository_pattern.infrastructure.logging import get_logger

T = TypeVar('T')  # Domain entity
K = TypeVar('K')  # Entity key

logger = get_logger(__name__)

ID_FIELD = "id"
DOCUMENT_ID_FIELD = "_id"
_LOGICAL_OPERATORS = ("$and", "$or", "$nor")


@dataclass(frozen=True)
class WriteOutcome:
    """Result of an attempted write: whether it succeeded and, if not, why."""
    succeeded: bool
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.succeeded


class BaseMongoRepository(BaseRepository[T, K]):
    """
    Base implementation of repository using a MongoDB collection.

    This class provides every operation of the repository contract except
    ``update``, which concrete repositories implement for their entity.
    The collection is named after the entity class and must already exist.

    Reads let driver errors propagate. Writes catch driver errors, log them
    and return False; callers only see the boolean.
    """

    def __init__(
        self,
        database: Database,
        entity_class: Type[T],
        max_workers: Optional[int] = None,
    ):
        """
        Bind the repository to the collection named after ``entity_class``.

        Args:
            database: Open MongoDB database; it outlives the repository
            entity_class: The domain entity class (a dataclass with an ``id`` field)
            max_workers: Upper bound on concurrent deletes in ``remove_range``;
                defaults to the configured value

        Raises:
            CollectionNotFoundError: If the collection does not exist
            ConfigurationError: If ``max_workers`` is below 1
        """
        if max_workers is None:
            max_workers = MongoSettings.from_environment().remove_range_max_workers
        if max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")

        self._database = database
        self._entity_class = entity_class
        self._collection_name = entity_class.__name__
        self._max_workers = max_workers

        if self._collection_name not in database.list_collection_names():
            raise CollectionNotFoundError(self._collection_name, database.name)

        self._collection: Collection = database[self._collection_name]
        logger.info(f"Repository bound to collection \"{self._collection_name}\" in \"{database.name}\"")

    @property
    def collection_name(self) -> str:
        return self._collection_name

    # Get

    def get(self, entity_id: K, *, session: Any = None) -> Optional[T]:
        """
        Retrieve an entity by its unique identifier.

        Args:
            entity_id: Key of the entity to retrieve
            session: Optional driver session

        Returns:
            The domain entity if found, None otherwise
        """
        document = self._collection.find_one({DOCUMENT_ID_FIELD: entity_id}, session=session)

        if document is None:
            return None

        return self._to_entity(document)

    def get_all(self, *, session: Any = None) -> List[T]:
        return [self._to_entity(document) for document in self._collection.find({}, session=session)]

    def find(self, predicate: Predicate, *, session: Any = None) -> List[T]:
        """
        Retrieve all entities matching a predicate.

        Args:
            predicate: Filter document over entity fields
            session: Optional driver session

        Returns:
            List of domain entities matching the predicate
        """
        query = self._translate_predicate(predicate)
        logger.debug(f"find on \"{self._collection_name}\": {query}")
        return [self._to_entity(document) for document in self._collection.find(query, session=session)]

    def single_or_default(self, predicate: Predicate, *, session: Any = None) -> Optional[T]:
        """
        Retrieve the only entity matching a predicate.

        At most two documents are fetched; a second one means the match is
        ambiguous.

        Raises:
            AmbiguousMatchError: If more than one entity matches
        """
        query = self._translate_predicate(predicate)
        documents = list(self._collection.find(query, limit=2, session=session))

        if len(documents) > 1:
            raise AmbiguousMatchError(self._collection_name, predicate)
        if not documents:
            return None

        return self._to_entity(documents[0])

    # Add

    def add(self, entity: T, *, session: Any = None) -> bool:
        """
        Insert a new entity.

        If the entity has no key yet, the key generated by the database is
        written back onto it, unless the entity is a frozen dataclass.

        Returns:
            True if inserted, False if the insert failed for any reason
        """
        document = self._to_document(entity)

        def insert() -> bool:
            result = self._collection.insert_one(document, session=session)
            self._assign_generated_id(entity, result.inserted_id)
            return True

        return self._attempt_write(f"insert into \"{self._collection_name}\"", insert).succeeded

    def add_range(self, entities: Iterable[T], *, session: Any = None) -> bool:
        """
        Insert several entities with one ordered bulk insert.

        Entities before a failing one may already be stored; the result is
        still False.

        Returns:
            True only if every entity was inserted
        """
        entities = list(entities or [])
        if not entities:
            logger.debug(f"add_range on \"{self._collection_name}\" called with no entities")
            return False

        documents = [self._to_document(entity) for entity in entities]

        def insert_many() -> bool:
            result = self._collection.insert_many(documents, ordered=True, session=session)
            for entity, inserted_id in zip(entities, result.inserted_ids):
                self._assign_generated_id(entity, inserted_id)
            return True

        return self._attempt_write(
            f"bulk insert of {len(documents)} into \"{self._collection_name}\"", insert_many
        ).succeeded

    # Remove

    def remove(self, entity: T, *, session: Any = None) -> bool:
        return self.remove_by_id(getattr(entity, ID_FIELD), session=session)

    def remove_by_id(self, entity_id: K, *, session: Any = None) -> bool:
        """
        Delete an entity by its unique identifier.

        Returns:
            True if the store acknowledged the delete, whether or not a
            document matched
        """
        return self._delete_one(entity_id, session=session)

    def remove_all(self, *, session: Any = None) -> bool:
        """
        Delete every entity in one operation.

        Returns:
            True if acknowledged, including when the collection was already empty
        """
        return self._attempt_write(
            f"delete all from \"{self._collection_name}\"",
            lambda: self._collection.delete_many({}, session=session).acknowledged,
        ).succeeded

    def remove_where(self, predicate: Predicate, *, session: Any = None) -> bool:
        query = self._translate_predicate(predicate)
        return self._attempt_write(
            f"delete {query} from \"{self._collection_name}\"",
            lambda: self._collection.delete_many(query, session=session).acknowledged,
        ).succeeded

    def remove_range(self, entities: Optional[Iterable[T]], *, session: Any = None) -> bool:
        """
        Delete several entities, issuing one delete per entity in parallel.

        Args:
            entities: Entities to delete
            session: Optional driver session; when given, the deletes run one
                after another on the calling thread

        Returns:
            True only if every delete was acknowledged; False for None or an
            empty iterable
        """
        if entities is None:
            return False
        return self._remove_keys([getattr(entity, ID_FIELD) for entity in entities], session)

    def remove_range_by_ids(self, entity_ids: Optional[Iterable[K]], *, session: Any = None) -> bool:
        """
        Delete several entities by key, issuing one delete per key in parallel.

        Returns:
            True only if every delete was acknowledged; False for None or an
            empty iterable
        """
        if entity_ids is None:
            return False
        return self._remove_keys(list(entity_ids), session)

    # Helper methods

    def _remove_keys(self, keys: List[K], session: Any) -> bool:
        if not keys:
            logger.debug(f"remove_range on \"{self._collection_name}\" called with no keys")
            return False

        # A ClientSession must not be used by several threads at once
        if session is not None:
            acknowledgements = [self._delete_one(key, session=session) for key in keys]
        else:
            workers = min(self._max_workers, len(keys))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="remove-range") as executor:
                acknowledgements = list(executor.map(self._delete_one, keys))

        removed = all(acknowledgements)
        if not removed:
            failed = acknowledgements.count(False)
            logger.warning(
                f"remove_range on \"{self._collection_name}\": {failed} of {len(keys)} deletes not acknowledged"
            )
        return removed

    def _delete_one(self, entity_id: K, session: Any = None) -> bool:
        return self._attempt_write(
            f"delete {entity_id} from \"{self._collection_name}\"",
            lambda: self._collection.delete_one({DOCUMENT_ID_FIELD: entity_id}, session=session).acknowledged,
        ).succeeded

    def _attempt_write(self, description: str, operation: Callable[[], bool]) -> WriteOutcome:
        """
        Run a write and convert driver errors into a failed outcome.

        Args:
            description: Human-readable description used in log messages
            operation: Callable performing the write; returns whether it succeeded

        Returns:
            WriteOutcome carrying the success flag and the caught error, if any
        """
        try:
            succeeded = bool(operation())
        except (PyMongoError, BSONError) as e:
            logger.warning(f"Failed to {description}: {type(e).__name__}: {e}")
            return WriteOutcome(succeeded=False, error=e)

        logger.debug(f"{description}: {'ok' if succeeded else 'not acknowledged'}")
        return WriteOutcome(succeeded=succeeded)

    def _translate_predicate(self, predicate: Predicate) -> Dict[str, Any]:
        """
        Convert a filter over entity fields into a filter over document fields.

        Only the key field is named differently (``id`` on the entity, ``_id``
        in the document); the rename is applied inside ``$and``/``$or``/``$nor``
        clauses too.
        """
        query: Dict[str, Any] = {}
        for key, value in dict(predicate or {}).items():
            if key in _LOGICAL_OPERATORS:
                query[key] = [self._translate_predicate(clause) for clause in value]
            elif key == ID_FIELD:
                query[DOCUMENT_ID_FIELD] = value
            else:
                query[key] = value
        return query

    def _to_document(self, entity: T) -> Dict[str, Any]:
        """
        Convert a domain entity to a MongoDB document.

        Dataclass fields map one to one; ``id`` becomes ``_id`` and is left
        out when unset so the database generates one.

        Args:
            entity: Domain entity

        Returns:
            Document ready to insert
        """
        if not is_dataclass(entity):
            raise NotImplementedError("Subclasses must implement _to_document for non-dataclass entities")

        document = {f.name: getattr(entity, f.name) for f in fields(entity) if f.name != ID_FIELD}
        entity_id = getattr(entity, ID_FIELD, None)
        if entity_id is not None:
            document = {DOCUMENT_ID_FIELD: entity_id, **document}
        return document

    def _to_entity(self, document: Dict[str, Any]) -> T:
        """
        Convert a MongoDB document to a domain entity.

        Document fields without a matching entity field are ignored. The key
        is passed to the constructor like any other field; it is only set
        afterwards when ``id`` is declared with ``init=False``.

        Args:
            document: Document as returned by the driver

        Returns:
            Domain entity

        Raises:
            ValidationError: If the document lacks a field the entity requires
        """
        if not is_dataclass(self._entity_class):
            raise NotImplementedError("Subclasses must implement _to_entity for non-dataclass entities")

        entity_fields = {f.name: f for f in fields(self._entity_class)}
        values = {
            name: document[name]
            for name, f in entity_fields.items()
            if f.init and name != ID_FIELD and name in document
        }
        id_field = entity_fields.get(ID_FIELD)
        id_in_init = id_field is not None and id_field.init
        if id_in_init:
            values[ID_FIELD] = document.get(DOCUMENT_ID_FIELD)

        try:
            entity = self._entity_class(**values)
        except TypeError as e:
            raise ValidationError(
                f"Document {document.get(DOCUMENT_ID_FIELD)} in \"{self._collection_name}\" "
                f"cannot be mapped to {self._entity_class.__name__}: {e}"
            ) from e

        if not id_in_init:
            # Also works for frozen dataclasses
            object.__setattr__(entity, ID_FIELD, document.get(DOCUMENT_ID_FIELD))
        return entity

    def _assign_generated_id(self, entity: T, inserted_id: Any) -> None:
        """
        Write a database-generated key back onto an entity that had none.

        Frozen dataclasses are left untouched; callers that insert them
        without a key have to look the document up to learn its key.
        """
        if getattr(entity, ID_FIELD, None) is not None:
            return
        if is_dataclass(entity) and type(entity).__dataclass_params__.frozen:
            logger.debug(f"Not writing generated id {inserted_id} back onto frozen {type(entity).__name__}")
            return
        setattr(entity, ID_FIELD, inserted_id)
