"""repository_pattern - Generic repositories over MongoDB collections.

A repository binds one entity type to the collection named after it and
exposes a uniform CRUD contract: get by id, get all, find by predicate,
single match, add one or many, remove by entity, id or predicate, and an
entity-specific update.
"""

__version__ = "1.0.0"

from .core.errors import (
    RepositoryPatternError,
    ConfigurationError,
    ValidationError,
    CollectionNotFoundError,
    AmbiguousMatchError,
)
from .core.domain.entities import Entity, Order, Customer
from .core.domain.repositories import BaseRepository, Predicate
from .infrastructure.database import MongoSettings, get_database, create_collections, get_db_session
from .infrastructure.database.repositories import (
    BaseMongoRepository,
    MongoOrderRepository,
    MongoCustomerRepository,
)

__all__ = [
    "__version__",
    "RepositoryPatternError",
    "ConfigurationError",
    "ValidationError",
    "CollectionNotFoundError",
    "AmbiguousMatchError",
    "Entity",
    "Order",
    "Customer",
    "BaseRepository",
    "Predicate",
    "MongoSettings",
    "get_database",
    "create_collections",
    "get_db_session",
    "BaseMongoRepository",
    "MongoOrderRepository",
    "MongoCustomerRepository",
]
