"""Custom exception types for the repository pattern package."""
from typing import Any, Mapping, Optional


class RepositoryPatternError(Exception):
    """Base class for exceptions in repository_pattern."""
    pass

class ConfigurationError(RepositoryPatternError):
    """Exception raised for errors in configuration."""
    pass

class DomainError(RepositoryPatternError):
    """Exception raised for errors related to domain logic."""
    pass

class InfrastructureError(RepositoryPatternError):
    """Exception raised for errors in the infrastructure layer (e.g., the document database)."""
    pass

class ValidationError(DomainError):
    """Exception raised for data validation errors within domain entities."""
    pass

class NotFoundError(InfrastructureError):
    """Exception raised when a requested resource is not found (e.g., a collection in the database)."""
    pass

class CollectionNotFoundError(NotFoundError):
    """Raised when a repository is bound to a collection that does not exist."""

    def __init__(self, collection_name: str, database_name: Optional[str] = None):
        self.collection_name = collection_name
        self.database_name = database_name
        location = f" in database \"{database_name}\"" if database_name else " in database"
        super().__init__(f"No collection named \"{collection_name}\" found{location}!")

class AmbiguousMatchError(InfrastructureError):
    """Raised when a single-match query finds more than one document."""

    def __init__(self, collection_name: str, predicate: Mapping[str, Any]):
        self.collection_name = collection_name
        self.predicate = dict(predicate)
        super().__init__(
            f"More than one document in \"{collection_name}\" matches {self.predicate!r}"
        )
