"""MongoDB client module."""

import threading
from typing import List, Optional

from pymongo import MongoClient
from pymongo.database import Database

from repository_pattern.infrastructure.logging import get_logger
from .config import MongoSettings

logger = get_logger(__name__)

_CLIENT_LOCK = threading.Lock()
_client: Optional[MongoClient] = None


def get_client(settings: Optional[MongoSettings] = None) -> MongoClient:
    """
    Get or create the shared MongoDB client.
    
    MongoClient keeps its own connection pool and is safe to share across
    threads, so one instance serves the whole process.
    
    Args:
        settings: Connection settings; read from the environment if omitted.
            Only used when the client is first created.
    
    Returns:
        MongoClient: Shared client instance.
    """
    global _client
    with _CLIENT_LOCK:
        if _client is None:
            settings = settings or MongoSettings.from_environment()
            _client = MongoClient(
                settings.url,
                serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            )
            logger.info("Created MongoDB client")
        return _client


def close_client() -> None:
    """Close the shared client, if one was created."""
    global _client
    with _CLIENT_LOCK:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("Closed MongoDB client")


def get_database(name: Optional[str] = None, settings: Optional[MongoSettings] = None) -> Database:
    """
    Get a database handle from the shared client.
    
    Args:
        name: Database name; defaults to the configured database.
        settings: Connection settings; read from the environment if omitted.
    """
    settings = settings or MongoSettings.from_environment()
    return get_client(settings)[name or settings.database]


def create_collections(database: Database, *entity_classes: type) -> List[str]:
    """
    Create the collection for each entity class if it does not exist yet.
    
    Collections are named after the entity class, which is what repositories
    expect to find.
    
    Returns:
        Names of the collections that were created.
    """
    existing = set(database.list_collection_names())
    created = []
    for entity_class in entity_classes:
        name = entity_class.__name__
        if name not in existing:
            database.create_collection(name)
            existing.add(name)
            created.append(name)
    if created:
        logger.info(f"Created collections: {', '.join(created)}")
    return created
