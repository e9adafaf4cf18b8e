"""Database module initialization."""

from .config import MongoSettings
from .client import get_client, close_client, get_database, create_collections
from .session import get_db_session

__all__ = [
    "MongoSettings",
    "get_client",
    "close_client",
    "get_database",
    "create_collections",
    "get_db_session",
]
