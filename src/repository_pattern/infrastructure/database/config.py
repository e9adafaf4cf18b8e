"""Database configuration module."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from repository_pattern.core.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_MONGODB_URL = "mongodb://localhost:27017"
DEFAULT_DATABASE_NAME = "repository_pattern"
# Matches the initial task-list capacity of the bulk remove fan-out
DEFAULT_REMOVE_RANGE_MAX_WORKERS = 8


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class MongoSettings:
    """Connection and repository settings for MongoDB."""

    url: str = DEFAULT_MONGODB_URL
    database: str = DEFAULT_DATABASE_NAME
    server_selection_timeout_ms: int = 30000
    remove_range_max_workers: int = DEFAULT_REMOVE_RANGE_MAX_WORKERS

    def __post_init__(self):
        if self.remove_range_max_workers < 1:
            raise ConfigurationError(
                f"remove_range_max_workers must be at least 1, got {self.remove_range_max_workers}"
            )

    @classmethod
    def from_environment(cls) -> 'MongoSettings':
        """Create settings from environment variables with fallback to defaults."""
        return cls(
            url=os.getenv("MONGODB_URL", DEFAULT_MONGODB_URL),
            database=os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE_NAME),
            server_selection_timeout_ms=_int_from_env("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 30000),
            remove_range_max_workers=_int_from_env(
                "MONGODB_REMOVE_RANGE_MAX_WORKERS", DEFAULT_REMOVE_RANGE_MAX_WORKERS
            ),
        )
