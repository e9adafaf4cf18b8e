import os
import sys
import uuid

import mongomock
import pytest

# Add the src directory to the Python path so tests run without installing
SRC_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from repository_pattern.core.domain.entities import Customer, Order
from repository_pattern.infrastructure.database.client import create_collections


# Register custom markers
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test that exercises several operations together"
    )


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def database(mongo_client):
    """A fresh database with the Order and Customer collections created."""
    db = mongo_client[f"repository_pattern_test_{uuid.uuid4().hex[:8]}"]
    create_collections(db, Order, Customer)
    return db
