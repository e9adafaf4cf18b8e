"""Test fixtures for repository tests."""
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from repository_pattern.core.domain.entities import Customer, Order
from repository_pattern.infrastructure.database.repositories import (
    MongoCustomerRepository,
    MongoOrderRepository,
)


def acknowledged(value: bool = True) -> MagicMock:
    """A write result as returned by the driver."""
    return MagicMock(acknowledged=value, matched_count=1 if value else 0)


@pytest.fixture
def mock_collection():
    """A driver collection whose writes are acknowledged."""
    collection = MagicMock()
    collection.delete_one.return_value = acknowledged()
    collection.delete_many.return_value = acknowledged()
    return collection


@pytest.fixture
def mock_database(mock_collection):
    """A driver database holding the Order and Customer collections."""
    database = MagicMock()
    database.name = "shop"
    database.list_collection_names.return_value = ["Order", "Customer"]
    database.__getitem__.return_value = mock_collection
    return database


@pytest.fixture
def mocked_order_repository(mock_database):
    """Order repository over mocked driver objects."""
    return MongoOrderRepository(mock_database, max_workers=4)


# The in-memory store is not meant to be written from several threads, so
# repositories on top of it delete one key at a time.
@pytest.fixture
def order_repository(database):
    return MongoOrderRepository(database, max_workers=1)


@pytest.fixture
def customer_repository(database):
    return MongoCustomerRepository(database, max_workers=1)


@pytest.fixture
def sample_order() -> Order:
    """Create a sample Order entity for testing."""
    return Order(
        customer_id=ObjectId(),
        status="pending",
        items=["notebook", "pencil"],
        total=7.25,
    )


@pytest.fixture
def sample_customer() -> Customer:
    """Create a sample Customer entity for testing."""
    return Customer(
        name="Ada Lovelace",
        email="ada@example.com",
        phone="+44 20 7946 0000",
    )
