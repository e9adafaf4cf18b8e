"""Repository implementations using MongoDB."""

from .base_mongo_repository import BaseMongoRepository, WriteOutcome
from .mongo_order_repository import MongoOrderRepository
from .mongo_customer_repository import MongoCustomerRepository

__all__ = [
    "BaseMongoRepository",
    "WriteOutcome",
    "MongoOrderRepository",
    "MongoCustomerRepository",
]
