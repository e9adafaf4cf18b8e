"""Repository interfaces for domain entities."""

from .base_repository import BaseRepository, Predicate
from .order_repository import OrderRepository
from .customer_repository import CustomerRepository

__all__ = [
    "BaseRepository",
    "Predicate",
    "OrderRepository",
    "CustomerRepository",
]
