"""Core domain entities."""

from .entity import Entity
from .order import Order
from .customer import Customer

__all__ = ["Entity", "Order", "Customer"]
