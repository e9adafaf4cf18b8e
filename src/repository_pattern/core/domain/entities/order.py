"""Order entity used by the order repositories."""
from dataclasses import dataclass, field
from typing import List, Optional

from bson import ObjectId

from .entity import Entity


@dataclass
class Order(Entity[ObjectId]):
    """
    A customer order.

    ``id`` is generated client-side so an order can be referenced before it
    has been inserted.
    """
    customer_id: Optional[ObjectId] = None
    status: str = "pending"
    items: List[str] = field(default_factory=list)
    total: float = 0.0
    id: Optional[ObjectId] = field(default_factory=ObjectId)

    def __str__(self) -> str:
        """Return a string representation of the Order."""
        return f"Order(id={self.id}, status={self.status}, total={self.total})"
