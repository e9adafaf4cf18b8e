"""Customer entity."""
from dataclasses import dataclass
from typing import Optional

from bson import ObjectId

from .entity import Entity


@dataclass
class Customer(Entity[ObjectId]):
    """
    A customer placing orders.

    Leaving ``id`` unset lets the database assign one on insert.
    """
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[ObjectId] = None
