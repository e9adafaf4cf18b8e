"""Order repository interface."""
from typing import Any, List

from bson import ObjectId

from .base_repository import BaseRepository
from ..entities.order import Order


class OrderRepository(BaseRepository[Order, ObjectId]):
    """
    Repository interface for Order entities.
    
    Defines the contract for Order persistence operations.
    """
    
    def get_by_customer(self, customer_id: ObjectId, *, session: Any = None) -> List[Order]:
        """
        Retrieve all Orders placed by a customer.
        
        Args:
            customer_id: ObjectId of the customer
            
        Returns:
            List of Order entities for that customer
        """
        pass
    
    def get_by_status(self, status: str, *, session: Any = None) -> List[Order]:
        """
        Retrieve Orders in a given status.
        
        Args:
            status: Order status (e.g., "pending", "shipped")
            
        Returns:
            List of Order entities with that status
        """
        pass
