"""Customer repository interface."""
from typing import Any, Optional

from bson import ObjectId

from .base_repository import BaseRepository
from ..entities.customer import Customer


class CustomerRepository(BaseRepository[Customer, ObjectId]):
    """Repository interface for Customer entities."""
    
    def get_by_email(self, email: str, *, session: Any = None) -> Optional[Customer]:
        """
        Retrieve the Customer registered with an email address.
        
        Args:
            email: Email address to look up
            
        Returns:
            The Customer if found, None otherwise
        """
        pass
