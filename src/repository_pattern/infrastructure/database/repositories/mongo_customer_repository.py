"""MongoDB implementation of the CustomerRepository."""
from typing import Any, Optional

from bson import ObjectId
from pymongo.database import Database

from repository_pattern.core.domain.entities.customer import Customer
from repository_pattern.core.domain.repositories.customer_repository import CustomerRepository
from repository_pattern.infrastructure.logging import get_logger
from .base_mongo_repository import BaseMongoRepository, DOCUMENT_ID_FIELD

logger = get_logger(__name__)


class MongoCustomerRepository(
    BaseMongoRepository[Customer, ObjectId],
    CustomerRepository
):
    """MongoDB implementation of the CustomerRepository."""
    
    def __init__(self, database: Database, max_workers: Optional[int] = None):
        super().__init__(database, Customer, max_workers)
    
    def get_by_email(self, email: str, *, session: Any = None) -> Optional[Customer]:
        """
        Retrieve the Customer registered with an email address.
        
        Raises:
            AmbiguousMatchError: If several customers share the address
        """
        return self.single_or_default({"email": email}, session=session)
    
    def update(self, customer: Customer, *, session: Any = None) -> bool:
        """
        Merge the set fields of ``customer`` into the stored document.
        
        Fields left as None keep their stored value, so a partially filled
        Customer can be used to change a single field.
        
        Returns:
            True if an existing customer was updated, False otherwise
        """
        if customer.id is None:
            logger.warning("Cannot update a Customer without an id")
            return False
        
        changes = {
            key: value
            for key, value in self._to_document(customer).items()
            if key != DOCUMENT_ID_FIELD and value is not None
        }
        if not changes:
            return False
        
        def merge() -> bool:
            result = self._collection.update_one(
                {DOCUMENT_ID_FIELD: customer.id}, {"$set": changes}, session=session
            )
            return result.acknowledged and result.matched_count == 1
        
        return self._attempt_write(f"update Customer {customer.id}", merge).succeeded
