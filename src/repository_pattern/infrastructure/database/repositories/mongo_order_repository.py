"""MongoDB implementation of the OrderRepository."""
from typing import Any, List, Optional

from bson import ObjectId
from pymongo.database import Database

from repository_pattern.core.domain.entities.order import Order
from repository_pattern.core.domain.repositories.order_repository import OrderRepository
from repository_pattern.infrastructure.logging import get_logger
from .base_mongo_repository import BaseMongoRepository, DOCUMENT_ID_FIELD

logger = get_logger(__name__)


class MongoOrderRepository(
    BaseMongoRepository[Order, ObjectId],
    OrderRepository
):
    """MongoDB implementation of the OrderRepository."""
    
    def __init__(self, database: Database, max_workers: Optional[int] = None):
        """
        Initialize the repository with a MongoDB database.
        
        Args:
            database: Database holding the "Order" collection
            max_workers: Concurrency bound for bulk removal
        """
        super().__init__(database, Order, max_workers)
    
    def get_by_customer(self, customer_id: ObjectId, *, session: Any = None) -> List[Order]:
        return self.find({"customer_id": customer_id}, session=session)
    
    def get_by_status(self, status: str, *, session: Any = None) -> List[Order]:
        return self.find({"status": status}, session=session)
    
    def update(self, order: Order, *, session: Any = None) -> bool:
        """
        Replace the stored order with ``order``.
        
        Orders are small and always written as a whole, so the full document
        is replaced.
        
        Returns:
            True if an existing order was replaced, False if it does not
            exist or the write failed
        """
        if order.id is None:
            logger.warning("Cannot update an Order without an id")
            return False
        
        document = self._to_document(order)
        
        def replace() -> bool:
            result = self._collection.replace_one({DOCUMENT_ID_FIELD: order.id}, document, session=session)
            return result.acknowledged and result.matched_count == 1
        
        return self._attempt_write(f"replace Order {order.id}", replace).succeeded
