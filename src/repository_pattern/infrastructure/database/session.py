"""Database session management module."""

import contextlib
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.client_session import ClientSession

from .client import get_client


@contextlib.contextmanager
def get_db_session(client: Optional[MongoClient] = None) -> Iterator[ClientSession]:
    """
    Context manager that provides a MongoDB client session.
    
    Yields:
        ClientSession: Session to pass to repository operations.
        
    Example:
        ```
        with get_db_session() as session:
            orders = repo.find({"status": "pending"}, session=session)
        ```
    """
    client = client or get_client()
    session = client.start_session()
    try:
        yield session
    finally:
        session.end_session()
