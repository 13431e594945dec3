"""
Abstract base class for saved query storage.
The engine only relies on save and load; the rest backs the query history.
"""
from abc import ABC, abstractmethod
from typing import List
from src.models.query import QuerySnapshot
from src.models.saved_query import SavedQuery


class QueryStore(ABC):
    """Abstract repository interface for saved query snapshots."""

    @abstractmethod
    def save(self, snapshot: QuerySnapshot) -> str:
        """Persist a snapshot and return its query id."""
        pass

    @abstractmethod
    def load(self, query_id: str) -> QuerySnapshot:
        """Load the snapshot saved under query_id."""
        pass

    @abstractmethod
    def update(self, query_id: str, snapshot: QuerySnapshot) -> None:
        """Replace the snapshot saved under query_id."""
        pass

    @abstractmethod
    def delete(self, query_id: str) -> None:
        """Remove a saved snapshot."""
        pass

    @abstractmethod
    def list_all(self) -> List[SavedQuery]:
        """Return every saved query, oldest first."""
        pass
