"""
Saved Query Service for business logic.
Validates and persists query snapshots through the query store.
"""
import logging
from src.core.exceptions import ValidationException
from src.models.dto.query_dto import (
    QuerySavedResponse,
    SaveQueryRequest,
    SavedQueryListResponse,
    SavedQueryResponse
)
from src.models.query import QuerySnapshot
from src.models.saved_query import SavedQuery
from src.repositories.saved_query_repository import SavedQueryRepository

logger = logging.getLogger(__name__)


class SavedQueryService:
    """Service for saved query operations."""

    def __init__(self, query_repository: SavedQueryRepository = None):
        self.query_repository = query_repository or SavedQueryRepository()

    def save_query(self, request: SaveQueryRequest) -> QuerySavedResponse:
        """
        Save the current criteria, filters and search term under a title.

        Args:
            request: Title, description and query state

        Returns:
            QuerySavedResponse with the new query id

        Raises:
            ValidationException: If there is nothing to save
            DynamoDBException: If the save fails
        """
        snapshot = self._validated_snapshot(request)
        query_id = self.query_repository.save(snapshot)
        logger.info("Saved query %s (%s)", query_id, snapshot.title)
        return QuerySavedResponse(query_id=query_id, message="Query saved successfully")

    def update_query(self, query_id: str, request: SaveQueryRequest) -> SavedQueryResponse:
        """
        Replace an existing saved query.

        Raises:
            ValidationException: If there is nothing to save
            QueryNotFoundException: If query_id does not exist
            DynamoDBException: If the update fails
        """
        snapshot = self._validated_snapshot(request)
        self.query_repository.update(query_id, snapshot)
        logger.info("Updated query %s", query_id)
        return self._to_response(self.query_repository.get_by_id(query_id))

    def get_query(self, query_id: str) -> SavedQueryResponse:
        """
        Load a saved query.

        Raises:
            QueryNotFoundException: If query_id does not exist
            DynamoDBException: If the lookup fails
        """
        return self._to_response(self.query_repository.get_by_id(query_id))

    def list_queries(self) -> SavedQueryListResponse:
        """List every saved query, oldest first."""
        queries = [self._to_response(saved) for saved in self.query_repository.list_all()]
        return SavedQueryListResponse(queries=queries, count=len(queries))

    def delete_query(self, query_id: str) -> None:
        """
        Delete a saved query.

        Raises:
            QueryNotFoundException: If query_id does not exist
            DynamoDBException: If the delete fails
        """
        self.query_repository.delete(query_id)
        logger.info("Deleted query %s", query_id)

    def _validated_snapshot(self, request: SaveQueryRequest) -> QuerySnapshot:
        snapshot = request.to_snapshot()
        if not snapshot.has_constraints():
            raise ValidationException("No filters or search criteria to save")
        return snapshot

    def _to_response(self, saved: SavedQuery) -> SavedQueryResponse:
        snapshot = saved.snapshot
        return SavedQueryResponse(
            query_id=saved.query_id,
            title=snapshot.title,
            description=snapshot.description,
            query_type=saved.query_type,
            criteria=snapshot.criteria,
            filters=snapshot.filter_state,
            search_term=snapshot.search_term,
            created_at=saved.created_at,
            updated_at=saved.updated_at
        )
