"""
Drug Query Service for business logic.
Fetches the bulk record collection and runs the query engine over it.
"""
import logging
from datetime import date
from typing import Tuple
from src.core.exceptions import ValidationException
from src.engine.category_filter import filter_options
from src.engine.pipeline import filter_records, recompute_state
from src.engine.sort_comparator import sort_records
from src.models.dto.query_dto import DrugListResponse, DrugSearchRequest, FilterOptionsResponse
from src.models.query import FilterState, ViewResult
from src.repositories.db_repository import DBRepository
from src.repositories.dynamo_repository import DynamoRepository
from src.services.export_service import ExportService

logger = logging.getLogger(__name__)


class DrugQueryService:
    """Service for drug record queries."""

    def __init__(
        self,
        db_repository: DBRepository = None,
        export_service: ExportService = None
    ):
        self.db_repository = db_repository or DynamoRepository()
        self.export_service = export_service or ExportService()

    def get_all_drugs(self) -> DrugListResponse:
        """
        Retrieve the full, unfiltered record collection.

        Returns:
            DrugListResponse with all records in fetch order

        Raises:
            DynamoDBException: If scan fails
        """
        records = self.db_repository.find_all()
        return DrugListResponse(drugs=records, count=len(records))

    def search(self, request: DrugSearchRequest) -> ViewResult:
        """
        Evaluate search, criteria, filters, sort and pagination.

        Args:
            request: Query state sent by the client

        Returns:
            ViewResult with the requested page

        Raises:
            DynamoDBException: If the record fetch fails
        """
        records = self.db_repository.find_all()
        result = recompute_state(records, request.to_state())
        logger.debug(
            "Query matched %d of %d records (page %d of %d)",
            result.total, len(records), result.page, result.total_pages
        )
        return result

    def export(self, request: DrugSearchRequest) -> Tuple[str, str]:
        """
        Export every record matching the query, not just the requested page.

        Args:
            request: Query state sent by the client; paging is ignored

        Returns:
            Tuple of (filename, CSV content)

        Raises:
            DynamoDBException: If the record fetch fails
            ExportException: If rendering fails
        """
        state = request.to_state()
        records = self.db_repository.find_all()
        matched = filter_records(records, state.criteria, state.filter_state, state.search_term)
        ordered = sort_records(matched, state.sort)
        logger.info("Exporting %d drug records", len(ordered))
        content = self.export_service.export_csv(ordered)
        return self.export_service.export_filename(date.today().isoformat()), content

    def get_filter_options(self, category: str) -> FilterOptionsResponse:
        """
        List the values a filter category can take in the current collection.

        Args:
            category: Category name, e.g. "primaryNames" or "primary_names"

        Returns:
            FilterOptionsResponse with the sorted distinct values

        Raises:
            ValidationException: If the category is unknown
        """
        attribute = self._category_attribute(category)
        records = self.db_repository.find_all()
        return FilterOptionsResponse(category=category, options=filter_options(records, attribute))

    def _category_attribute(self, category: str) -> str:
        """Resolve a category alias or attribute name to the FilterState attribute."""
        for name, field in FilterState.model_fields.items():
            if category in (name, field.alias):
                return name
        raise ValidationException(f"Unknown filter category: {category}")
