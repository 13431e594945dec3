"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.repositories.db_repository import DBRepository
from src.repositories.dynamo_repository import DynamoRepository
from src.repositories.saved_query_repository import SavedQueryRepository
from src.services.drug_query_service import DrugQueryService
from src.services.export_service import ExportService
from src.services.saved_query_service import SavedQueryService


@lru_cache()
def get_dynamo_repository() -> DBRepository:
    """Get DBRepository singleton instance."""
    return DynamoRepository()


@lru_cache()
def get_saved_query_repository() -> SavedQueryRepository:
    """Get SavedQueryRepository singleton instance."""
    return SavedQueryRepository()


@lru_cache()
def get_export_service() -> ExportService:
    """Get ExportService singleton instance."""
    return ExportService()


@lru_cache()
def get_drug_query_service() -> DrugQueryService:
    """Get DrugQueryService singleton instance with injected dependencies."""
    return DrugQueryService(
        db_repository=get_dynamo_repository(),
        export_service=get_export_service()
    )


@lru_cache()
def get_saved_query_service() -> SavedQueryService:
    """Get SavedQueryService singleton instance with injected dependencies."""
    return SavedQueryService(query_repository=get_saved_query_repository())
