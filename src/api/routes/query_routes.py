"""
Saved query API routes.
"""
from fastapi import APIRouter, Depends, status
from src.core.dependencies import get_saved_query_service
from src.models.dto.query_dto import (
    QuerySavedResponse,
    SaveQueryRequest,
    SavedQueryListResponse,
    SavedQueryResponse
)
from src.services.saved_query_service import SavedQueryService

router = APIRouter(prefix="/v1/api/queries", tags=["Saved Queries"])


@router.post("", response_model=QuerySavedResponse, status_code=status.HTTP_201_CREATED)
async def save_query(
    request: SaveQueryRequest,
    saved_query_service: SavedQueryService = Depends(get_saved_query_service)
):
    """
    Save the current criteria, filters and search term.

    - **title**: Required, non-blank
    - **description**: Optional

    At least one criterion, filter value or search term is required.
    """
    return saved_query_service.save_query(request)


@router.get("", response_model=SavedQueryListResponse)
async def list_queries(
    saved_query_service: SavedQueryService = Depends(get_saved_query_service)
):
    """List saved queries, oldest first."""
    return saved_query_service.list_queries()


@router.get("/{query_id}", response_model=SavedQueryResponse)
async def get_query(
    query_id: str,
    saved_query_service: SavedQueryService = Depends(get_saved_query_service)
):
    """Load a saved query."""
    return saved_query_service.get_query(query_id)


@router.put("/{query_id}", response_model=SavedQueryResponse)
async def update_query(
    query_id: str,
    request: SaveQueryRequest,
    saved_query_service: SavedQueryService = Depends(get_saved_query_service)
):
    """Replace a saved query's title, description and query state."""
    return saved_query_service.update_query(query_id, request)


@router.delete("/{query_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_query(
    query_id: str,
    saved_query_service: SavedQueryService = Depends(get_saved_query_service)
):
    """Delete a saved query."""
    saved_query_service.delete_query(query_id)
