"""
Drug API routes.
Handles HTTP endpoints for the bulk record set, query evaluation and export.
"""
from fastapi import APIRouter, Depends, Response
from src.services.drug_query_service import DrugQueryService
from src.core.dependencies import get_drug_query_service
from src.models.dto.query_dto import DrugListResponse, DrugSearchRequest, FilterOptionsResponse
from src.models.query import ViewResult

router = APIRouter(prefix="/v1/api", tags=["Drugs"])


@router.get("/drugs", response_model=DrugListResponse)
async def get_all_drugs(
    drug_query_service: DrugQueryService = Depends(get_drug_query_service)
):
    """
    Retrieve the complete drug record collection.

    No filtering, sorting or paging happens server-side on this endpoint.
    """
    return drug_query_service.get_all_drugs()


@router.post("/drugs/search", response_model=ViewResult)
async def search_drugs(
    request: DrugSearchRequest,
    drug_query_service: DrugQueryService = Depends(get_drug_query_service)
):
    """
    Evaluate a query against the full record collection.

    - **searchTerm**: Free-text search over names, therapeutic area and disease type
    - **criteria**: Criteria chain, combined strictly left to right
    - **filters**: Accepted values per category
    - **sort**: Sort field and direction
    - **page** / **pageSize**: Requested page
    """
    return drug_query_service.search(request)


@router.post("/drugs/export")
async def export_drugs(
    request: DrugSearchRequest,
    drug_query_service: DrugQueryService = Depends(get_drug_query_service)
):
    """
    Export every record matching the query as CSV.
    """
    filename, content = drug_query_service.export(request)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.get("/drugs/filter-options/{category}", response_model=FilterOptionsResponse)
async def get_filter_options(
    category: str,
    drug_query_service: DrugQueryService = Depends(get_drug_query_service)
):
    """
    List the distinct values present for a filter category.
    """
    return drug_query_service.get_filter_options(category)
