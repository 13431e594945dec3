"""
Data Transfer Objects for the Drug Query API.
Defines request and response schemas for API endpoints.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from src.core import config
from src.models.drug_record import DrugRecord
from src.models.query import Criterion, FilterState, PageSpec, QuerySnapshot, QueryState, SortSpec


class DrugSearchRequest(BaseModel):
    """Request schema for evaluating a query against the full record set."""
    model_config = ConfigDict(populate_by_name=True)

    criteria: List[Criterion] = Field(default_factory=list, description="Criteria chain, folded left to right")
    filters: FilterState = Field(default_factory=FilterState, description="Accepted values per category")
    search_term: str = Field(default="", alias="searchTerm", description="Free-text search")
    sort: Optional[SortSpec] = Field(default=None, description="Sort field and direction")
    page: int = Field(default=1, ge=1, description="1-based page number")
    page_size: Optional[int] = Field(default=None, ge=1, alias="pageSize", description="Items per page")

    @field_validator('page_size')
    @classmethod
    def validate_page_size(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v > config.settings.pagination_max_page_size:
            raise ValueError(f"pageSize must not exceed {config.settings.pagination_max_page_size}")
        return v

    def to_state(self) -> QueryState:
        page_size = self.page_size or config.settings.pagination_default_page_size
        return QueryState(
            criteria=self.criteria,
            filter_state=self.filters,
            search_term=self.search_term,
            sort=self.sort,
            page_spec=PageSpec(page=self.page, page_size=page_size)
        )


class DrugListResponse(BaseModel):
    """Response schema for listing the bulk record collection."""
    drugs: List[DrugRecord]
    count: int


class FilterOptionsResponse(BaseModel):
    """Response schema for the selectable values of one filter category."""
    category: str
    options: List[str]


class SaveQueryRequest(BaseModel):
    """Request schema for saving or updating a query."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=200, description="Query title")
    description: Optional[str] = Field(default=None, max_length=1000, description="Optional description")
    criteria: List[Criterion] = Field(default_factory=list)
    filters: FilterState = Field(default_factory=FilterState)
    search_term: str = Field(default="", alias="searchTerm")

    @field_validator('title')
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or v.strip() == "":
            raise ValueError("Title is required")
        return v.strip()

    @field_validator('description')
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v.strip() == "":
            return None
        return v.strip()

    def to_snapshot(self) -> QuerySnapshot:
        return QuerySnapshot(
            criteria=self.criteria,
            filter_state=self.filters,
            search_term=self.search_term,
            title=self.title,
            description=self.description
        )


class QuerySavedResponse(BaseModel):
    """Response schema for a successful save."""
    query_id: str = Field(..., description="Identifier of the saved query")
    message: str = Field(..., description="Status message")


class SavedQueryResponse(BaseModel):
    """Response schema for a saved query."""
    model_config = ConfigDict(populate_by_name=True)

    query_id: str
    title: str
    description: Optional[str] = None
    query_type: str
    criteria: List[Criterion]
    filters: FilterState
    search_term: str = Field(alias="searchTerm")
    created_at: datetime
    updated_at: datetime


class SavedQueryListResponse(BaseModel):
    """Response schema for listing saved queries."""
    queries: List[SavedQueryResponse]
    count: int
