"""
Query state models.
Criteria, category filters, sort and page specifications, saved snapshots
and the view handed to the rendering layer.
"""
from enum import Enum
from typing import List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field, field_validator
from src.models.drug_record import DrugRecord


class Operator(str, Enum):
    """Comparison applied by a single criterion."""
    CONTAINS = "contains"
    IS = "is"
    IS_NOT = "is_not"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"


# Spellings emitted by the search modals
OPERATOR_ALIASES = {
    "greater_than_equal": Operator.GREATER_THAN_OR_EQUAL.value,
    "less_than_equal": Operator.LESS_THAN_OR_EQUAL.value,
}


class LogicOperator(str, Enum):
    AND = "AND"
    OR = "OR"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Criterion(BaseModel):
    """
    One (field, operator, value) test.

    `logic` binds this criterion to the next one in the chain and is absent
    on the last criterion.
    """
    model_config = ConfigDict(frozen=True)

    field: str
    operator: Operator
    value: str = ""
    logic: Optional[LogicOperator] = None

    @field_validator('operator', mode='before')
    @classmethod
    def resolve_alias(cls, v):
        if isinstance(v, str):
            return OPERATOR_ALIASES.get(v, v)
        return v

    @field_validator('value', mode='before')
    @classmethod
    def number_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class FilterState(BaseModel):
    """
    Accepted values per filter category.

    An empty set leaves its category unconstrained.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    global_statuses: Set[str] = Field(default_factory=set, alias="globalStatuses")
    development_statuses: Set[str] = Field(default_factory=set, alias="developmentStatuses")
    therapeutic_areas: Set[str] = Field(default_factory=set, alias="therapeuticAreas")
    disease_types: Set[str] = Field(default_factory=set, alias="diseaseTypes")
    originators: Set[str] = Field(default_factory=set, alias="originators")
    other_active_companies: Set[str] = Field(default_factory=set, alias="otherActiveCompanies")
    regulator_designations: Set[str] = Field(default_factory=set, alias="regulatorDesignations")
    drug_record_status: Set[str] = Field(default_factory=set, alias="drugRecordStatus")
    is_approved: Set[str] = Field(default_factory=set, alias="isApproved")
    company_types: Set[str] = Field(default_factory=set, alias="companyTypes")
    mechanism_of_action: Set[str] = Field(default_factory=set, alias="mechanismOfAction")
    biological_targets: Set[str] = Field(default_factory=set, alias="biologicalTargets")
    drug_technologies: Set[str] = Field(default_factory=set, alias="drugTechnologies")
    delivery_routes: Set[str] = Field(default_factory=set, alias="deliveryRoutes")
    delivery_mediums: Set[str] = Field(default_factory=set, alias="deliveryMediums")
    therapeutic_classes: Set[str] = Field(default_factory=set, alias="therapeuticClasses")
    countries: Set[str] = Field(default_factory=set, alias="countries")
    primary_names: Set[str] = Field(default_factory=set, alias="primaryNames")

    def active_count(self) -> int:
        """Total number of accepted values across all categories."""
        return sum(len(getattr(self, name)) for name in type(self).model_fields)


class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC


class PageSpec(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, alias="pageSize")


class QueryState(BaseModel):
    """Transient UI state owned by the caller and re-evaluated on every change."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    criteria: List[Criterion] = Field(default_factory=list)
    filter_state: FilterState = Field(default_factory=FilterState, alias="filters")
    search_term: str = Field(default="", alias="searchTerm")
    sort: Optional[SortSpec] = None
    page_spec: PageSpec = Field(default_factory=PageSpec, alias="pageSpec")


class QuerySnapshot(BaseModel):
    """Named combination of criteria, filters and search term kept by the query store."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    criteria: List[Criterion] = Field(default_factory=list)
    filter_state: FilterState = Field(default_factory=FilterState, alias="filters")
    search_term: str = Field(default="", alias="searchTerm")
    title: str = ""
    description: Optional[str] = None

    def has_constraints(self) -> bool:
        return bool(self.criteria) or self.filter_state.active_count() > 0 or self.search_term.strip() != ""


class Page(BaseModel):
    """One slice of an ordered collection."""
    page_items: List[DrugRecord]
    total: int
    total_pages: int


class ViewResult(BaseModel):
    """Everything the table layer needs to render one page."""
    page_items: List[DrugRecord]
    total: int
    total_pages: int
    page: int
    page_size: int
