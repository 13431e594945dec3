"""
Query pipeline.
Search, criteria chain, category filters, sort and pagination recomputed as
one pure function of the caller's state.
"""
from typing import List, Optional, Sequence
from src.engine.category_filter import evaluate_categories
from src.engine.chain_evaluator import evaluate_chain
from src.engine.paginator import paginate
from src.engine.sort_comparator import sort_records
from src.engine.text_search import matches_search_term
from src.models.drug_record import DrugRecord
from src.models.query import Criterion, FilterState, PageSpec, QueryState, SortSpec, ViewResult


def filter_records(
    records: Sequence[DrugRecord],
    criteria: Sequence[Criterion],
    filter_state: FilterState,
    search_term: str
) -> List[DrugRecord]:
    """Records passing the search term, the criteria chain and every category, in input order."""
    return [
        record for record in records
        if matches_search_term(record, search_term)
        and evaluate_chain(record, criteria)
        and evaluate_categories(record, filter_state)
    ]


def recompute(
    records: Sequence[DrugRecord],
    criteria: Sequence[Criterion],
    filter_state: FilterState,
    search_term: str,
    sort_spec: Optional[SortSpec],
    page_spec: PageSpec
) -> ViewResult:
    """
    Derive the visible page from the full record collection.

    The input collection is never mutated; every stage allocates a new list.

    Args:
        records: Full bulk collection in fetch order
        criteria: Criteria chain
        filter_state: Category filters
        search_term: Free-text search
        sort_spec: Sort field and direction, or None for fetch order
        page_spec: Requested page

    Returns:
        ViewResult for the rendering layer
    """
    filtered = filter_records(records, criteria, filter_state, search_term)
    ordered = sort_records(filtered, sort_spec)
    page = paginate(ordered, page_spec)
    return ViewResult(
        page_items=page.page_items,
        total=page.total,
        total_pages=page.total_pages,
        page=page_spec.page,
        page_size=page_spec.page_size
    )


def recompute_state(records: Sequence[DrugRecord], state: QueryState) -> ViewResult:
    return recompute(
        records,
        state.criteria,
        state.filter_state,
        state.search_term,
        state.sort,
        state.page_spec
    )


def apply_page_reset(previous: QueryState, current: QueryState) -> QueryState:
    """
    Return to page 1 when the result set changes.

    A new search term, criteria chain, filter state or page size resets the
    page; changing only the sort field or direction keeps it.
    """
    if (
        previous.search_term != current.search_term
        or previous.criteria != current.criteria
        or previous.filter_state != current.filter_state
        or previous.page_spec.page_size != current.page_spec.page_size
    ):
        reset_page = PageSpec(page=1, page_size=current.page_spec.page_size)
        return current.model_copy(update={"page_spec": reset_page})
    return current
