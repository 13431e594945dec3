"""
Fixed-size pagination of an ordered collection.
"""
import math
from typing import Sequence
from src.models.drug_record import DrugRecord
from src.models.query import Page, PageSpec


def paginate(items: Sequence[DrugRecord], page_spec: PageSpec) -> Page:
    """
    Slice one page out of the collection.

    Pages are 1-based. A page past the end is empty; clamping the page number
    is the caller's job.

    Args:
        items: Filtered and sorted records
        page_spec: Requested page and page size

    Returns:
        Page with its items, the total count and the page count
    """
    total = len(items)
    total_pages = math.ceil(total / page_spec.page_size)
    start_index = (page_spec.page - 1) * page_spec.page_size
    page_items = list(items[start_index:start_index + page_spec.page_size])
    return Page(page_items=page_items, total=total, total_pages=total_pages)
