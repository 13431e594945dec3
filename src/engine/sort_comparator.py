"""
Record ordering.
Type-aware comparison of projected sort keys and a stable sort built on it.
"""
import math
import re
import unicodedata
from functools import cmp_to_key
from typing import List, Optional, Sequence, Tuple
from src.engine.field_projector import project
from src.models.drug_record import DrugRecord
from src.models.query import SortDirection, SortSpec


_WHOLE_NUMBER = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def collation_key(text: str) -> Tuple[str, str]:
    """
    Case- and accent-insensitive ordering key.

    Accented letters sort with their base letter; the lower-cased text breaks
    ties so the order stays total.
    """
    lowered = text.lower()
    nfkd_form = unicodedata.normalize('NFKD', lowered)
    base = "".join(c for c in nfkd_form if not unicodedata.combining(c))
    return base, lowered


def _as_number(text: str) -> Optional[float]:
    """Return the value if the whole string is a finite ASCII decimal number, else None."""
    stripped = text.strip()
    if not _WHOLE_NUMBER.fullmatch(stripped):
        return None
    value = float(stripped)
    return value if math.isfinite(value) else None


def sort_key(text: str) -> tuple:
    """
    Ordering key for one projected value.

    Numbers sort by value ahead of all text; text sorts by collation key.
    """
    number = _as_number(text)
    if number is not None:
        return 0, number
    return 1, collation_key(text)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare(a: DrugRecord, b: DrugRecord, sort_spec: Optional[SortSpec]) -> int:
    """
    Standard three-way comparator on the projected sort field.

    Args:
        a: First record
        b: Second record
        sort_spec: Field and direction; None leaves every pair equal

    Returns:
        Negative, zero or positive
    """
    if sort_spec is None:
        return 0

    result = _cmp(sort_key(project(a, sort_spec.field)), sort_key(project(b, sort_spec.field)))
    return -result if sort_spec.direction == SortDirection.DESC else result


def sort_records(records: Sequence[DrugRecord], sort_spec: Optional[SortSpec]) -> List[DrugRecord]:
    """Return a new, stably sorted list; without a sort spec the input order is kept."""
    if sort_spec is None:
        return list(records)
    return sorted(records, key=cmp_to_key(lambda a, b: compare(a, b, sort_spec)))
