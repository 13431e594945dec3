"""
Free-text search over the identifying overview fields.
"""
from src.engine.field_projector import project
from src.models.drug_record import DrugRecord


SEARCH_FIELDS = ("drug_name", "generic_name", "other_name", "therapeutic_area", "disease_type")


def matches_search_term(record: DrugRecord, search_term: str) -> bool:
    """Case-insensitive substring match against any searchable field; an empty term matches everything."""
    if search_term == "":
        return True
    needle = search_term.lower()
    return any(needle in project(record, field_key).lower() for field_key in SEARCH_FIELDS)
