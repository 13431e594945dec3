"""
Category filter evaluation.
Each category accepts a set of values (OR within a category); a record must
satisfy every constrained category (AND across categories).
"""
from typing import Dict, List, NamedTuple, Sequence
from src.engine.sort_comparator import collation_key
from src.models.drug_record import DrugRecord
from src.models.query import FilterState


MEMBERSHIP = "membership"
APPROVAL = "approval"
CONTAINS_ANY = "contains_any"
ANY_SUB_ENTITY = "any_sub_entity"


class CategoryRule(NamedTuple):
    kind: str
    attr: str
    collection: str = ""


# Keyed by FilterState attribute name
CATEGORY_RULES: Dict[str, CategoryRule] = {
    "global_statuses": CategoryRule(MEMBERSHIP, "global_status"),
    "development_statuses": CategoryRule(MEMBERSHIP, "development_status"),
    "therapeutic_areas": CategoryRule(MEMBERSHIP, "therapeutic_area"),
    "disease_types": CategoryRule(MEMBERSHIP, "disease_type"),
    "originators": CategoryRule(MEMBERSHIP, "originator"),
    "other_active_companies": CategoryRule(CONTAINS_ANY, "other_active_companies"),
    "regulator_designations": CategoryRule(CONTAINS_ANY, "regulator_designations"),
    "drug_record_status": CategoryRule(MEMBERSHIP, "drug_record_status"),
    "is_approved": CategoryRule(APPROVAL, "is_approved"),
    "company_types": CategoryRule(ANY_SUB_ENTITY, "company_type", "dev_status"),
    "mechanism_of_action": CategoryRule(ANY_SUB_ENTITY, "mechanism_of_action", "activity"),
    "biological_targets": CategoryRule(ANY_SUB_ENTITY, "biological_target", "activity"),
    "drug_technologies": CategoryRule(ANY_SUB_ENTITY, "drug_technology", "activity"),
    "delivery_routes": CategoryRule(ANY_SUB_ENTITY, "delivery_route", "activity"),
    "delivery_mediums": CategoryRule(ANY_SUB_ENTITY, "delivery_medium", "activity"),
    "therapeutic_classes": CategoryRule(ANY_SUB_ENTITY, "therapeutic_class", "dev_status"),
    "countries": CategoryRule(ANY_SUB_ENTITY, "country", "dev_status"),
    "primary_names": CategoryRule(MEMBERSHIP, "primary_name"),
}


def evaluate_categories(record: DrugRecord, filter_state: FilterState) -> bool:
    """
    Check a record against every constrained category.

    Args:
        record: Drug record to test
        filter_state: Accepted values per category

    Returns:
        True if each non-empty category accepts the record
    """
    for category, rule in CATEGORY_RULES.items():
        accepted = getattr(filter_state, category)
        if accepted and not _matches(record, rule, accepted):
            return False
    return True


def _matches(record: DrugRecord, rule: CategoryRule, accepted) -> bool:
    if rule.kind == MEMBERSHIP:
        return (getattr(record.overview, rule.attr) or "") in accepted

    if rule.kind == APPROVAL:
        return ("Yes" if record.overview.is_approved else "No") in accepted

    if rule.kind == CONTAINS_ANY:
        haystack = (getattr(record.overview, rule.attr) or "").lower()
        return any(value.lower() in haystack for value in accepted)

    entries = getattr(record, rule.collection, None) or []
    return any((getattr(entry, rule.attr) or "") in accepted for entry in entries)


def filter_options(records: Sequence[DrugRecord], category: str) -> List[str]:
    """
    Distinct non-empty values present in the collection for a category.

    Args:
        records: Bulk record collection
        category: FilterState attribute name

    Returns:
        Values in collation order

    Raises:
        KeyError: If the category is unknown
    """
    rule = CATEGORY_RULES[category]
    if rule.kind == APPROVAL:
        return ["No", "Yes"]

    values = set()
    for record in records:
        if rule.kind == ANY_SUB_ENTITY:
            for entry in getattr(record, rule.collection, None) or []:
                values.add(getattr(entry, rule.attr) or "")
        else:
            values.add(getattr(record.overview, rule.attr) or "")
    values.discard("")
    return sorted(values, key=collation_key)
