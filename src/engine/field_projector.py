"""
Field projection for drug records.
Resolves a field key to one comparable string, whether the field lives on the
overview or is repeated across a sub-entity collection.
"""
from typing import Dict, NamedTuple, Tuple, Union
from src.models.drug_record import DrugRecord


class ParentField(NamedTuple):
    """Scalar attribute of the record overview."""
    attr: str


class SubEntityField(NamedTuple):
    """Attribute repeated across every entry of a sub-entity collection."""
    collection: str
    attr: str


class CombinedParentFields(NamedTuple):
    """Several overview scalars searched as one value."""
    attrs: Tuple[str, ...]


Accessor = Union[ParentField, SubEntityField, CombinedParentFields]


FIELD_ACCESSORS: Dict[str, Accessor] = {
    # Overview scalars
    "name": CombinedParentFields(("drug_name", "generic_name", "other_name")),
    "drug_name": ParentField("drug_name"),
    "generic_name": ParentField("generic_name"),
    "other_name": ParentField("other_name"),
    "primary_name": ParentField("primary_name"),
    "global_status": ParentField("global_status"),
    "development_status": ParentField("development_status"),
    "drug_summary": ParentField("drug_summary"),
    "originator": ParentField("originator"),
    "other_active_companies": ParentField("other_active_companies"),
    "therapeutic_area": ParentField("therapeutic_area"),
    "disease_type": ParentField("disease_type"),
    "regulator_designations": ParentField("regulator_designations"),
    "source_link": ParentField("source_link"),
    "drug_record_status": ParentField("drug_record_status"),
    "is_approved": ParentField("is_approved"),
    "created_at": ParentField("created_at"),
    "updated_at": ParentField("updated_at"),
    # Development status entries
    "therapeutic_class": SubEntityField("dev_status", "therapeutic_class"),
    "company": SubEntityField("dev_status", "company"),
    "company_type": SubEntityField("dev_status", "company_type"),
    "status": SubEntityField("dev_status", "status"),
    "reference": SubEntityField("dev_status", "reference"),
    "country": SubEntityField("dev_status", "country"),
    # Activity entries
    "mechanism_of_action": SubEntityField("activity", "mechanism_of_action"),
    "biological_target": SubEntityField("activity", "biological_target"),
    "drug_technology": SubEntityField("activity", "drug_technology"),
    "delivery_route": SubEntityField("activity", "delivery_route"),
    "delivery_medium": SubEntityField("activity", "delivery_medium"),
    # Development entries
    "preclinical": SubEntityField("development", "preclinical"),
    "trial_id": SubEntityField("development", "trial_id"),
    "title": SubEntityField("development", "title"),
    "primary_drugs": SubEntityField("development", "primary_drugs"),
    "sponsor": SubEntityField("development", "sponsor"),
    # Other sources
    "data": SubEntityField("other_sources", "data"),
    # Licensing and marketing entries
    "agreement": SubEntityField("licences_marketing", "agreement"),
    "licensing_availability": SubEntityField("licences_marketing", "licensing_availability"),
    "marketing_approvals": SubEntityField("licences_marketing", "marketing_approvals"),
    # Log entries
    "drug_changes_log": SubEntityField("logs", "drug_changes_log"),
    "created_date": SubEntityField("logs", "created_date"),
    "last_modified_user": SubEntityField("logs", "last_modified_user"),
    "full_review_user": SubEntityField("logs", "full_review_user"),
    "next_review_date": SubEntityField("logs", "next_review_date"),
    "notes": SubEntityField("logs", "notes"),
}


def project(record: DrugRecord, field_key: str) -> str:
    """
    Project a record onto a single comparable string.

    Sub-entity fields join every non-empty entry value with a single space,
    so a match cannot tell which entry it came from.

    Args:
        record: Drug record to read
        field_key: Symbolic field name

    Returns:
        Projected value; "" for unknown keys and missing values
    """
    if field_key == "drug_over_id":
        return record.drug_over_id or ""

    accessor = FIELD_ACCESSORS.get(field_key)
    if accessor is None:
        return ""

    if isinstance(accessor, ParentField):
        return _scalar_text(getattr(record.overview, accessor.attr, None))

    if isinstance(accessor, CombinedParentFields):
        values = (_scalar_text(getattr(record.overview, attr, None)) for attr in accessor.attrs)
        return " ".join(value for value in values if value)

    entries = getattr(record, accessor.collection, None) or []
    values = (_scalar_text(getattr(entry, accessor.attr, None)) for entry in entries)
    return " ".join(value for value in values if value)


def _scalar_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)
