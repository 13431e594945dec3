"""
Domain model for drug records.
Denormalized aggregate of a drug overview and its sub-entity collections,
shaped after the bulk payload returned by the records endpoint.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Entity(BaseModel):
    """Immutable base for every part of a record."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class DrugOverview(_Entity):
    """Singular parent entity with scalar attributes."""
    id: str = ""
    drug_name: Optional[str] = None
    generic_name: Optional[str] = None
    other_name: Optional[str] = None
    primary_name: Optional[str] = None
    global_status: Optional[str] = None
    development_status: Optional[str] = None
    drug_summary: Optional[str] = None
    originator: Optional[str] = None
    other_active_companies: Optional[str] = None
    therapeutic_area: Optional[str] = None
    disease_type: Optional[str] = None
    regulator_designations: Optional[str] = None
    source_link: Optional[str] = None
    drug_record_status: Optional[str] = None
    is_approved: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DevStatus(_Entity):
    id: str = ""
    drug_over_id: str = ""
    disease_type: Optional[str] = None
    therapeutic_class: Optional[str] = None
    company: Optional[str] = None
    company_type: Optional[str] = None
    status: Optional[str] = None
    reference: Optional[str] = None
    country: Optional[str] = None


class Activity(_Entity):
    id: str = ""
    drug_over_id: str = ""
    mechanism_of_action: Optional[str] = None
    biological_target: Optional[str] = None
    drug_technology: Optional[str] = None
    delivery_route: Optional[str] = None
    delivery_medium: Optional[str] = None


class Development(_Entity):
    id: str = ""
    drug_over_id: str = ""
    preclinical: Optional[str] = None
    trial_id: Optional[str] = None
    title: Optional[str] = None
    primary_drugs: Optional[str] = None
    status: Optional[str] = None
    sponsor: Optional[str] = None


class OtherSource(_Entity):
    id: str = ""
    drug_over_id: str = ""
    data: Optional[str] = None


class LicenceMarketing(_Entity):
    id: str = ""
    drug_over_id: str = ""
    agreement: Optional[str] = None
    licensing_availability: Optional[str] = None
    marketing_approvals: Optional[str] = None


class LogEntry(_Entity):
    id: str = ""
    drug_over_id: str = ""
    drug_changes_log: Optional[str] = None
    created_date: Optional[str] = None
    last_modified_user: Optional[str] = None
    full_review_user: Optional[str] = None
    next_review_date: Optional[str] = None
    notes: Optional[str] = None


class DrugRecord(_Entity):
    """
    One drug: exactly one overview plus ordered sub-entity collections.

    Collection order is display order only; filtering never depends on it.
    """
    drug_over_id: str
    overview: DrugOverview
    dev_status: List[DevStatus] = Field(default_factory=list, alias="devStatus")
    activity: List[Activity] = Field(default_factory=list)
    development: List[Development] = Field(default_factory=list)
    other_sources: List[OtherSource] = Field(default_factory=list, alias="otherSources")
    licences_marketing: List[LicenceMarketing] = Field(default_factory=list, alias="licencesMarketing")
    logs: List[LogEntry] = Field(default_factory=list)

    @field_validator(
        'dev_status', 'activity', 'development', 'other_sources', 'licences_marketing', 'logs',
        mode='before'
    )
    @classmethod
    def none_as_empty(cls, v):
        # Payloads occasionally carry null instead of an empty list
        return [] if v is None else v

    def __repr__(self):
        return f"DrugRecord(drug_over_id={self.drug_over_id}, drug_name={self.overview.drug_name})"
