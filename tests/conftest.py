"""
Shared test fixtures and utilities.
"""
import pytest
from src.models.drug_record import DrugRecord


def _build_record(drug_over_id="drug-1", **overview_and_collections):
    collections = {
        key: overview_and_collections.pop(key)
        for key in ("devStatus", "activity", "development", "otherSources", "licencesMarketing", "logs")
        if key in overview_and_collections
    }
    overview = {"id": drug_over_id, **overview_and_collections}
    return DrugRecord.model_validate({"drug_over_id": drug_over_id, "overview": overview, **collections})


@pytest.fixture
def make_record():
    """Factory for drug records; overview fields and camelCase collections as keyword arguments."""
    return _build_record


@pytest.fixture
def scenario_records(make_record):
    """Three drugs, two of them launched."""
    return [
        make_record("d1", drug_name="Aspirin", global_status="launched"),
        make_record("d2", drug_name="Betazol", global_status="preclinical"),
        make_record("d3", drug_name="Cetrovix", global_status="launched"),
    ]


@pytest.fixture
def sample_records(make_record):
    """Records with populated sub-entity collections."""
    return [
        make_record(
            "d1",
            drug_name="Aspirin",
            generic_name="acetylsalicylic acid",
            therapeutic_area="Cardiology",
            disease_type="Thrombosis",
            global_status="Launched",
            primary_name="Aspirin",
            is_approved=True,
            created_at="2023-03-01T10:00:00",
            devStatus=[
                {"company": "Bayer", "company_type": "Originator", "therapeutic_class": "NSAID", "country": "Germany"},
                {"company": "Generico", "company_type": "Licensee", "therapeutic_class": "Antiplatelet", "country": "India"},
            ],
            activity=[{"mechanism_of_action": "COX inhibitor", "biological_target": "COX-1", "delivery_route": "Oral"}],
        ),
        make_record(
            "d2",
            drug_name="Betazol",
            therapeutic_area="Oncology",
            disease_type="Lung cancer",
            global_status="Phase II",
            primary_name="Betazol",
            created_at="2024-07-15T08:30:00",
            devStatus=[{"company": "Novagen", "company_type": "Originator", "therapeutic_class": "Kinase inhibitor", "country": "United States"}],
            activity=[{"mechanism_of_action": "EGFR inhibitor", "biological_target": "EGFR", "delivery_route": "Oral"}],
        ),
        make_record(
            "d3",
            drug_name="Cetrovix",
            other_name="CTX-44",
            therapeutic_area="Oncology",
            global_status="Launched",
            regulator_designations="Orphan Drug, Fast Track",
            other_active_companies="Pfizer; Roche",
            created_at="2022-11-20T12:00:00",
            devStatus=None,
            activity=[],
        ),
    ]
