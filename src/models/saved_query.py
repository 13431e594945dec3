"""
Saved Query domain model.
A query snapshot together with its storage metadata.
"""
from datetime import datetime
from src.models.query import QuerySnapshot


DRUG_DASHBOARD_QUERY_TYPE = "drug_dashboard"


class SavedQuery:
    """Domain model for a stored query snapshot."""

    def __init__(
        self,
        query_id: str,
        snapshot: QuerySnapshot,
        created_at: datetime,
        updated_at: datetime,
        query_type: str = DRUG_DASHBOARD_QUERY_TYPE
    ):
        self.query_id = query_id
        self.snapshot = snapshot
        self.created_at = created_at
        self.updated_at = updated_at
        self.query_type = query_type

    def __repr__(self):
        return f"SavedQuery(query_id={self.query_id}, title={self.snapshot.title}, query_type={self.query_type})"
