"""
Abstract base class for drug record repositories.
Defines the contract for the bulk record source.
"""
from abc import ABC, abstractmethod
from typing import List
from src.models.drug_record import DrugRecord


class DBRepository(ABC):
    """Abstract repository interface for drug record operations."""

    @abstractmethod
    def find_all(self) -> List[DrugRecord]:
        """Retrieve the entire record collection, unfiltered."""
        pass

    @abstractmethod
    def save(self, record: DrugRecord) -> None:
        """Save a single drug record."""
        pass

    @abstractmethod
    def batch_save(self, records: List[DrugRecord]) -> None:
        """Save multiple drug records in batches."""
        pass
