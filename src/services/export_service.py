"""
Export Service for CSV generation.
Renders filtered drug records into the spreadsheet layout used by the admin table.
"""
import csv
import io
from datetime import datetime
from typing import List, Sequence
from src.core.exceptions import ExportException
from src.models.drug_record import DrugRecord


class ExportService:
    """Service for file export operations."""

    COLUMNS = [
        'Drug ID',
        'Drug Name',
        'Generic Name',
        'Therapeutic Area',
        'Disease Type',
        'Global Status',
        'Development Status',
        'Originator',
        'Created Date'
    ]

    def export_csv(self, records: Sequence[DrugRecord]) -> str:
        """
        Render drug records as CSV text.

        Args:
            records: Records to export, in display order

        Returns:
            CSV content with a header row

        Raises:
            ExportException: If rendering fails
        """
        try:
            buffer = io.StringIO()
            writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator='\n')
            writer.writerow(self.COLUMNS)
            for record in records:
                writer.writerow(self._record_to_row(record))
            return buffer.getvalue()
        except Exception as e:
            raise ExportException(f"Failed to export drug records: {str(e)}") from e

    def export_filename(self, exported_on: str) -> str:
        """Download name for an export made on the given ISO date."""
        return f"drugs_{exported_on}.csv"

    def _record_to_row(self, record: DrugRecord) -> List[str]:
        """
        Convert a record to one CSV row.
        Missing values use the same placeholders as the records table.
        """
        overview = record.overview
        return [
            record.drug_over_id,
            overview.drug_name or 'Untitled',
            overview.generic_name or 'N/A',
            overview.therapeutic_area or 'N/A',
            overview.disease_type or 'N/A',
            overview.global_status or 'Unknown',
            overview.development_status or 'Unknown',
            overview.originator or 'N/A',
            self._format_date(overview.created_at)
        ]

    def _format_date(self, value) -> str:
        """Format an ISO timestamp as MM/DD/YYYY; unparseable values pass through."""
        if not value:
            return 'N/A'
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return value
        return parsed.strftime('%m/%d/%Y')
