"""
DynamoDB Repository for drug record storage.
Serves the bulk "fetch everything" collection the query engine works on.
"""
import logging
from typing import List
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import DynamoDBException
from src.models.drug_record import DrugRecord
from src.repositories.db_repository import DBRepository

logger = logging.getLogger(__name__)


class DynamoRepository(DBRepository):
    """Repository for DynamoDB operations."""

    def __init__(self):
        self.dynamodb = boto3.resource('dynamodb', region_name=config.settings.aws_region)
        self.table = self.dynamodb.Table(config.settings.drug_records_table_name)

    def find_all(self) -> List[DrugRecord]:
        """
        Retrieve all drug records.
        Follows scan pagination until the whole table has been read.

        Returns:
            List of all DrugRecord objects in scan order

        Raises:
            DynamoDBException: If scan fails
        """
        try:
            response = self.table.scan()
            items = response.get('Items', [])

            while 'LastEvaluatedKey' in response:
                response = self.table.scan(ExclusiveStartKey=response['LastEvaluatedKey'])
                items.extend(response.get('Items', []))

            logger.info("Fetched %d drug records", len(items))
            return [self._item_to_record(item) for item in items]

        except ClientError as e:
            raise DynamoDBException(f"Failed to scan drug records: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error scanning drug records: {str(e)}") from e

    def save(self, record: DrugRecord) -> None:
        """
        Save drug record to DynamoDB.

        Args:
            record: DrugRecord domain model

        Raises:
            DynamoDBException: If save operation fails
        """
        try:
            self.table.put_item(Item=self._record_to_item(record))
        except ClientError as e:
            raise DynamoDBException(f"Failed to save drug record: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error saving drug record: {str(e)}") from e

    def batch_save(self, records: List[DrugRecord]) -> None:
        """
        Save multiple drug records in batches.
        DynamoDB batch_writer automatically handles batching (25 items per batch).

        Args:
            records: List of DrugRecord objects to save

        Raises:
            DynamoDBException: If batch save fails
        """
        try:
            with self.table.batch_writer() as batch:
                for record in records:
                    batch.put_item(Item=self._record_to_item(record))
        except ClientError as e:
            raise DynamoDBException(f"Failed to batch save drug records: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error during batch save: {str(e)}") from e

    def _record_to_item(self, record: DrugRecord) -> dict:
        """Convert DrugRecord to a DynamoDB item keyed by drug_over_id."""
        return record.model_dump(mode='json', by_alias=True)

    def _item_to_record(self, item: dict) -> DrugRecord:
        """Convert DynamoDB item to DrugRecord domain model."""
        return DrugRecord.model_validate(item)
