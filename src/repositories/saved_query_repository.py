"""
Saved Query Repository for DynamoDB operations.
Stores query snapshots as JSON documents keyed by query id.
"""
import uuid
from datetime import datetime, timezone
from typing import List
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import DynamoDBException, QueryNotFoundException
from src.models.query import QuerySnapshot
from src.models.saved_query import SavedQuery, DRUG_DASHBOARD_QUERY_TYPE
from src.repositories.query_store import QueryStore


class SavedQueryRepository(QueryStore):
    """Repository for saved query DynamoDB operations."""

    def __init__(self):
        self.dynamodb = boto3.resource('dynamodb', region_name=config.settings.aws_region)
        self.table = self.dynamodb.Table(config.settings.saved_queries_table_name)

    def save(self, snapshot: QuerySnapshot) -> str:
        """
        Create a new saved query record.

        Args:
            snapshot: Criteria, filters, search term, title and description

        Returns:
            Generated query id

        Raises:
            DynamoDBException: If create operation fails
        """
        query_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc).isoformat()
        try:
            self.table.put_item(Item={
                'query_id': query_id,
                'title': snapshot.title,
                'query_type': DRUG_DASHBOARD_QUERY_TYPE,
                'query_data': self._snapshot_to_json(snapshot),
                'created_at': now,
                'updated_at': now
            })
            return query_id

        except ClientError as e:
            raise DynamoDBException(f"Failed to save query: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error saving query: {str(e)}") from e

    def load(self, query_id: str) -> QuerySnapshot:
        """
        Retrieve a saved snapshot by id.

        Args:
            query_id: Query identifier

        Returns:
            QuerySnapshot exactly as it was saved

        Raises:
            QueryNotFoundException: If no query has this id
            DynamoDBException: If query fails
        """
        return self.get_by_id(query_id).snapshot

    def get_by_id(self, query_id: str) -> SavedQuery:
        """
        Retrieve a saved query with its metadata.

        Raises:
            QueryNotFoundException: If no query has this id
            DynamoDBException: If query fails
        """
        try:
            response = self.table.get_item(Key={'query_id': query_id})

            if 'Item' not in response:
                raise QueryNotFoundException(f"Saved query '{query_id}' not found")

            return self._item_to_saved_query(response['Item'])

        except QueryNotFoundException:
            raise
        except ClientError as e:
            raise DynamoDBException(f"Failed to get saved query: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error getting saved query: {str(e)}") from e

    def update(self, query_id: str, snapshot: QuerySnapshot) -> None:
        """
        Replace the snapshot of an existing saved query.

        Args:
            query_id: Query identifier
            snapshot: New snapshot contents

        Raises:
            QueryNotFoundException: If no query has this id
            DynamoDBException: If update operation fails
        """
        try:
            self.table.update_item(
                Key={'query_id': query_id},
                UpdateExpression="SET #title = :title, #query_data = :query_data, #updated_at = :updated_at",
                ConditionExpression="attribute_exists(query_id)",
                ExpressionAttributeNames={
                    '#title': 'title',
                    '#query_data': 'query_data',
                    '#updated_at': 'updated_at'
                },
                ExpressionAttributeValues={
                    ':title': snapshot.title,
                    ':query_data': self._snapshot_to_json(snapshot),
                    ':updated_at': datetime.now(timezone.utc).isoformat()
                }
            )

        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException':
                raise QueryNotFoundException(f"Saved query '{query_id}' not found") from e
            raise DynamoDBException(f"Failed to update saved query: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error updating saved query: {str(e)}") from e

    def delete(self, query_id: str) -> None:
        """
        Delete a saved query.

        Raises:
            QueryNotFoundException: If no query has this id
            DynamoDBException: If delete operation fails
        """
        try:
            self.table.delete_item(
                Key={'query_id': query_id},
                ConditionExpression="attribute_exists(query_id)"
            )

        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException':
                raise QueryNotFoundException(f"Saved query '{query_id}' not found") from e
            raise DynamoDBException(f"Failed to delete saved query: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error deleting saved query: {str(e)}") from e

    def list_all(self) -> List[SavedQuery]:
        """
        Retrieve every saved query, oldest first.

        Raises:
            DynamoDBException: If scan fails
        """
        try:
            response = self.table.scan()
            items = response.get('Items', [])

            while 'LastEvaluatedKey' in response:
                response = self.table.scan(ExclusiveStartKey=response['LastEvaluatedKey'])
                items.extend(response.get('Items', []))

            saved = [self._item_to_saved_query(item) for item in items]
            return sorted(saved, key=lambda query: query.created_at)

        except ClientError as e:
            raise DynamoDBException(f"Failed to list saved queries: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error listing saved queries: {str(e)}") from e

    def _snapshot_to_json(self, snapshot: QuerySnapshot) -> str:
        """Serialize snapshot; sets are written as lists."""
        return snapshot.model_dump_json(by_alias=True)

    def _item_to_saved_query(self, item: dict) -> SavedQuery:
        """Convert DynamoDB item to SavedQuery domain model."""
        return SavedQuery(
            query_id=item['query_id'],
            snapshot=QuerySnapshot.model_validate_json(item['query_data']),
            created_at=datetime.fromisoformat(item['created_at']),
            updated_at=datetime.fromisoformat(item['updated_at']),
            query_type=item.get('query_type', DRUG_DASHBOARD_QUERY_TYPE)
        )
