"""Menu storage for the menu service.

``MenuStore`` is the contract the core depends on. ``DynamoDBMenuRepository``
implements it over a single DynamoDB table keyed by a numeric ``id``.

Unlike lookups where a miss is an expected outcome, storage failures here are
not turned into return values: ClientError is logged and re-raised so callers
see the original failure.
"""

import logging
from datetime import UTC, datetime
from typing import Any, Protocol

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError
from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table

from dynamic_menu.models.menu_models import AuditFields, MenuRecord

logger = logging.getLogger(__name__)

# Reserved item holding the last assigned id; real ids start at 1
COUNTER_ITEM_ID = 0


class MenuStore(Protocol):
    """Persistence contract for flat menu records."""

    def get_all_menus(self) -> list[MenuRecord]:
        """Return every stored menu record in the store's enumeration order."""
        ...

    def save(self, record: MenuRecord) -> MenuRecord:
        """Persist a record, assigning its id on first save, and return the stored copy."""
        ...


class DynamoDBMenuRepository:
    """Repository for menu records.

    Manages menu records in DynamoDB with ``id`` as partition key. Identifiers
    are allocated from an atomic counter item stored in the same table.
    """

    def __init__(self, dynamodb_resource: DynamoDBServiceResource, table_name: str) -> None:
        """Initialize repository.

        Args:
            dynamodb_resource: Boto3 DynamoDB resource
            table_name: Name of the DynamoDB table
        """
        self.dynamodb = dynamodb_resource
        self.table_name = table_name
        self.table: Table = dynamodb_resource.Table(table_name)

    def get_all_menus(self) -> list[MenuRecord]:
        """List every menu record in the table.

        Follows scan pagination until the table is exhausted. Records are
        returned in scan order.

        Returns:
            list: List of MenuRecord objects (empty list if none stored)

        Raises:
            ClientError: If DynamoDB rejects the scan
            UnknownHierarchyLevelError: If a stored item has an unknown level
        """
        scan_kwargs: dict[str, Any] = {"FilterExpression": Attr("id").ne(COUNTER_ITEM_ID)}
        records: list[MenuRecord] = []

        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                records.extend(
                    MenuRecord.from_dynamodb_item(item) for item in response.get("Items", [])
                )

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key

        except ClientError as e:
            logger.error(f"Failed to list menus from {self.table_name}: {e}")
            raise

        logger.debug(f"Loaded {len(records)} menus from {self.table_name}")
        return records

    def save(self, record: MenuRecord) -> MenuRecord:
        """Save a new menu record or update an existing one.

        A record without an id is treated as new: it receives the next id and
        a creation timestamp. Every save refreshes ``last_updated_at``.

        Args:
            record: MenuRecord to save

        Returns:
            MenuRecord: The persisted copy carrying its audit fields

        Raises:
            ClientError: If DynamoDB rejects the write
        """
        now = datetime.now(UTC)

        try:
            if record.id is None:
                audit = AuditFields(id=self._next_id(), created_at=now, last_updated_at=now)
            else:
                audit = record.audit.model_copy(update={"last_updated_at": now})

            persisted = record.model_copy(update={"audit": audit})
            self.table.put_item(Item=persisted.to_dynamodb_item())

        except ClientError as e:
            logger.error(f"Failed to save menu '{record.display_name}': {e}")
            raise

        logger.info(f"Saved menu {persisted.id} ('{persisted.display_name}')")
        return persisted

    def _next_id(self) -> int:
        """Atomically increment and return the id counter.

        Returns:
            int: Newly allocated menu id
        """
        response = self.table.update_item(
            Key={"id": COUNTER_ITEM_ID},
            UpdateExpression="ADD last_id :one",
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["last_id"])
