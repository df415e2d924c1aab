"""Unit tests for the DynamoDB menu repository."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from dynamic_menu.exceptions import UnknownHierarchyLevelError
from dynamic_menu.models.menu_models import AuditFields, MenuHierarchyLevel, MenuRecord
from dynamic_menu.repositories.menu_repositories import COUNTER_ITEM_ID, DynamoDBMenuRepository


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "InternalServerError", "Message": "Server error"}}, operation
    )


@pytest.mark.unit
class TestDynamoDBMenuRepository:
    """Test suite for DynamoDBMenuRepository."""

    @pytest.fixture
    def mock_dynamodb(self) -> MagicMock:
        """Create a mock DynamoDB resource."""
        return MagicMock()

    @pytest.fixture
    def mock_table(self, mock_dynamodb: MagicMock) -> MagicMock:
        """Return the mock table handed out by the resource."""
        return mock_dynamodb.Table.return_value

    @pytest.fixture
    def repository(self, mock_dynamodb: MagicMock) -> DynamoDBMenuRepository:
        """Create a DynamoDBMenuRepository with mocked DynamoDB."""
        return DynamoDBMenuRepository(dynamodb_resource=mock_dynamodb, table_name="test-menus")

    def test_repository_initialization(self, mock_dynamodb: MagicMock) -> None:
        """Test that repository initializes correctly."""
        repo = DynamoDBMenuRepository(dynamodb_resource=mock_dynamodb, table_name="test-table")
        assert repo.table_name == "test-table"
        mock_dynamodb.Table.assert_called_once_with("test-table")

    def test_get_all_menus_success(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test listing menus converts DynamoDB items to records in scan order."""
        mock_table.scan.return_value = {
            "Items": [
                {
                    "id": Decimal("2"),
                    "display_name": "Mains",
                    "slug": "mains",
                    "is_enabled": True,
                    "hierarchy_level": "top_category",
                    "parent_id": Decimal("1"),
                },
                {
                    "id": Decimal("1"),
                    "display_name": "Food",
                    "slug": "food",
                    "is_enabled": False,
                    "hierarchy_level": "root",
                },
            ]
        }

        menus = repository.get_all_menus()

        assert [menu.id for menu in menus] == [2, 1]
        assert menus[0].parent_id == 1
        assert isinstance(menus[0].parent_id, int)
        assert menus[0].hierarchy_level == MenuHierarchyLevel.TOP_CATEGORY
        assert menus[1].parent_id is None
        assert menus[1].is_enabled is False
        mock_table.scan.assert_called_once()
        assert "FilterExpression" in mock_table.scan.call_args.kwargs

    def test_get_all_menus_empty(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test listing an empty table returns an empty list."""
        mock_table.scan.return_value = {}

        assert repository.get_all_menus() == []

    def test_get_all_menus_follows_pagination(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that scanning continues from LastEvaluatedKey until exhausted."""
        mock_table.scan.side_effect = [
            {
                "Items": [{"id": 1, "display_name": "Food", "hierarchy_level": "root"}],
                "LastEvaluatedKey": {"id": 1},
            },
            {"Items": [{"id": 4, "display_name": "Drinks", "hierarchy_level": "root"}]},
        ]

        menus = repository.get_all_menus()

        assert [menu.id for menu in menus] == [1, 4]
        assert mock_table.scan.call_count == 2
        assert mock_table.scan.call_args_list[1].kwargs["ExclusiveStartKey"] == {"id": 1}

    def test_get_all_menus_dynamodb_error_propagates(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that scan errors are re-raised."""
        mock_table.scan.side_effect = _client_error("Scan")

        with pytest.raises(ClientError):
            repository.get_all_menus()

    def test_get_all_menus_unknown_level_raises(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that an item with an unknown level fails the whole fetch."""
        mock_table.scan.return_value = {
            "Items": [
                {"id": 1, "display_name": "Food", "hierarchy_level": "root"},
                {"id": 2, "display_name": "Odd", "hierarchy_level": "sub_category"},
            ]
        }

        with pytest.raises(UnknownHierarchyLevelError):
            repository.get_all_menus()

    def test_save_new_menu_assigns_id(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that saving a new record allocates an id and timestamps."""
        mock_table.update_item.return_value = {"Attributes": {"last_id": Decimal("7")}}
        menu = MenuRecord(
            display_name="Drinks", slug="drinks", hierarchy_level=MenuHierarchyLevel.ROOT
        )

        saved = repository.save(menu)

        assert saved.id == 7
        assert saved.audit.created_at is not None
        assert saved.audit.created_at == saved.audit.last_updated_at
        assert menu.id is None
        mock_table.update_item.assert_called_once()
        assert mock_table.update_item.call_args.kwargs["Key"] == {"id": COUNTER_ITEM_ID}
        item = mock_table.put_item.call_args.kwargs["Item"]
        assert item["id"] == 7
        assert item["display_name"] == "Drinks"
        assert item["hierarchy_level"] == "root"
        assert "parent_id" not in item

    def test_save_existing_menu_keeps_id_and_created_at(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that re-saving keeps identity and only refreshes last_updated_at."""
        created = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        menu = MenuRecord(
            audit=AuditFields(id=3, created_at=created, last_updated_at=created),
            display_name="Sides",
            slug="sides",
            hierarchy_level=MenuHierarchyLevel.TOP_CATEGORY,
            parent_id=1,
        )

        saved = repository.save(menu)

        assert saved.id == 3
        assert saved.audit.created_at == created
        assert saved.audit.last_updated_at > created
        mock_table.update_item.assert_not_called()
        assert mock_table.put_item.call_args.kwargs["Item"]["parent_id"] == 1

    def test_save_counter_error_propagates(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that id allocation failures are re-raised without writing."""
        mock_table.update_item.side_effect = _client_error("UpdateItem")
        menu = MenuRecord(display_name="Drinks", hierarchy_level=MenuHierarchyLevel.ROOT)

        with pytest.raises(ClientError):
            repository.save(menu)

        mock_table.put_item.assert_not_called()

    def test_save_put_error_propagates(
        self, repository: DynamoDBMenuRepository, mock_table: MagicMock
    ) -> None:
        """Test that write failures are re-raised."""
        mock_table.update_item.return_value = {"Attributes": {"last_id": Decimal("1")}}
        mock_table.put_item.side_effect = _client_error("PutItem")
        menu = MenuRecord(display_name="Drinks", hierarchy_level=MenuHierarchyLevel.ROOT)

        with pytest.raises(ClientError):
            repository.save(menu)
