"""Menu data models.

Menu records are stored as a flat relation: each record points at its parent
only through ``parent_id``. The nested shape is rebuilt on demand by the
category tree builder.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from dynamic_menu.exceptions import UnknownHierarchyLevelError


class MenuHierarchyLevel(str, Enum):
    """Enumeration of menu hierarchy levels."""

    ROOT = "root"
    TOP_CATEGORY = "top_category"
    CATEGORY = "category"


class AuditFields(BaseModel):
    """Identity and bookkeeping fields shared by persisted entities.

    Composed into entities rather than inherited. All fields are assigned by
    the store, so a freshly built entity has none of them set.
    """

    id: int | None = Field(None, description="Store-assigned identifier", gt=0)
    created_at: datetime | None = Field(None, description="Timestamp of first save")
    last_updated_at: datetime | None = Field(None, description="Timestamp of last save")

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item fragment.

        Returns:
            dict: DynamoDB-compatible representation of the set fields
        """
        item: dict[str, Any] = {}

        if self.id is not None:
            item["id"] = self.id

        if self.created_at is not None:
            item["created_at"] = self.created_at.isoformat()

        if self.last_updated_at is not None:
            item["last_updated_at"] = self.last_updated_at.isoformat()

        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "AuditFields":
        """Create AuditFields from a DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            AuditFields: Parsed model instance
        """
        data: dict[str, Any] = {}

        if "id" in item:
            data["id"] = int(item["id"])

        if "created_at" in item:
            data["created_at"] = datetime.fromisoformat(item["created_at"])

        if "last_updated_at" in item:
            data["last_updated_at"] = datetime.fromisoformat(item["last_updated_at"])

        return cls(**data)


class MenuRecord(BaseModel):
    """A persisted navigation menu entry.

    ``parent_id`` is a weak reference: the identifier of another record,
    never the record itself.
    """

    audit: AuditFields = Field(default_factory=AuditFields, description="Store bookkeeping")
    display_name: str = Field(..., description="Human-readable label", min_length=1)
    slug: str = Field(default="", description="URL-safe identifier derived from display name")
    is_enabled: bool = Field(default=True, description="Whether the entry is visible")
    hierarchy_level: MenuHierarchyLevel = Field(..., description="Fixed hierarchy level")
    parent_id: int | None = Field(None, description="Identifier of the parent menu")

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate that display_name is not blank."""
        if not v.strip():
            raise ValueError("display_name must not be blank")
        return v

    @property
    def id(self) -> int | None:
        """Store-assigned identifier, None until first save."""
        return self.audit.id

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format.

        Returns:
            dict: DynamoDB-compatible representation
        """
        item: dict[str, Any] = self.audit.to_dynamodb_item()
        item.update(
            {
                "display_name": self.display_name,
                "slug": self.slug,
                "is_enabled": self.is_enabled,
                "hierarchy_level": self.hierarchy_level.value,
            }
        )

        if self.parent_id is not None:
            item["parent_id"] = self.parent_id

        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "MenuRecord":
        """Create MenuRecord from DynamoDB item.

        DynamoDB returns numbers as Decimal, so identifiers are converted back
        to int here.

        Args:
            item: DynamoDB item dictionary

        Returns:
            MenuRecord: Parsed model instance

        Raises:
            UnknownHierarchyLevelError: If the stored level is not a known value
        """
        data: dict[str, Any] = {
            "audit": AuditFields.from_dynamodb_item(item),
            "display_name": item["display_name"],
            "slug": item.get("slug", ""),
            "is_enabled": item.get("is_enabled", True),
        }

        try:
            data["hierarchy_level"] = MenuHierarchyLevel(item["hierarchy_level"])
        except ValueError as e:
            raise UnknownHierarchyLevelError(item["hierarchy_level"]) from e

        if item.get("parent_id") is not None:
            data["parent_id"] = int(item["parent_id"])

        return cls(**data)
