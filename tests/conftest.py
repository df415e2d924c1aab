"""Shared pytest fixtures and configuration for all tests."""

from collections.abc import Callable

import pytest

from dynamic_menu.models.menu_models import AuditFields, MenuHierarchyLevel, MenuRecord

MenuRecordFactory = Callable[..., MenuRecord]


@pytest.fixture
def make_menu() -> MenuRecordFactory:
    """Fixture providing a builder for persisted-looking menu records."""

    def _make(
        menu_id: int,
        level: MenuHierarchyLevel,
        parent_id: int | None = None,
        name: str | None = None,
    ) -> MenuRecord:
        display_name = name or f"Menu {menu_id}"
        return MenuRecord(
            audit=AuditFields(id=menu_id),
            display_name=display_name,
            slug=display_name.lower().replace(" ", "-"),
            hierarchy_level=level,
            parent_id=parent_id,
        )

    return _make


@pytest.fixture
def sample_menus(make_menu: MenuRecordFactory) -> list[MenuRecord]:
    """Fixture providing a small three-level catalog in mixed store order."""
    return [
        make_menu(1, MenuHierarchyLevel.ROOT, name="Food"),
        make_menu(10, MenuHierarchyLevel.CATEGORY, parent_id=2, name="Burgers"),
        make_menu(2, MenuHierarchyLevel.TOP_CATEGORY, parent_id=1, name="Mains"),
        make_menu(3, MenuHierarchyLevel.TOP_CATEGORY, parent_id=1, name="Sides"),
        make_menu(11, MenuHierarchyLevel.CATEGORY, parent_id=3, name="Fries"),
        make_menu(12, MenuHierarchyLevel.CATEGORY, parent_id=2, name="Wraps"),
        make_menu(4, MenuHierarchyLevel.ROOT, name="Drinks"),
    ]
