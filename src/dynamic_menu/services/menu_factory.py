"""Factory for creating validated menu records."""

import logging

from dynamic_menu.exceptions import InvalidArgumentError
from dynamic_menu.models.menu_models import MenuHierarchyLevel, MenuRecord
from dynamic_menu.observability.decorators import traced
from dynamic_menu.observability.metrics import record_menu_created, record_menu_rejected
from dynamic_menu.repositories.menu_repositories import MenuStore
from dynamic_menu.services.slug_generator import SlugGenerator, generate_slug

logger = logging.getLogger(__name__)


class MenuFactory:
    """Creates menu records under the hierarchy rules and persists them.

    Each successful call performs exactly one write through the store.
    Rejected input never reaches the store.
    """

    def __init__(self, store: MenuStore, slug_generator: SlugGenerator = generate_slug) -> None:
        """Initialize the MenuFactory.

        Args:
            store: Store the new records are saved to
            slug_generator: Deterministic name to slug function
        """
        self.store = store
        self.slug_generator = slug_generator

    @traced("create_menu")
    def create_menu(
        self,
        name: str | None,
        hierarchy_level: MenuHierarchyLevel,
        parent: MenuRecord | None,
        is_enabled: bool = True,
    ) -> MenuRecord:
        """Validate, build and persist a new menu record.

        Args:
            name: Display name; must contain a non-whitespace character
            hierarchy_level: Hierarchy level of the new menu
            parent: Existing parent record, or None
            is_enabled: Whether the menu is visible

        Returns:
            The persisted MenuRecord with its store-assigned id

        Raises:
            InvalidArgumentError: If the name is blank, or a parent is given
                for a menu that is not at root level
        """
        if name is None or not name.strip():
            logger.warning("Rejected menu creation: blank name")
            record_menu_rejected("blank_name")
            raise InvalidArgumentError("name is blank")

        # A non-null parent is only accepted together with the root level
        if parent is not None and hierarchy_level != MenuHierarchyLevel.ROOT:
            logger.warning(
                f"Rejected menu '{name}': parent {parent.id} given for level {hierarchy_level.value}"
            )
            record_menu_rejected("parent_level_mismatch")
            raise InvalidArgumentError("menu with no parent must be in root category")

        menu = MenuRecord(
            display_name=name,
            is_enabled=is_enabled,
            hierarchy_level=hierarchy_level,
            parent_id=parent.id if parent is not None else None,
            slug=self.slug_generator(name),
        )

        persisted = self.store.save(menu)

        record_menu_created(hierarchy_level.value)
        logger.info(f"Created {hierarchy_level.value} menu {persisted.id} ('{name}')")
        return persisted
