"""Menu service for reading and creating navigation menus."""

import logging

from dynamic_menu.models.category_models import CategoryNode, MenusView
from dynamic_menu.models.menu_models import MenuHierarchyLevel, MenuRecord
from dynamic_menu.repositories.menu_repositories import MenuStore
from dynamic_menu.services.category_tree_builder import CategoryTreeBuilder
from dynamic_menu.services.menu_factory import MenuFactory

logger = logging.getLogger(__name__)


class MenuService:
    """Service for the site navigation menu.

    Fetches the flat menu relation from the store, rebuilds the category
    tree for rendering, and creates new menus through the factory.
    """

    def __init__(
        self,
        store: MenuStore,
        tree_builder: CategoryTreeBuilder | None = None,
        menu_factory: MenuFactory | None = None,
    ) -> None:
        """Initialize the MenuService.

        Args:
            store: Store holding the menu records
            tree_builder: Builder for category nodes (default builder if None)
            menu_factory: Factory for new menus (factory over ``store`` if None)
        """
        self.store = store
        self.tree_builder = tree_builder or CategoryTreeBuilder()
        self.menu_factory = menu_factory or MenuFactory(store)

    def get_menus(self) -> list[MenuRecord]:
        """Fetch all menu records from the store.

        Returns:
            List of MenuRecord in store order, empty list if none stored
        """
        return list(self.store.get_all_menus())

    def get_categories(self, menus: list[MenuRecord]) -> list[CategoryNode]:
        """Build category nodes for the given records.

        Args:
            menus: Flat list of menu records

        Returns:
            List of CategoryNode, one per record
        """
        return self.tree_builder.build_tree(menus)

    def get_menu_tree(self) -> MenusView:
        """Fetch the menus once and build the renderable tree.

        Returns:
            MenusView holding every built node
        """
        menus = self.get_menus()
        view = MenusView(categories=self.get_categories(menus))
        logger.info(f"Built menu tree with {len(view.roots)} root menus from {len(menus)} records")
        return view

    def add_menu(
        self,
        name: str | None,
        hierarchy_level: MenuHierarchyLevel,
        parent: MenuRecord | None,
        is_enabled: bool = True,
    ) -> MenuRecord:
        """Create and persist a new menu.

        Args:
            name: Display name of the menu
            hierarchy_level: Hierarchy level of the new menu
            parent: Existing parent record, or None
            is_enabled: Whether the menu is visible

        Returns:
            The persisted MenuRecord
        """
        return self.menu_factory.create_menu(name, hierarchy_level, parent, is_enabled=is_enabled)
