"""Reconstruction of the menu hierarchy from a flat list of records."""

import logging
import time
from collections.abc import Iterable

from dynamic_menu.exceptions import UnknownHierarchyLevelError
from dynamic_menu.models.category_models import CategoryNode
from dynamic_menu.models.menu_models import MenuHierarchyLevel, MenuRecord
from dynamic_menu.observability.decorators import traced
from dynamic_menu.observability.metrics import record_tree_build

logger = logging.getLogger(__name__)


class CategoryTreeBuilder:
    """Builds category nodes from the flat menu relation.

    The result is a flat concatenation of every input record wrapped in a
    node: category-level nodes first, then top categories, then roots. Each
    non-leaf node holds the already built nodes that point at it through
    ``parent_id``. Callers wanting only the top of the tree filter the result
    themselves (see ``category_models.root_nodes``).

    Each node is matched against the whole list built so far, so the cost is
    O(n * m) with m the number of non-leaf records. Intended for small menu
    catalogs.
    """

    @traced("build_category_tree")
    def build_tree(self, menus: Iterable[MenuRecord]) -> list[CategoryNode]:
        """Build category nodes for the given menu records.

        Args:
            menus: Flat sequence of menu records, in store order

        Returns:
            One node per input record: leaves, then top categories, then roots,
            each group in input order

        Raises:
            UnknownHierarchyLevelError: If a record has an unrecognized level
        """
        started = time.perf_counter()

        category_level: list[MenuRecord] = []
        top_level: list[MenuRecord] = []
        root_level: list[MenuRecord] = []
        records_by_id: dict[int | None, MenuRecord] = {}

        for menu in menus:
            if menu.hierarchy_level == MenuHierarchyLevel.CATEGORY:
                category_level.append(menu)
            elif menu.hierarchy_level == MenuHierarchyLevel.TOP_CATEGORY:
                top_level.append(menu)
            elif menu.hierarchy_level == MenuHierarchyLevel.ROOT:
                root_level.append(menu)
            else:
                raise UnknownHierarchyLevelError(menu.hierarchy_level)
            records_by_id[menu.id] = menu

        self._log_dangling_parents([*category_level, *top_level, *root_level], records_by_id)

        nodes = [CategoryNode(record=menu) for menu in category_level]

        for menu in top_level:
            children = [node for node in nodes if node.record.parent_id == menu.id]
            nodes.append(CategoryNode(record=menu, children=children))

        for menu in root_level:
            children = [node for node in nodes if node.record.parent_id == menu.id]
            nodes.append(CategoryNode(record=menu, children=children))

        record_tree_build(len(nodes), time.perf_counter() - started)
        logger.debug(
            f"Built {len(nodes)} category nodes "
            f"({len(root_level)} root, {len(top_level)} top, {len(category_level)} category)"
        )
        return nodes

    def _log_dangling_parents(
        self, records: list[MenuRecord], records_by_id: dict[int | None, MenuRecord]
    ) -> None:
        """Log records whose parent is missing from the snapshot.

        Such records still become nodes; they just never appear as a child.
        """
        for record in records:
            if record.parent_id is not None and record.parent_id not in records_by_id:
                logger.debug(
                    f"Menu {record.id} references missing parent {record.parent_id}"
                )

