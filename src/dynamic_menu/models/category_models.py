"""Transient tree views over menu records.

These are never persisted. A new set of nodes is built on every tree build
and discarded once rendered.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from dynamic_menu.models.menu_models import MenuHierarchyLevel, MenuRecord


@dataclass
class CategoryNode:
    """A menu record together with the nodes that reference it as parent.

    Attributes:
        record: The wrapped menu record
        children: Nodes whose record's parent_id equals this record's id
    """

    record: MenuRecord
    children: list["CategoryNode"] = field(default_factory=list)

    @property
    def id(self) -> int | None:
        return self.record.id

    @property
    def hierarchy_level(self) -> MenuHierarchyLevel:
        return self.record.hierarchy_level


def root_nodes(nodes: Iterable[CategoryNode]) -> list[CategoryNode]:
    """Return only the root-level nodes of a built list, in order."""
    return [node for node in nodes if node.hierarchy_level == MenuHierarchyLevel.ROOT]


@dataclass
class MenusView:
    """Renderable result of a menu tree build.

    Attributes:
        categories: Every node produced by the tree builder, in build order
    """

    categories: list[CategoryNode] = field(default_factory=list)

    @property
    def roots(self) -> list[CategoryNode]:
        """Top-of-tree nodes, in build order."""
        return root_nodes(self.categories)
