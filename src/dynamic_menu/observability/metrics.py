"""Custom metrics for the menu service."""

from opentelemetry import metrics

meter = metrics.get_meter("menu-svc")

menu_created_counter = meter.create_counter(
    name="menu_created_total",
    description="Total number of menus created by hierarchy level",
    unit="1",
)

menu_rejected_counter = meter.create_counter(
    name="menu_rejected_total",
    description="Total number of menu creation requests rejected by validation",
    unit="1",
)

tree_build_duration_histogram = meter.create_histogram(
    name="menu_tree_build_duration_seconds",
    description="Duration of category tree builds",
    unit="s",
)

tree_node_count_histogram = meter.create_histogram(
    name="menu_tree_node_count",
    description="Number of nodes produced per category tree build",
    unit="1",
)


def record_menu_created(hierarchy_level: str) -> None:
    """Record a successfully created menu.

    Args:
        hierarchy_level: Hierarchy level value of the new menu
    """
    menu_created_counter.add(1, {"hierarchy_level": hierarchy_level})


def record_menu_rejected(reason: str) -> None:
    """Record a rejected menu creation request.

    Args:
        reason: Short machine-readable rejection reason (e.g. "blank_name")
    """
    menu_rejected_counter.add(1, {"reason": reason})


def record_tree_build(node_count: int, duration_seconds: float) -> None:
    """Record a completed category tree build.

    Args:
        node_count: Number of nodes in the built list
        duration_seconds: Duration in seconds
    """
    tree_build_duration_histogram.record(duration_seconds)
    tree_node_count_histogram.record(node_count)
