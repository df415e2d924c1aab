"""Menu domain exceptions.

Rule violations are raised to the caller synchronously and are never retried.
Storage failures are not wrapped; they reach the caller as raised by the store.
"""


class MenuError(Exception):
    """Base class for all menu domain errors."""


class InvalidArgumentError(MenuError, ValueError):
    """An argument violates a menu creation or tree building rule."""


class UnknownHierarchyLevelError(InvalidArgumentError):
    """A record carries a hierarchy level outside the known three."""

    def __init__(self, level: object) -> None:
        self.level = level
        super().__init__(f"unknown hierarchy level: {level!r}")
