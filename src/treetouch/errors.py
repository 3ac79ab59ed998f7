"""Exceptions raised by treetouch."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "DirCreateError",
    "EmptyTreeError",
    "FileCreateError",
    "FixtureError",
    "NodeError",
    "TreeTouchError",
    "WriteError",
]


class TreeTouchError(Exception):
    """Base class for all treetouch errors."""

    pass


class EmptyTreeError(TreeTouchError):
    """The forest has no top-level nodes."""

    def __init__(self) -> None:
        super().__init__("tree must have at least one element")


class ConfigurationError(TreeTouchError):
    """An option could not be applied."""

    pass


class FixtureError(TreeTouchError):
    """A fixture description could not be loaded."""

    pass


class NodeError(TreeTouchError):
    """A backend operation failed for a specific node.

    Attributes:
        path: Path of the node relative to the root of the realized tree.
        operation: Short description of the failed operation.
    """

    operation = "process"

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        super().__init__(f"failed to {self.operation} {path}: {cause}")


class DirCreateError(NodeError):
    operation = "create directory"


class FileCreateError(NodeError):
    operation = "create file"


class WriteError(NodeError):
    operation = "write file"
