"""Shared data types for treetouch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterable, Union

__all__ = ["Content", "FileInfo", "Forest", "TreeNode"]

Content = Union[str, bytes]


@dataclass(frozen=True)
class TreeNode:
    """A file or directory to be created.

    Attributes:
        name: Relative path of the entry. May span several components
            (``"a/b/c"``), in which case intermediate directories are created.
        content: Payload of a file. Ignored for directories. ``str`` content
            is written UTF-8 encoded.
        children: ``None`` for a file. Any other value, including an empty
            sequence, makes this node a directory holding those children.
    """

    name: str
    content: Content = ""
    children: tuple[TreeNode, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if PurePosixPath(self.name).is_absolute():
            raise ValueError(f"name must be relative: {self.name!r}")
        if ".." in PurePosixPath(self.name).parts:
            raise ValueError(f"name must not contain '..': {self.name!r}")
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_dir(self) -> bool:
        """True when this node describes a directory."""
        return self.children is not None

    @property
    def data(self) -> bytes:
        """Content as bytes, UTF-8 encoding text content."""
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content


Forest = Iterable[TreeNode]


@dataclass(frozen=True)
class FileInfo:
    """Result of a stat call on a filesystem backend.

    Attributes:
        name: Final component of the path ("" for a backend root).
        is_dir: True if the entry is a directory.
        size: Size in bytes for files, 0 for directories.
    """

    name: str
    is_dir: bool
    size: int = 0
