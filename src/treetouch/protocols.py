"""Protocol definitions for filesystem backends.

The tree materializer only talks to a backend through this interface, so an
in-memory store, the real filesystem, or a rebased view of either can be
swapped in without changing it.

All concrete implementations satisfy the protocol structurally (duck typing).
Paths are POSIX-style strings relative to the backend's own root; both "/"
and "" denote the root.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from treetouch.types import FileInfo


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Implementations handle file creation, directory creation and lookups.
    """

    def create(self, path: str) -> BinaryIO:
        """Create a new empty file and open it for binary writing.

        Args:
            path: Path of the file to create.

        Returns:
            A writable binary file object. Callers close it.

        Raises:
            FileExistsError: If an entry already exists at ``path``.
            FileNotFoundError: If the parent directory does not exist.
        """
        ...

    def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create missing intermediate directories.
            exist_ok: Don't raise if the directory already exists.

        Raises:
            FileExistsError: If ``path`` exists and ``exist_ok`` is False.
            FileNotFoundError: If the parent is missing and ``parents`` is False.
        """
        ...

    def stat(self, path: str) -> FileInfo:
        """Describe the entry at a path.

        Args:
            path: Path to inspect.

        Returns:
            FileInfo for the entry.

        Raises:
            FileNotFoundError: If nothing exists at ``path``.
        """
        ...

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read the content of a file.

        Raises:
            FileNotFoundError: If the file does not exist.
            IsADirectoryError: If ``path`` is a directory.
        """
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read the content of a file as text."""
        ...

    def listdir(self, path: str) -> list[str]:
        """List the names of the entries in a directory, sorted.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If ``path`` is a file.
        """
        ...
