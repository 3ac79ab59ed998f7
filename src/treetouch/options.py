"""Options controlling where a tree is materialized.

Options are plain callables applied in order to a mutable Options record.
Each one may raise ConfigurationError, which stops resolution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from treetouch.errors import ConfigurationError
from treetouch.filesystem import BasePathFileSystem, MemoryFileSystem
from treetouch.protocols import FileSystem

__all__ = [
    "Option",
    "Options",
    "resolve_options",
    "with_base_path",
    "with_filesystem",
]

logger = logging.getLogger(__name__)


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    return MemoryFileSystem()


@dataclass
class Options:
    """Resolved configuration for a single materialization.

    Attributes:
        filesystem: Backend the tree is written to, already rebased if a
            base path was configured.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)


Option = Callable[[Options], None]


def with_filesystem(fs: FileSystem) -> Option:
    """Use ``fs`` as the backend instead of a fresh in-memory filesystem.

    Args:
        fs: Backend to write to.

    Returns:
        Option replacing the configured filesystem.
    """

    def apply(options: Options) -> None:
        logger.debug("Using filesystem %s", type(fs).__name__)
        options.filesystem = fs

    return apply


def with_base_path(path: str) -> Option:
    """Root every later operation at ``path`` of the configured filesystem.

    The directory must already exist when options are resolved. Apply this
    after ``with_filesystem`` to rebase a custom backend.

    Args:
        path: Existing directory in the configured filesystem.

    Returns:
        Option wrapping the configured filesystem in a BasePathFileSystem.
    """

    def apply(options: Options) -> None:
        try:
            info = options.filesystem.stat(path)
        except OSError as e:
            raise ConfigurationError(
                f"base path must exist and be accessible: {path}: {e}"
            ) from e
        if not info.is_dir:
            raise ConfigurationError(f"base path must be a directory: {path}")

        logger.debug("Rebasing filesystem at %s", path)
        options.filesystem = BasePathFileSystem(options.filesystem, path)

    return apply


def resolve_options(options: Iterable[Option]) -> Options:
    """Apply options in order to the default configuration.

    Args:
        options: Options to apply.

    Returns:
        The resulting Options.

    Raises:
        ConfigurationError: From the first option that fails.
    """
    resolved = Options()
    for option in options:
        option(resolved)
    return resolved
