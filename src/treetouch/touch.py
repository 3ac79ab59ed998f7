"""Materialization of trees onto a filesystem backend."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path, PurePosixPath

from treetouch.errors import (
    DirCreateError,
    EmptyTreeError,
    FileCreateError,
    TreeTouchError,
    WriteError,
)
from treetouch.filesystem import BasePathFileSystem, RealFileSystem
from treetouch.options import Option, resolve_options, with_base_path, with_filesystem
from treetouch.protocols import FileSystem
from treetouch.types import Forest, TreeNode

__all__ = ["create", "create_into", "touch"]

logger = logging.getLogger(__name__)


def touch(forest: Forest, *options: Option) -> FileSystem:
    """Create the files and directories described by ``forest``.

    Nodes are created in input order. Directories are created before their
    children; files are created and then written. A failure leaves everything
    created so far in place.

    Args:
        forest: Top-level nodes to create. Must not be empty.
        *options: Options selecting the backend and base path, applied in order.
            Defaults to a fresh in-memory filesystem.

    Returns:
        Filesystem rooted where the tree was created.

    Raises:
        ConfigurationError: If an option cannot be applied.
        EmptyTreeError: If ``forest`` is empty.
        DirCreateError: If a directory cannot be created.
        FileCreateError: If a file cannot be created.
        WriteError: If file content cannot be written.
    """
    resolved = resolve_options(options)
    forest = list(forest)
    if not forest:
        raise EmptyTreeError()

    _create_tree(resolved.filesystem, forest, "")
    return resolved.filesystem


def create_into(directory: Path | str, forest: Forest) -> Path:
    """Create ``forest`` on disk inside an existing directory.

    Args:
        directory: Existing directory to create the tree in.
        forest: Top-level nodes to create.

    Returns:
        Path of ``directory``.

    Raises:
        ConfigurationError: If ``directory`` is missing or not a directory.
    """
    root = Path(directory)
    touch(forest, with_filesystem(RealFileSystem()), with_base_path(str(root)))
    return root


def create(forest: Forest, prefix: str = "treetouch-") -> Path:
    """Create ``forest`` on disk inside a new temporary directory.

    The caller owns the directory and is responsible for removing it. If the
    tree cannot be created, the directory is removed before the error is
    raised.

    Args:
        forest: Top-level nodes to create.
        prefix: Name prefix of the temporary directory.

    Returns:
        Path of the temporary directory.
    """
    forest = list(forest)
    if not forest:
        raise EmptyTreeError()

    root = Path(tempfile.mkdtemp(prefix=prefix))
    logger.debug("Allocated temporary directory %s", root)
    try:
        return create_into(root, forest)
    except TreeTouchError:
        logger.debug("Removing temporary directory %s", root)
        shutil.rmtree(root, ignore_errors=True)
        raise


def _create_tree(dest: FileSystem, nodes: Forest, parent: str) -> None:
    for node in nodes:
        _create_single(dest, node, parent)


def _create_single(dest: FileSystem, node: TreeNode, parent: str) -> None:
    path = str(PurePosixPath(parent, node.name))

    if node.children is None:
        _create_file(dest, node, path)
        return

    try:
        dest.mkdir(node.name, parents=True)
    except OSError as e:
        raise DirCreateError(path, e) from e
    logger.debug("Created directory %s", path)

    _create_tree(BasePathFileSystem(dest, node.name), node.children, path)


def _create_file(dest: FileSystem, node: TreeNode, path: str) -> None:
    data = node.data

    try:
        handle = dest.create(node.name)
    except OSError as e:
        raise FileCreateError(path, e) from e

    try:
        with handle:
            handle.write(data)
    except OSError as e:
        raise WriteError(path, e) from e
    logger.debug("Created file %s (%d bytes)", path, len(data))
