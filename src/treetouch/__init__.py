"""Declarative creation of file and directory trees for test fixtures."""

__version__ = "0.1.0"

from treetouch.builders import directory, empty_file, file, tree
from treetouch.errors import (
    ConfigurationError,
    DirCreateError,
    EmptyTreeError,
    FileCreateError,
    FixtureError,
    NodeError,
    TreeTouchError,
    WriteError,
)
from treetouch.filesystem import BasePathFileSystem, MemoryFileSystem, RealFileSystem
from treetouch.loader import load_fixture, parse_fixture
from treetouch.options import Option, Options, with_base_path, with_filesystem
from treetouch.protocols import FileSystem
from treetouch.touch import create, create_into, touch
from treetouch.types import FileInfo, TreeNode

__all__ = [
    "__version__",
    "BasePathFileSystem",
    "ConfigurationError",
    "DirCreateError",
    "EmptyTreeError",
    "FileCreateError",
    "FileInfo",
    "FileSystem",
    "FixtureError",
    "MemoryFileSystem",
    "NodeError",
    "Option",
    "Options",
    "RealFileSystem",
    "TreeNode",
    "TreeTouchError",
    "WriteError",
    "create",
    "create_into",
    "directory",
    "empty_file",
    "file",
    "load_fixture",
    "parse_fixture",
    "touch",
    "tree",
    "with_base_path",
    "with_filesystem",
]
