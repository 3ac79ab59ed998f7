"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from treetouch.builders import directory, empty_file, file, tree
from treetouch.filesystem import MemoryFileSystem, RealFileSystem
from treetouch.types import TreeNode


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Create an empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def real_fs(tmp_path: Path) -> RealFileSystem:
    """Create a real filesystem rooted at a temporary directory."""
    return RealFileSystem(tmp_path)


# ============================================================================
# Sample Trees
# ============================================================================


@pytest.fixture
def deep_forest() -> list[TreeNode]:
    """A forest mixing files, nested directories and empty content."""
    return tree(
        directory(
            "dir1",
            empty_file("file1.txt"),
            directory("dir1_1", file("file1_1.txt", "nested content")),
        ),
        directory("dir2", file("file2.txt", "Hello, World!")),
        directory("empty"),
        file("root.txt", "at the root"),
    )


@pytest.fixture
def deep_forest_files() -> dict[str, str]:
    """Expected file paths and content of deep_forest."""
    return {
        "dir1/file1.txt": "",
        "dir1/dir1_1/file1_1.txt": "nested content",
        "dir2/file2.txt": "Hello, World!",
        "root.txt": "at the root",
    }


# ============================================================================
# Fixture Files
# ============================================================================


@pytest.fixture
def compact_yaml(tmp_path: Path) -> Path:
    """Write a fixture file in the compact mapping shape."""
    path = tmp_path / "fixture.yaml"
    path.write_text(
        "src:\n"
        "  pkg:\n"
        "    __init__.py:\n"
        "    core.py: \"VALUE = 1\\n\"\n"
        "README.md: \"# demo\"\n"
    )
    return path


@pytest.fixture
def explicit_json(tmp_path: Path) -> Path:
    """Write a fixture file in the explicit list shape."""
    path = tmp_path / "fixture.json"
    path.write_text(
        '[{"name": "a/b/c", "children": [{"name": "leaf.txt", "content": "leaf"}]},'
        ' {"name": "top.txt"}]'
    )
    return path
