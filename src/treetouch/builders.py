"""Convenience constructors for building trees."""

from __future__ import annotations

from treetouch.types import Content, TreeNode

__all__ = ["directory", "empty_file", "file", "tree"]


def tree(*nodes: TreeNode) -> list[TreeNode]:
    """Collect nodes into a forest."""
    return list(nodes)


def directory(name: str, *children: TreeNode) -> TreeNode:
    """Create a directory node. With no children the directory is empty."""
    return TreeNode(name=name, children=children)


def file(name: str, content: Content = "") -> TreeNode:
    """Create a file node."""
    return TreeNode(name=name, content=content)


def empty_file(name: str) -> TreeNode:
    return TreeNode(name=name)
