"""Loading tree descriptions from YAML and JSON fixture files.

Two document shapes are accepted. The explicit shape is a list of nodes::

    - name: src
      children:
        - name: main.py
          content: "print('hi')"

The compact shape is a mapping where a string (or empty) value is a file and
a mapping value is a directory::

    src:
      main.py: "print('hi')"
    README.md:
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from treetouch.errors import FixtureError
from treetouch.types import TreeNode

__all__ = ["NodeSpec", "load_fixture", "parse_fixture"]

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


class NodeSpec(BaseModel):
    """A node in the explicit fixture shape."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    content: str = ""
    children: list[NodeSpec] | None = None

    def to_node(self) -> TreeNode:
        """Convert to a TreeNode, recursively."""
        if self.children is None:
            return TreeNode(name=self.name, content=self.content)
        return TreeNode(
            name=self.name,
            children=tuple(child.to_node() for child in self.children),
        )


NodeSpec.model_rebuild()

_forest_adapter = TypeAdapter(list[NodeSpec])


def _from_mapping(data: dict[Any, Any]) -> list[TreeNode]:
    nodes = []
    for name, value in data.items():
        if not isinstance(name, str) or not name:
            raise FixtureError(f"Invalid entry name: {name!r}")
        if value is None:
            nodes.append(TreeNode(name=name))
        elif isinstance(value, str):
            nodes.append(TreeNode(name=name, content=value))
        elif isinstance(value, dict):
            nodes.append(TreeNode(name=name, children=tuple(_from_mapping(value))))
        else:
            raise FixtureError(
                f"Entry {name!r} must be a string, a mapping or empty, "
                f"got {type(value).__name__}"
            )
    return nodes


def parse_fixture(data: Any) -> list[TreeNode]:
    """Build a forest from a decoded fixture document.

    Args:
        data: Decoded YAML or JSON document.

    Returns:
        The forest, possibly empty.

    Raises:
        FixtureError: If the document has neither accepted shape.
    """
    if data is None:
        return []
    if not isinstance(data, (dict, list)):
        raise FixtureError(
            f"Fixture must be a list or a mapping, got {type(data).__name__}"
        )

    try:
        if isinstance(data, dict):
            return _from_mapping(data)
        specs = _forest_adapter.validate_python(data)
        return [spec.to_node() for spec in specs]
    except ValueError as e:
        raise FixtureError(f"Invalid fixture: {e}") from e


def load_fixture(path: Path) -> list[TreeNode]:
    """Load a forest from a YAML or JSON file.

    The format is chosen from the file suffix.

    Args:
        path: Path to the fixture file.

    Returns:
        The forest described by the file.

    Raises:
        FixtureError: If the file cannot be read, decoded or validated.
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise FixtureError(f"Unsupported fixture format: {path.name}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(f"Cannot read fixture {path}: {e}") from e

    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise FixtureError(f"Cannot parse fixture {path}: {e}") from e

    return parse_fixture(data)
