"""Console output for the treetouch CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from treetouch.types import Forest, TreeNode

__all__ = ["Display"]


class Display:
    """Text output for treetouch commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize display.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_forest(self, forest: Forest, label: str = ".") -> None:
        """Show a forest as a tree.

        Args:
            forest: Nodes to display.
            label: Label of the root.
        """
        root = Tree(f"[bold]{escape(label)}[/bold]")
        for node in forest:
            _add_node(root, node)
        self.console.print(root)


def _add_node(parent: Tree, node: TreeNode) -> None:
    if node.children is None:
        parent.add(f"{escape(node.name)} [dim]({len(node.data)} bytes)[/dim]")
        return
    branch = parent.add(f"[bold blue]{escape(node.name)}/[/bold blue]")
    for child in node.children:
        _add_node(branch, child)
