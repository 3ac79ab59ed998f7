"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from treetouch import __version__
from treetouch.console import Display
from treetouch.errors import TreeTouchError
from treetouch.loader import load_fixture
from treetouch.touch import create, create_into

app = typer.Typer(
    name="treetouch",
    help="Create file and directory trees from fixture descriptions",
    no_args_is_help=True,
)

display = Display()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        display.console.print(f"treetouch v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every created entry")
    ] = False,
) -> None:
    """Create file and directory trees from fixture descriptions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command("create")
def create_command(
    fixture: Annotated[Path, typer.Argument(help="YAML or JSON fixture file")],
    into: Annotated[
        Path | None,
        typer.Option("--into", "-i", help="Existing directory to create the tree in"),
    ] = None,
) -> None:
    """Create the tree described by FIXTURE on disk.

    Without --into, a new temporary directory is allocated. The root path is
    printed on success.
    """
    try:
        forest = load_fixture(fixture)
        root = create_into(into, forest) if into is not None else create(forest)
    except TreeTouchError as e:
        display.show_error(str(e))
        raise typer.Exit(1) from e

    display.show_success(f"Created {len(forest)} top-level entries")
    display.console.print(str(root), soft_wrap=True, highlight=False)


@app.command("show")
def show_command(
    fixture: Annotated[Path, typer.Argument(help="YAML or JSON fixture file")],
) -> None:
    """Display the tree described by FIXTURE without creating it."""
    try:
        forest = load_fixture(fixture)
    except TreeTouchError as e:
        display.show_error(str(e))
        raise typer.Exit(1) from e

    display.show_forest(forest, label=fixture.name)


if __name__ == "__main__":
    app()
