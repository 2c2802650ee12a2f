"""
CLI entry - command line interface built with Typer

Flow:
1. Resolve the root (current directory unless a target is given)
2. Load the ignore file
3. Walk and print the tree
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from dirtree.core import TreeConfig, TreeWalkError
from dirtree.filters import DEFAULT_IGNORE_FILENAME, load_gitignore
from dirtree.tree import render_tree
from dirtree.utils.logging import configure_logging

app = typer.Typer(
    name="dirtree",
    help="Print a directory tree, skipping hidden entries and ignored paths.",
    add_completion=False,
)

# Errors and warnings go to stderr, the tree goes to stdout
console = Console(stderr=True)


def _allow_undecodable_names() -> None:
    # Names that are not valid UTF-8 arrive surrogate-escaped; write their raw bytes
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def _version_callback(value: bool) -> None:
    if value:
        from dirtree import __version__
        typer.echo(f"dirtree v{__version__}")
        raise typer.Exit(0)


def resolve_root(target: Optional[str]) -> Path:
    """
    Work out the directory to print.

    Raises:
        OSError: The current directory cannot be determined
        ValueError: The target is missing or not a directory
    """
    if target is None:
        return Path.cwd()

    root = Path(target).resolve()
    if not root.exists():
        raise ValueError(f"Path does not exist: {target}")
    if not root.is_dir():
        raise ValueError(f"Path is not a directory: {target}")
    return root


@app.command()
def main(
    target: Optional[str] = typer.Argument(
        None,
        help="Directory to print (defaults to the current directory)",
        show_default=False,
    ),
    ignore_file: str = typer.Option(
        DEFAULT_IGNORE_FILENAME,
        "--ignore-file",
        help="Name of the ignore file inside the root",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Print the tree rooted at TARGET.

    Examples:
        dirtree
        dirtree ./my-project
        dirtree --ignore-file .dockerignore
    """
    _allow_undecodable_names()
    configure_logging(verbose)

    try:
        root = resolve_root(target)
    except OSError as e:
        console.print(f"[red]Error:[/red] getting current directory: {escape(str(e))}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    config = TreeConfig(root=root, ignore_filename=ignore_file)
    rules = load_gitignore(config.root, config.ignore_filename)

    try:
        render_tree(config, rules)
    except TreeWalkError as e:
        console.print(f"[red]Error:[/red] walking directory: {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
