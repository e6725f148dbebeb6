"""CLI commands for inspecting a document tree.

Implements 'reqtree show', which prints the document hierarchy, and
'reqtree items', which prints one document's items in outline order.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from reqtree.config.settings import LoadSettings
from reqtree.core.document_tree import DocumentTree
from reqtree.lib.errors import LoadError
from reqtree.lib.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

_ROOT_ARGUMENT = click.argument(
    "root",
    type=click.Path(file_okay=False),
    default=".",
    required=False,
)
_VERBOSE_OPTION = click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose debug logging"
)
_QUIET_OPTION = click.option("--quiet", "-q", is_flag=True, help="Only log errors")


@contextmanager
def handle_load_errors() -> Generator[None, None, None]:
    """Context manager for consistent error handling in reqtree commands.

    Exit codes:
        2: Document tree could not be loaded
        3: Unexpected error
    """
    try:
        yield
    except LoadError as e:
        logger.debug(f"Load error: {e}")
        click.secho("Error: Could not load document tree", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)


def _load_tree(root: str) -> DocumentTree:
    return DocumentTree.load(root, LoadSettings.from_env())


@click.command(name="show")
@_ROOT_ARGUMENT
@_VERBOSE_OPTION
@_QUIET_OPTION
def show(root: str, verbose: bool, quiet: bool) -> None:
    """Print the document tree found below ROOT.

    ROOT defaults to the current directory. Hidden directories are not
    searched.

    Example:

        reqtree show reqs
    """
    setup_logging(verbose=verbose, quiet=quiet)

    with handle_load_errors():
        tree = _load_tree(root)
        for node, depth in tree.walk():
            count = len(node.document)
            noun = "item" if count == 1 else "items"
            click.echo(f"{'  ' * depth}{node.prefix} ({count} {noun})")


@click.command(name="items")
@click.argument("prefix")
@_ROOT_ARGUMENT
@_VERBOSE_OPTION
@_QUIET_OPTION
def items(prefix: str, root: str, verbose: bool, quiet: bool) -> None:
    """Print the items of document PREFIX in outline order.

    Each line shows the item uid, its level and its header, indented by
    the item's depth.

    Example:

        reqtree items TUT reqs
    """
    setup_logging(verbose=verbose, quiet=quiet)

    with handle_load_errors():
        tree = _load_tree(root)
        node = tree.find(prefix)
        if node is None:
            known = ", ".join(sorted(tree.prefix_index))
            click.secho(f"Error: Unknown document '{prefix}'", fg="red", err=True)
            click.echo(f"  Known documents: {known}", err=True)
            sys.exit(2)

        for item in node.document:
            header = f" {item.header}" if item.header else ""
            click.echo(f"{'  ' * item.depth}{item.uid} ({item.level}){header}")
