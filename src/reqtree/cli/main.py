"""Entry point for the reqtree command line tool."""

import click

from reqtree import __version__
from reqtree.cli.commands.show import items, show


@click.group()
@click.version_option(__version__, prog_name="reqtree")
def main() -> None:
    """Inspect doorstop requirement documents.

    \b
    EXAMPLES:

        Print the document tree below the current directory:
            reqtree show

        List the items of one document:
            reqtree items REQ
    """
    pass


main.add_command(show)
main.add_command(items)


if __name__ == "__main__":
    main()
