"""Main CLI entry point for jsdoc-serializer."""

import logging

import click
from rich.logging import RichHandler

from jsdoc_serializer import __version__
from jsdoc_serializer.cli.commands import compile_command, tags_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    """JSDoc Serializer - turn documentation comments into an AST.

    \b
    COMMANDS:
      jsdoc-serializer compile src/index.js          Show the AST of a file
      jsdoc-serializer compile src --json -o ast.json Write a directory's AST as JSON
      jsdoc-serializer tags                          List supported tags
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


cli.add_command(compile_command, name="compile")
cli.add_command(tags_command, name="tags")


if __name__ == "__main__":
    cli()
