"""CLI commands for jsdoc-serializer."""

from jsdoc_serializer.cli.commands.compile import compile_command
from jsdoc_serializer.cli.commands.tags import tags_command

__all__ = [
    "compile_command",
    "tags_command",
]
