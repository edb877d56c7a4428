"""High level entry point: compile code, files and directories to AST or JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsdoc_serializer.codegen.generator import Forest, Generator
from jsdoc_serializer.config import SerializerConfig
from jsdoc_serializer.errors import SourceDecodeError

logger = logging.getLogger(__name__)


def forest_to_dict(forest: Forest) -> list[list[dict[str, Any]]]:
    """Convert a forest to plain data.

    Each block becomes the list of its root nodes (nodes without a parent)
    with their subtrees nested, so every node is emitted exactly once.
    """
    return [[node.to_dict() for node in nodes if node.is_root] for nodes in forest]


class JsDocSerializer:
    """Serializes documentation comments of JavaScript/TypeScript sources."""

    def __init__(self, config: SerializerConfig | None = None) -> None:
        """Initialize serializer.

        Args:
            config: Discovery and compile settings (defaults if omitted).
        """
        self.config = config or SerializerConfig()

    def _generator(self) -> Generator:
        return Generator(attach_todos=self.config.attach_todos)

    def compile(self, code: str) -> Forest:
        """Compile a string of code to its AST forest."""
        return self._generator().compile(code)

    def compile_from_file(self, file_path: Path | str) -> dict[str, Forest]:
        """Compile one source file.

        Returns:
            Mapping of the file path to its forest.

        Raises:
            SourceDecodeError: The file is not valid UTF-8.
        """
        file_path = Path(file_path)
        try:
            contents = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceDecodeError(str(file_path), str(e)) from e
        return {str(file_path): self.compile(contents)}

    def compile_from_directory(self, directory: Path | str) -> dict[str, Forest]:
        """Compile every matching source file below ``directory``.

        Files are visited in sorted order; files with no documentation
        blocks map to an empty forest.

        Raises:
            NotADirectoryError: ``directory`` is not a directory.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise NotADirectoryError(f'Path "{directory}" was not a directory')

        results: dict[str, Forest] = {}
        for file_path in self.discover_files(directory):
            results.update(self.compile_from_file(file_path))

        logger.info("Compiled %d files from %s", len(results), directory)
        return results

    def discover_files(self, directory: Path) -> list[Path]:
        """Find source files below ``directory`` honoring extensions and excludes."""
        excluded = set(self.config.exclude)
        extensions = {ext.lower() for ext in self.config.extensions}

        files = []
        for path in directory.rglob("*"):
            relative = path.relative_to(directory)
            if any(part in excluded for part in relative.parts):
                continue
            if path.is_file() and path.suffix.lower() in extensions:
                files.append(path)
        return sorted(files)

    def to_json(self, forest: Forest) -> str:
        """Render a forest as JSON text."""
        return json.dumps(forest_to_dict(forest), indent=self.config.indent)

    def compile_to_file(self, code: str, file_path: Path | str) -> Path:
        """Compile code and write the JSON form to ``file_path``.

        Returns:
            The path written.
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.to_json(self.compile(code)) + "\n", encoding="utf-8")
        logger.info("Wrote AST to %s", file_path)
        return file_path
