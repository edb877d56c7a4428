"""Compiler facade: text in, AST forest out."""

from __future__ import annotations

import logging
from typing import Callable

from jsdoc_serializer.codegen.classifier import LineClassifier
from jsdoc_serializer.codegen.extractor import extract_blocks, split_block
from jsdoc_serializer.codegen.grammar import TagGrammar
from jsdoc_serializer.codegen.node import Node
from jsdoc_serializer.errors import InvalidInputError

logger = logging.getLogger(__name__)

Forest = list[list[Node]]
StartCallback = Callable[[str], object]
FoundCallback = Callable[[int], object]


class Generator:
    """Generates the AST nodes of every documentation block in a text.

    The generator holds configuration only; every ``compile`` call builds
    its own forest.
    """

    def __init__(self, grammar: TagGrammar | None = None, attach_todos: bool = False) -> None:
        """Initialize generator.

        Args:
            grammar: Tag grammar to classify tags with (defaults to the JSDoc table).
            attach_todos: Link ``@todo`` nodes under the block's Start node.
        """
        self.grammar = grammar
        self.attach_todos = attach_todos

    def compile(
        self,
        contents: str,
        on_start: StartCallback | None = None,
        on_found: FoundCallback | None = None,
    ) -> Forest:
        """Compile a string to one node list per documentation block.

        Args:
            contents: Source text to scan.
            on_start: Called with ``contents`` before extraction.
            on_found: Called with the number of blocks found.

        Returns:
            Node lists, index-aligned with block order in the source.

        Raises:
            InvalidInputError: ``contents`` is not a string.
            GrammarViolationError: A tag value failed validation.
        """
        if not isinstance(contents, str):
            raise InvalidInputError(contents)

        self._notify(on_start, contents)

        blocks = extract_blocks(contents)
        if not blocks:
            logger.debug("No documentation blocks found")
            return []

        self._notify(on_found, len(blocks))

        forest: Forest = []
        for block in blocks:
            classifier = LineClassifier(
                previous_blocks=tuple(forest),
                grammar=self.grammar,
                attach_todos=self.attach_todos,
            )
            forest.append(classifier.classify_all(split_block(block)))

        logger.info(
            "Compiled %d block%s (%d nodes)",
            len(forest),
            "" if len(forest) == 1 else "s",
            sum(len(nodes) for nodes in forest),
        )
        return forest

    def _notify(self, callback: Callable[[object], object] | None, payload: object) -> None:
        if callback is None:
            return
        try:
            callback(payload)
        except Exception:
            logger.exception("Compile callback %r failed", callback)
