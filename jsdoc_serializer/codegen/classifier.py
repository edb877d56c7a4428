"""Per-line classification of a documentation block into AST nodes."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Sequence

from jsdoc_serializer.codegen.extractor import CLOSING, CONTINUATION, OPENING
from jsdoc_serializer.codegen.grammar import DEFAULT_GRAMMAR, GrammarContext, TagGrammar
from jsdoc_serializer.codegen.node import Node, NodeKind
from jsdoc_serializer.codegen.schemas import DescriptionAttributes

logger = logging.getLogger(__name__)

# "@" must open a token; "user@example.com" is plain text.
TAG_REGEX = re.compile(r"(?:^|\s)@(\w+)(.*)$")


class BlockState(Enum):
    """Where the classifier is within a block."""

    BEFORE_START = "before_start"
    IN_BLOCK = "in_block"
    CLOSED = "closed"


class LineClassifier:
    """Turns the lines of one block into a flat node list, linking the tree.

    One instance classifies exactly one block. ``previous_blocks`` are the
    node lists of blocks that were fully classified before this one; they
    are only read, for alias resolution.
    """

    def __init__(
        self,
        previous_blocks: Sequence[Sequence[Node]] = (),
        grammar: TagGrammar | None = None,
        attach_todos: bool = False,
    ) -> None:
        self.previous_blocks = previous_blocks
        self.grammar = grammar or DEFAULT_GRAMMAR
        self.attach_todos = attach_todos
        self.state = BlockState.BEFORE_START
        self.nodes: list[Node] = []

    @property
    def start(self) -> Node | None:
        """The first Start node of this block, if classified yet."""
        for node in self.nodes:
            if node.kind is NodeKind.START:
                return node
        return None

    def classify_all(self, lines: Sequence[str]) -> list[Node]:
        """Classify every line in order and return the block's node list."""
        for line in lines:
            self.classify(line)
        return self.nodes

    def classify(self, line: str) -> Node | None:
        """Classify one line, append the resulting node and link it.

        Returns:
            The node produced, or None when the line yields nothing.
        """
        text = line.strip()
        if self.state is BlockState.CLOSED:
            return None

        if text == OPENING:
            if self.state is BlockState.IN_BLOCK:
                logger.debug("Nested opening delimiter ignored")
                return None
            self.state = BlockState.IN_BLOCK
            return self._append(Node.from_kind(NodeKind.START))

        if self.state is BlockState.BEFORE_START:
            return None

        if text == CLOSING:
            self.state = BlockState.CLOSED
            return self._append(Node.from_kind(NodeKind.END))

        if not text.startswith(CONTINUATION):
            text = f"{CONTINUATION} {text}"

        body = text[len(CONTINUATION):].strip()
        match = TAG_REGEX.search(body)
        if match:
            return self._classify_tag(match.group(1), match.group(2).split())

        if not body:
            return self._append(Node.from_kind(NodeKind.WHITESPACE))

        description = text[2:] if text.startswith(f"{CONTINUATION} ") else text[1:]
        node = Node.from_kind(
            NodeKind.DESCRIPTION,
            DescriptionAttributes(description=description),
            parent=self.start,
        )
        return self._append(node)

    def _classify_tag(self, tag: str, tokens: list[str]) -> Node | None:
        context = GrammarContext(
            parent=self.start,
            previous_blocks=self.previous_blocks,
            current_block=tuple(self.nodes),
            attach_todos=self.attach_todos,
        )
        result = self.grammar.parse(tag, tokens, context)
        if result is None:
            return None

        if result.parent is not None:
            result.parent.add_child(result.node)
        return self._append(result.node)

    def _append(self, node: Node) -> Node:
        logger.debug("Classified %s", node)
        self.nodes.append(node)
        return node
