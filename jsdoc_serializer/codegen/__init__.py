"""AST generation for documentation-comment blocks."""

from jsdoc_serializer.codegen.classifier import BlockState, LineClassifier
from jsdoc_serializer.codegen.extractor import JSDOC_REGEX, extract_blocks, split_block
from jsdoc_serializer.codegen.generator import Forest, Generator
from jsdoc_serializer.codegen.grammar import (
    ACCESSORS,
    DEFAULT_GRAMMAR,
    GrammarContext,
    TagGrammar,
    TagMatch,
    TagRule,
)
from jsdoc_serializer.codegen.node import Node, NodeKind

__all__ = [
    "ACCESSORS",
    "BlockState",
    "DEFAULT_GRAMMAR",
    "Forest",
    "Generator",
    "GrammarContext",
    "JSDOC_REGEX",
    "LineClassifier",
    "Node",
    "NodeKind",
    "TagGrammar",
    "TagMatch",
    "TagRule",
    "extract_blocks",
    "split_block",
]
