"""Extract JSDoc comment blocks into an abstract syntax tree."""

from jsdoc_serializer.codegen import Forest, Generator, Node, NodeKind, TagGrammar
from jsdoc_serializer.config import SerializerConfig, load_config
from jsdoc_serializer.errors import (
    GrammarViolationError,
    InvalidInputError,
    JsDocSerializerError,
    SourceDecodeError,
)
from jsdoc_serializer.serializer import JsDocSerializer, forest_to_dict

__version__ = "0.1.0"

__all__ = [
    "Forest",
    "Generator",
    "GrammarViolationError",
    "InvalidInputError",
    "JsDocSerializer",
    "JsDocSerializerError",
    "Node",
    "NodeKind",
    "SerializerConfig",
    "SourceDecodeError",
    "TagGrammar",
    "forest_to_dict",
    "load_config",
]
