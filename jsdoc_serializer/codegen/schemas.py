"""Attribute records carried by AST nodes, one shape per node kind."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True)
class Attributes:
    """Base record. Fields left as ``None`` are omitted from ``to_dict``."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Attributes):
                value = value.to_dict()
            result[f.name] = value
        return result


@dataclass(frozen=True)
class NoAttributes(Attributes):
    """Start, End, Whitespace and marker tags carry nothing beyond their kind."""


@dataclass(frozen=True)
class TypeDescriptor(Attributes):
    """A ``{type}`` expression.

    ``generic`` and ``full`` are only set for generic types such as
    ``Promise<void>``, where ``name`` holds the outer type.
    """

    name: str
    nullable: bool = False
    generic: str | None = None
    full: str | None = None


@dataclass(frozen=True)
class ErrorDescriptor(Attributes):
    type: str = "Error"


@dataclass(frozen=True)
class DescriptionAttributes(Attributes):
    description: str


@dataclass(frozen=True)
class ParamAttributes(Attributes):
    """``@param`` and ``@property``."""

    name: str | None = None
    description: str = ""
    typeof: TypeDescriptor | None = None
    default: str | None = None
    optional: bool = False


@dataclass(frozen=True)
class ReturnAttributes(Attributes):
    """``@return``, ``@returns`` and ``@yields``."""

    description: str = "None"
    typeof: TypeDescriptor | None = None


@dataclass(frozen=True)
class AccessAttributes(Attributes):
    accessor: str


@dataclass(frozen=True)
class AliasAttributes(Attributes):
    """``@alias``. ``namespace`` is set when the target is dotted."""

    target: str
    name: str
    namespace: str | None = None


@dataclass(frozen=True)
class AuthorAttributes(Attributes):
    name: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class CopyrightAttributes(Attributes):
    author: str | None = None
    year: str | None = None


@dataclass(frozen=True)
class SinceAttributes(Attributes):
    since: str = "0.0.0"


@dataclass(frozen=True)
class ThrowsAttributes(Attributes):
    error: ErrorDescriptor = field(default_factory=ErrorDescriptor)
    description: str = "None"


@dataclass(frozen=True)
class TodoAttributes(Attributes):
    todo: str = ""


@dataclass(frozen=True)
class DeprecatedAttributes(Attributes):
    description: str | None = None


@dataclass(frozen=True)
class EventAttributes(Attributes):
    """``@fires`` and ``@listens``."""

    event: str | None = None


@dataclass(frozen=True)
class LicenseAttributes(Attributes):
    license: str | None = None


@dataclass(frozen=True)
class DeclarationAttributes(Attributes):
    """Named declarations with an optional type (namespace, class, member, ...)."""

    name: str | None = None
    typeof: TypeDescriptor | None = None


@dataclass(frozen=True)
class BorrowsAttributes(Attributes):
    source: str | None = None
    target: str | None = None


@dataclass(frozen=True)
class TextAttributes(Attributes):
    """Free text tags (``@see``, ``@summary``, ``@example``)."""

    text: str = ""


@dataclass(frozen=True)
class KindAttributes(Attributes):
    value: str
