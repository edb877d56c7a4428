"""Errors raised by the documentation-comment compiler."""

from __future__ import annotations

from typing import Sequence


class JsDocSerializerError(Exception):
    """Base class for all serializer errors."""


class InvalidInputError(JsDocSerializerError, TypeError):
    """Raised when ``compile`` receives something that is not text."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"`contents` was not a string (got {type(value).__name__})")


class GrammarViolationError(JsDocSerializerError, ValueError):
    """Raised when a recognized tag carries a value outside its vocabulary."""

    def __init__(self, tag: str, value: str, accepted: Sequence[str]) -> None:
        self.tag = tag
        self.value = value
        self.accepted = tuple(accepted)
        shown = value if value else "<missing>"
        super().__init__(
            f"@{tag} got {shown!r}; expected one of: {', '.join(self.accepted)}"
        )


class SourceDecodeError(JsDocSerializerError, ValueError):
    """Raised when a source file is not valid text in the expected encoding."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not decode {path}: {reason}")
