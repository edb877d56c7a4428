"""Locate documentation-comment blocks in raw text."""

from __future__ import annotations

import re

OPENING = "/**"
CLOSING = "*/"
CONTINUATION = "*"

# An empty "/**/" is a plain comment, not a documentation block.
JSDOC_REGEX = re.compile(r"/\*\*(?!/)[\s\S]*?\*/")


def extract_blocks(text: str) -> list[str]:
    """Return the verbatim text of every documentation block, in source order."""
    return [match.group(0) for match in JSDOC_REGEX.finditer(text)]


def split_block(block: str) -> list[str]:
    """Split a block into trimmed lines, delimiters on lines of their own.

    ``/** text */`` becomes ``["/**", "* text", "*/"]`` so that one-line
    blocks classify the same way as multi-line ones.
    """
    lines: list[str] = []
    for raw in block.split("\n"):
        line = raw.strip()

        if line.startswith(OPENING) and line != OPENING:
            lines.append(OPENING)
            line = line[len(OPENING):].strip()
            if line and line != CLOSING and not line.startswith(CONTINUATION):
                line = f"{CONTINUATION} {line}"

        if line.endswith(CLOSING) and line != CLOSING:
            content = line[: -len(CLOSING)].strip()
            if content and content != CONTINUATION:
                lines.append(content if content.startswith(CONTINUATION) else f"{CONTINUATION} {content}")
            lines.append(CLOSING)
            continue

        if line:
            lines.append(line)

    return lines
