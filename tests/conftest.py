"""Pytest fixtures for jsdoc-serializer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsdoc_serializer.codegen.generator import Generator
from jsdoc_serializer.codegen.grammar import GrammarContext, TagGrammar
from jsdoc_serializer.codegen.node import Node, NodeKind
from jsdoc_serializer.config import SerializerConfig


NAMESPACED_SOURCE = """
  /**
   * @namespace ns
   * @copyright August &year;
   */
  var ns = {};

  /**
   * Hi!
   * @alias ns.getter
   * @author August <https://augu.dev>
   * @param {string} uwu Some uwu text
   * @param {string} [owo=test] uwu
   * @access public
   * @returns {void} Returns `void`
   */
  function getter() {}

  /**
   * Hola!
   * @abstract
   * @alias nothing
   * @access private
   * @async
   * @param {string} uwu Que? Me no habla ingles~
   * @return {Promise<void>} Returns void
   */
  function someOtherGetter() {}
"""

NESTED_SOURCE = """
  /**
   * Simple thing for simple stuff?
   * @param {string} contents The contents
   * @param {?string} nil A null value
   * @param {boolean} [defaults=true] A default value
   */
  function simple(contents, nil = null, defaults = true) {
    /**
     * Inner function for the [simple] function
     */
    function inner() {
      console.log('inner');
    }

    console.log('outer');
    inner();
  }
"""


@pytest.fixture
def generator() -> Generator:
    """Create a generator with default settings."""
    return Generator()


@pytest.fixture
def grammar() -> TagGrammar:
    """Create a fresh tag grammar."""
    return TagGrammar()


@pytest.fixture
def start_node() -> Node:
    """Create an unlinked Start node."""
    return Node.from_kind(NodeKind.START)


@pytest.fixture
def context(start_node: Node) -> GrammarContext:
    """Create a grammar context parented on a Start node."""
    return GrammarContext(parent=start_node, current_block=(start_node,))


@pytest.fixture
def namespaced_source() -> str:
    """Three blocks: a namespace, an aliased member and an unrelated function."""
    return NAMESPACED_SOURCE


@pytest.fixture
def nested_source() -> str:
    """Two blocks, the second inside the function the first documents."""
    return NESTED_SOURCE


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small project directory with documented sources."""
    root = tmp_path / "project"
    (root / "lib").mkdir(parents=True)
    (root / "node_modules" / "dep").mkdir(parents=True)

    (root / "index.js").write_text(NESTED_SOURCE)
    (root / "lib" / "ns.ts").write_text(NAMESPACED_SOURCE)
    (root / "lib" / "plain.js").write_text("const x = 1;\n")
    (root / "lib" / "notes.md").write_text("/** not source */\n")
    (root / "node_modules" / "dep" / "index.js").write_text(NESTED_SOURCE)
    return root


@pytest.fixture
def config() -> SerializerConfig:
    """Create a default config."""
    return SerializerConfig()
