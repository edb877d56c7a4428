"""Tests for the per-line classifier."""

import pytest

from jsdoc_serializer.codegen.classifier import BlockState, LineClassifier
from jsdoc_serializer.codegen.node import NodeKind
from jsdoc_serializer.errors import GrammarViolationError


def classify(lines, **kwargs):
    classifier = LineClassifier(**kwargs)
    return classifier, classifier.classify_all(lines)


class TestLineClassifierStates:
    """Tests for the block state machine."""

    def test_start_and_end(self) -> None:
        """Test delimiters produce Start and End and move the state."""
        classifier = LineClassifier()
        assert classifier.state is BlockState.BEFORE_START

        start = classifier.classify("/**")
        assert start.kind is NodeKind.START
        assert classifier.state is BlockState.IN_BLOCK

        end = classifier.classify("*/")
        assert end.kind is NodeKind.END
        assert end.parent is None
        assert classifier.state is BlockState.CLOSED

    def test_lines_after_close_ignored(self) -> None:
        """Test nothing is classified once the block is closed."""
        classifier, nodes = classify(["/**", "*/", "* late", "* @since 1"])

        assert [node.kind for node in nodes] == [NodeKind.START, NodeKind.END]
        assert classifier.classify("* more") is None

    def test_lines_before_start_ignored(self) -> None:
        """Test lines before the opening delimiter are skipped."""
        _, nodes = classify(["* stray", "/**", "*/"])
        assert [node.kind for node in nodes] == [NodeKind.START, NodeKind.END]


class TestLineClassifierLines:
    """Tests for description, whitespace and tag lines."""

    def test_description(self) -> None:
        """Test description text loses one leading '* ' and links to Start."""
        _, nodes = classify(["/**", "* Hi there", "*/"])
        start, description = nodes[0], nodes[1]

        assert description.kind is NodeKind.DESCRIPTION
        assert description.attributes.description == "Hi there"
        assert description.parent is start
        assert start.children == [description]

    def test_whitespace(self) -> None:
        """Test an empty continuation line is an unparented Whitespace node."""
        _, nodes = classify(["/**", "*", "*/"])

        assert nodes[1].kind is NodeKind.WHITESPACE
        assert nodes[1].parent is None
        assert nodes[0].children == []

    def test_tag_links_to_start(self) -> None:
        """Test tag nodes go in the flat list and under the Start node."""
        _, nodes = classify(["/**", "* @param {string} uwu Some uwu text", "*/"])
        start, param = nodes[0], nodes[1]

        assert param.kind is NodeKind.PARAM
        assert param.parent is start
        assert start.children == [param]
        assert param.attributes.description == "Some uwu text"

    def test_unknown_tag_produces_nothing(self) -> None:
        """Test unknown tags are dropped without error."""
        _, nodes = classify(["/**", "* @frobnicate now", "*/"])

        assert [node.kind for node in nodes] == [NodeKind.START, NodeKind.END]
        assert nodes[0].children == []

    def test_email_is_description(self) -> None:
        """Test an @ inside a word is not a tag marker."""
        _, nodes = classify(["/**", "* Mail me at dev@example.com", "*/"])

        assert nodes[1].kind is NodeKind.DESCRIPTION
        assert nodes[1].attributes.description == "Mail me at dev@example.com"

    def test_line_without_marker(self) -> None:
        """Test an unstarred line inside a block reads as a continuation."""
        _, nodes = classify(["/**", "plain text", "@since 2.0.0", "*/"])

        assert nodes[1].kind is NodeKind.DESCRIPTION
        assert nodes[1].attributes.description == "plain text"
        assert nodes[2].kind is NodeKind.SINCE
        assert nodes[2].attributes.since == "2.0.0"

    def test_children_in_source_order(self) -> None:
        """Test the Start node's children follow line order."""
        _, nodes = classify([
            "/**",
            "* Hola!",
            "* @abstract",
            "* @access private",
            "* @async",
            "* @return {Promise<void>} Returns void",
            "*/",
        ])

        assert [child.kind for child in nodes[0].children] == [
            NodeKind.DESCRIPTION,
            NodeKind.ABSTRACT,
            NodeKind.ACCESS,
            NodeKind.ASYNC,
            NodeKind.RETURN,
        ]

    def test_todo_unattached(self) -> None:
        """Test @todo stays in the flat list without a parent by default."""
        _, nodes = classify(["/**", "* @todo Later", "*/"])

        assert nodes[1].kind is NodeKind.TODO
        assert nodes[1].parent is None
        assert nodes[0].children == []

    def test_todo_attached(self) -> None:
        """Test attach_todos links @todo under Start."""
        _, nodes = classify(["/**", "* @todo Later", "*/"], attach_todos=True)
        assert nodes[1].parent is nodes[0]

    def test_grammar_violation_propagates(self) -> None:
        """Test a bad accessor aborts classification."""
        with pytest.raises(GrammarViolationError):
            classify(["/**", "* @access nonsense", "*/"])

    def test_alias_uses_previous_blocks(self) -> None:
        """Test the classifier hands earlier blocks to the alias rule."""
        _, first = classify(["/**", "* @namespace ns", "*/"])
        _, second = classify(["/**", "* @alias ns.getter", "*/"], previous_blocks=(first,))
        namespace, alias = first[1], second[1]

        assert alias.parent is namespace
        assert namespace.children == [alias]
        assert second[0].children == []
