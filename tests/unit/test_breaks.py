#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the line-break transform."""

import pytest

from mdbreaks.ast import break_node, make_node, text_node
from mdbreaks.options import BreaksOptions
from mdbreaks.transforms import newline_to_break, remark_breaks


@pytest.mark.unit
class TestNewlineToBreak:
    """Test replacing line endings with break nodes."""

    def test_mixed_line_endings(self) -> None:
        """Test LF and CRLF each becoming one break."""
        tree = make_node("root", [make_node("paragraph", [text_node("line1\nline2\r\nline3")])])

        newline_to_break(tree)

        assert tree.children[0].children == [
            text_node("line1"),
            break_node(),
            text_node("line2"),
            break_node(),
            text_node("line3"),
        ]

    def test_bare_carriage_return(self) -> None:
        """Test that a lone CR is a line ending."""
        tree = make_node("root", [make_node("paragraph", [text_node("a\rb")])])

        newline_to_break(tree)

        assert tree.children[0].children == [text_node("a"), break_node(), text_node("b")]

    def test_one_break_per_line_ending(self) -> None:
        """Test that consecutive line endings give consecutive breaks."""
        tree = make_node("root", [make_node("paragraph", [text_node("a\n\r\nb")])])

        newline_to_break(tree)

        assert [node.type for node in tree.children[0].children] == ["text", "break", "break", "text"]

    def test_break_nodes_have_no_payload(self) -> None:
        """Test that breaks carry no value or children."""
        tree = make_node("root", [make_node("paragraph", [text_node("\n")])])

        newline_to_break(tree)

        (node,) = tree.children[0].children
        assert node.type == "break"
        assert node.value is None
        assert node.children is None

    def test_nested_text(self, markdown_tree) -> None:
        """Test that text at any depth is processed, code included by default."""
        newline_to_break(markdown_tree)

        paragraph, code = markdown_tree.children
        assert [node.type for node in paragraph.children] == ["text", "break", "text", "emphasis"]
        assert paragraph.children[3].children == [text_node("a"), break_node(), text_node("b")]
        assert code.children == [text_node("keep"), break_node(), text_node("this")]

    def test_ignore(self, markdown_tree) -> None:
        """Test exempting subtrees explicitly."""
        newline_to_break(markdown_tree, ignore="code")

        assert markdown_tree.children[1].children == [text_node("keep\nthis")]

    def test_custom_break_type(self) -> None:
        """Test inserting a different node type."""
        tree = make_node("root", [make_node("paragraph", [text_node("a\nb")])])

        newline_to_break(tree, break_type="hardBreak")

        assert tree.children[0].children[1] == make_node("hardBreak")

    def test_text_without_line_endings_untouched(self) -> None:
        """Test that plain text nodes are kept as-is."""
        original = text_node("no breaks")
        tree = make_node("root", [make_node("paragraph", [original])])

        newline_to_break(tree)

        assert tree.children[0].children[0] is original


@pytest.mark.unit
class TestRemarkBreaks:
    """Test the plugin factory."""

    def test_factory_returns_transformer(self) -> None:
        """Test that calling the factory gives a tree transformer."""
        tree = make_node("root", [make_node("paragraph", [text_node("a\nb")])])

        transformer = remark_breaks()
        result = transformer(tree)

        assert result is None
        assert tree.children[0].children[1] == break_node()

    def test_factory_options(self, markdown_tree) -> None:
        """Test that options configure ignored types and break type."""
        transformer = remark_breaks(BreaksOptions(ignore=("code", "emphasis"), break_type="br"))

        transformer(markdown_tree)

        paragraph, code = markdown_tree.children
        assert [node.type for node in paragraph.children] == ["text", "br", "text", "emphasis"]
        assert paragraph.children[3].children == [text_node("a\nb")]
        assert code.children == [text_node("keep\nthis")]

    def test_transformer_is_reusable(self) -> None:
        """Test that one transformer can process several trees."""
        transformer = remark_breaks()
        trees = [make_node("root", [make_node("p", [text_node(f"{i}\n{i}")])]) for i in range(2)]

        for tree in trees:
            transformer(tree)

        assert all(len(tree.children[0].children) == 3 for tree in trees)
