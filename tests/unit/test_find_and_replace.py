#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for find-and-replace over text nodes."""

import re

import pytest

from mdbreaks.ast import (
    Expression,
    FindAndReplaceOptions,
    MatchInfo,
    find_and_replace,
    make_node,
    text_node,
)
from mdbreaks.exceptions import InvalidSchemaError, InvalidTestError


def paragraph(*children):
    return make_node("root", [make_node("paragraph", list(children))])


def inline(tree):
    return tree.children[0].children


@pytest.mark.unit
class TestLiteralPatterns:
    """Test literal string patterns."""

    def test_every_occurrence_replaced(self) -> None:
        """Test that a literal replaces all occurrences with text nodes."""
        tree = paragraph(text_node("aaa"))

        find_and_replace(tree, "a", "b")

        assert inline(tree) == [text_node("b"), text_node("b"), text_node("b")]

    def test_surrounding_text_preserved(self) -> None:
        """Test that unmatched text stays in order around replacements."""
        tree = paragraph(text_node("one and two and three"))

        find_and_replace(tree, " and ", make_node("sep"))

        assert inline(tree) == [
            text_node("one"),
            make_node("sep"),
            text_node("two"),
            make_node("sep"),
            text_node("three"),
        ]

    def test_special_characters_are_literal(self) -> None:
        """Test that regex metacharacters in literals match verbatim."""
        tree = paragraph(text_node("1+1=2? (yes)"))

        find_and_replace(tree, "(yes)", "[ok]")

        assert inline(tree) == [text_node("1+1=2? "), text_node("[ok]")]

    def test_literal_is_case_sensitive(self) -> None:
        """Test that literal matching respects case."""
        tree = paragraph(text_node("Cat cat"))

        find_and_replace(tree, "cat", "dog")

        assert inline(tree) == [text_node("Cat "), text_node("dog")]

    def test_no_match_leaves_node_untouched(self) -> None:
        """Test that the original node object is kept when nothing matches."""
        original = text_node("nothing here")
        tree = paragraph(original)

        find_and_replace(tree, "zzz", "y")

        assert inline(tree)[0] is original

    def test_non_string_literal_rejected(self) -> None:
        """Test that non-string patterns fail in the escaper."""
        with pytest.raises(TypeError, match="Expected a string"):
            find_and_replace(paragraph(text_node("x")), [(42, "y")])

    def test_returns_given_tree(self) -> None:
        """Test that the same tree object is returned."""
        tree = paragraph(text_node("x"))

        assert find_and_replace(tree, "x", "y") is tree


@pytest.mark.unit
class TestExpressions:
    """Test regular expression patterns."""

    def test_compiled_pattern_is_global(self) -> None:
        """Test that compiled patterns replace every match."""
        tree = paragraph(text_node("a1b22c"))

        find_and_replace(tree, re.compile(r"\d+"), lambda value, info: make_node("num", value))

        assert inline(tree) == [
            text_node("a"),
            make_node("num", "1"),
            text_node("b"),
            make_node("num", "22"),
            text_node("c"),
        ]

    def test_non_global_expression_replaces_first_only(self) -> None:
        """Test that a non-global expression processes one match per node."""
        tree = paragraph(text_node("x-x"))

        find_and_replace(tree, Expression("x", is_global=False), "y")

        assert inline(tree) == [text_node("y"), text_node("-x")]

    def test_non_global_applies_per_text_node(self) -> None:
        """Test that the first-match limit is per text node, not per tree."""
        tree = make_node("root", [make_node("p", [text_node("xx")]), make_node("p", [text_node("xx")])])

        find_and_replace(tree, Expression(re.compile("x"), is_global=False), "y")

        assert tree.children[0].children == [text_node("y"), text_node("x")]
        assert tree.children[1].children == [text_node("y"), text_node("x")]

    def test_expression_flags(self) -> None:
        """Test that string expressions are compiled with the given flags."""
        tree = paragraph(text_node("Cat"))

        find_and_replace(tree, Expression("cat", flags=re.IGNORECASE), "dog")

        assert inline(tree) == [text_node("dog")]

    def test_groups_and_match_info_passed(self) -> None:
        """Test the arguments given to replace functions."""
        tree = paragraph(text_node("see #12 now"))
        calls = []

        def replace(value, number, info):
            calls.append((value, number, info))
            return make_node("issue", value, number=int(number))

        find_and_replace(tree, re.compile(r"#(\d+)"), replace)

        value, number, info = calls[0]
        assert (value, number) == ("#12", "12")
        assert isinstance(info, MatchInfo)
        assert info.index == 4
        assert info.input == "see #12 now"
        assert [node.type for node in info.stack] == ["root", "paragraph", "text"]
        assert inline(tree)[1] == make_node("issue", "#12", number=12)

    def test_unmatched_group_is_none(self) -> None:
        """Test that optional groups that did not participate are None."""
        seen = []
        tree = paragraph(text_node("ab"))

        find_and_replace(tree, re.compile(r"a(x)?"), lambda value, group, info: seen.append(group))

        assert seen == [None]

    def test_empty_width_matches_terminate(self) -> None:
        """Test that zero-width matches do not loop forever."""
        tree = paragraph(text_node("ab"))

        find_and_replace(tree, re.compile(r"(?=b)"), make_node("mark"))

        assert inline(tree) == [text_node("a"), make_node("mark"), text_node("b")]


@pytest.mark.unit
class TestReplacementResults:
    """Test how replace function results are interpreted."""

    def test_empty_string_produces_no_node(self) -> None:
        """Test that an empty replacement collapses instead of leaving empty text."""
        kept = paragraph(text_node("a-b"))
        dropped = paragraph(text_node("a-b"))

        find_and_replace(kept, "-", "+")
        find_and_replace(dropped, "-", "")

        assert inline(dropped) == [text_node("a"), text_node("b")]
        assert len(inline(dropped)) == len(inline(kept)) - 1

    def test_none_removes_match(self) -> None:
        """Test that None removes the matched text."""
        tree = paragraph(text_node("a-b"))

        find_and_replace(tree, "-", lambda value, info: None)

        assert inline(tree) == [text_node("a"), text_node("b")]

    def test_whole_node_removed(self) -> None:
        """Test that replacing all text with nothing removes the node."""
        tree = paragraph(text_node("xx"), make_node("emphasis", [text_node("keep")]))

        find_and_replace(tree, "x", "")

        assert inline(tree) == [make_node("emphasis", [text_node("keep")])]

    def test_list_of_nodes_spliced(self) -> None:
        """Test that lists are inserted in order."""
        tree = paragraph(text_node("a|b"))

        find_and_replace(tree, "|", lambda value, info: [make_node("l"), make_node("r")])

        assert [node.type for node in inline(tree)] == ["text", "l", "r", "text"]

    def test_false_declines_match(self) -> None:
        """Test that False keeps the original text for that match."""
        tree = paragraph(text_node("cat dog cat"))

        def only_second(value, info):
            return False if info.index == 0 else value.upper()

        find_and_replace(tree, re.compile(r"cat|dog"), only_second)

        assert inline(tree) == [
            text_node("cat "),
            text_node("DOG"),
            text_node(" "),
            text_node("CAT"),
        ]

    def test_all_declined_keeps_node(self) -> None:
        """Test that declining every match leaves the node as it was."""
        original = text_node("aaa")
        tree = paragraph(original)

        find_and_replace(tree, "a", lambda value, info: False)

        assert inline(tree) == [original]
        assert inline(tree)[0] is original

    def test_constant_nodes_are_copied(self) -> None:
        """Test that a constant node replacement is not shared between matches."""
        tree = paragraph(text_node("x x"))

        find_and_replace(tree, "x", make_node("mark"))

        first, _, second = inline(tree)
        assert first == second
        assert first is not second

    def test_replacement_nodes_not_rescanned(self) -> None:
        """Test that produced text is not matched again in the same pass."""
        tree = paragraph(text_node("a"))

        find_and_replace(tree, "a", "aa")

        assert inline(tree) == [text_node("aa")]

    def test_producer_exception_propagates(self) -> None:
        """Test that errors from replace functions reach the caller."""

        def explode(value, info):
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError, match="nope"):
            find_and_replace(paragraph(text_node("x")), "x", explode)


@pytest.mark.unit
class TestSchemas:
    """Test multi-pattern schemas."""

    def test_list_schema_in_order(self) -> None:
        """Test that later pairs see the output of earlier pairs."""
        tree = paragraph(text_node("ab"))

        find_and_replace(tree, [("a", "b"), ("b", "c")])

        assert inline(tree) == [text_node("c"), text_node("c")]

    def test_mapping_schema(self) -> None:
        """Test mapping literal strings to replacements."""
        tree = paragraph(text_node("(c) 2025 -- ok"))

        find_and_replace(tree, {"(c)": "©", "--": "—"})

        assert "".join(node.value for node in inline(tree)) == "© 2025 — ok"

    def test_schema_options_in_second_argument(self) -> None:
        """Test that options follow a schema directly."""
        tree = make_node("root", [make_node("code", [text_node("a")]), make_node("p", [text_node("a")])])

        find_and_replace(tree, [("a", "b")], {"ignore": "code"})

        assert tree.children[0].children == [text_node("a")]
        assert tree.children[1].children == [text_node("b")]

    def test_pair_without_replacement_removes(self) -> None:
        """Test that a one-element pair removes its matches."""
        tree = paragraph(text_node("a-b"))

        find_and_replace(tree, [("-",)])

        assert inline(tree) == [text_node("a"), text_node("b")]

    @pytest.mark.parametrize("schema", [42, None, 4.5])
    def test_invalid_schema(self, schema) -> None:
        """Test that non-list, non-mapping schemas are rejected."""
        with pytest.raises(InvalidSchemaError) as exc_info:
            find_and_replace(paragraph(text_node("x")), schema)

        assert isinstance(exc_info.value, TypeError)

    def test_invalid_schema_entry(self) -> None:
        """Test that list entries must be pairs."""
        with pytest.raises(InvalidSchemaError):
            find_and_replace(paragraph(text_node("x")), ["x"])


@pytest.mark.unit
class TestIgnore:
    """Test ignoring text inside matching ancestors."""

    def test_ignored_ancestor_never_scanned(self) -> None:
        """Test that the producer is not called for text under ignored nodes."""
        tree = make_node(
            "root",
            [
                make_node("paragraph", [make_node("code", [make_node("span", [text_node("x")])])]),
                make_node("paragraph", [text_node("x")]),
            ],
        )
        stacks = []

        def replace(value, info):
            stacks.append([node.type for node in info.stack])
            return "y"

        find_and_replace(tree, "x", replace, {"ignore": "code"})

        assert stacks == [["root", "paragraph", "text"]]
        assert tree.children[0].children[0].children[0].children == [text_node("x")]

    def test_ignore_with_options_instance(self) -> None:
        """Test passing FindAndReplaceOptions."""
        tree = make_node("root", [make_node("html", [text_node("x")])])

        find_and_replace(tree, "x", "y", FindAndReplaceOptions(ignore=["code", "html"]))

        assert tree.children[0].children == [text_node("x")]

    def test_ignore_function_receives_position(self) -> None:
        """Test that ignore functions get each ancestor's index and parent."""
        tree = make_node("root", [make_node("p", [text_node("x")]), make_node("p", [text_node("x")])])

        def second_paragraph(node, index, parent):
            return node.type == "p" and index == 1 and parent is tree

        find_and_replace(tree, "x", "y", {"ignore": second_paragraph})

        assert tree.children[0].children == [text_node("y")]
        assert tree.children[1].children == [text_node("x")]

    def test_root_text_node_not_replaced(self) -> None:
        """Test that a text node without a parent is left alone."""
        tree = text_node("x")

        find_and_replace(tree, "x", "y")

        assert tree == text_node("x")

    def test_invalid_ignore(self) -> None:
        """Test that an invalid ignore test is rejected."""
        with pytest.raises(InvalidTestError):
            find_and_replace(paragraph(text_node("x")), "x", "y", {"ignore": 3})

    def test_invalid_options_type(self) -> None:
        """Test that options must be a mapping or options instance."""
        with pytest.raises(TypeError):
            find_and_replace(paragraph(text_node("x")), "x", "y", ["code"])
