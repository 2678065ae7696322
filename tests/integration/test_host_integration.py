#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_host_integration.py
"""Integration tests for running the line-break plugin inside a host pipeline.

Trees here follow the mdast shape a remark-style host hands over as JSON,
including source positions and node fields mdbreaks does not know about.
"""

import json
import re

import pytest

from mdbreaks import (
    Pipeline,
    activate,
    ast_to_json,
    deactivate,
    find_and_replace,
    json_to_ast,
    make_node,
    visit_parents,
)

HOST_TREE = {
    "type": "root",
    "children": [
        {
            "type": "heading",
            "depth": 1,
            "children": [{"type": "text", "value": "Title"}],
        },
        {
            "type": "paragraph",
            "children": [
                {"type": "text", "value": "Roses are red\nViolets are blue\r\n"},
                {
                    "type": "link",
                    "url": "https://example.com",
                    "children": [{"type": "text", "value": "a\nlink"}],
                },
            ],
            "position": {"start": {"line": 3, "column": 1}, "end": {"line": 5, "column": 5}},
        },
        {"type": "html", "children": [{"type": "text", "value": "<br>\n<br>"}]},
    ],
}


def _types(node) -> list:
    return [child.type for child in node.children]


@pytest.mark.integration
class TestHostPipeline:
    """Test the plugin lifecycle against a host-owned plugin list."""

    def test_activate_run_deactivate(self) -> None:
        """Test a full host session."""
        pipeline = Pipeline()
        activate(pipeline.plugins)

        tree = pipeline.run(json_to_ast(json.dumps(HOST_TREE)))

        paragraph = tree.children[1]
        assert _types(paragraph) == ["text", "break", "text", "break", "link"]
        assert _types(paragraph.children[4]) == ["text", "break", "text"]
        assert paragraph.attributes["position"]["start"]["line"] == 3

        deactivate(pipeline.plugins)
        assert pipeline.plugins == []

    def test_trailing_line_ending(self) -> None:
        """Test that a trailing line ending leaves no empty text node."""
        tree = Pipeline().use("breaks").run(json_to_ast(json.dumps(HOST_TREE)))

        values = [child.value for child in tree.children[1].children if child.type == "text"]
        assert values == ["Roses are red", "Violets are blue"]

    def test_ignore_html_round_trip(self) -> None:
        """Test an ignored subtree surviving serialization untouched."""
        tree = Pipeline([("breaks", {"ignore": ("html",)})]).run(json_to_ast(json.dumps(HOST_TREE)))

        output = json.loads(ast_to_json(tree))
        assert output["children"][2] == HOST_TREE["children"][2]
        assert output["children"][0] == HOST_TREE["children"][0]
        assert output["children"][1]["children"][2] == {"type": "text", "value": "Violets are blue"}

    def test_host_transform_after_breaks(self) -> None:
        """Test that a later host transform sees the inserted breaks."""

        def count_breaks():
            def transformer(tree):
                found = []
                visit_parents(tree, "break", lambda node, ancestors: found.append(ancestors[-1].type))
                tree.attributes["breaks"] = found

            return transformer

        pipeline = Pipeline([count_breaks])
        activate(pipeline.plugins)
        tree = pipeline.run(json_to_ast(json.dumps(HOST_TREE)))

        assert tree.attributes["breaks"] == ["paragraph", "paragraph", "link", "html"]


@pytest.mark.integration
class TestCombinedReplacements:
    """Test find-and-replace schemas combined with line breaks."""

    def test_typographic_replacements_and_breaks(self) -> None:
        """Test a schema pass followed by the break pass."""

        def typography():
            def transformer(tree):
                find_and_replace(tree, {"--": "–", "...": "…"}, {"ignore": "html"})

            return transformer

        tree = make_node("root", [make_node("paragraph", [make_node("text", "Wait...\n1--2")])])

        tree = Pipeline([typography, "breaks"]).run(tree)

        paragraph = tree.children[0]
        assert _types(paragraph) == ["text", "text", "break", "text", "text", "text"]
        assert "".join(child.value or "\n" for child in paragraph.children) == "Wait…\n1–2"

    def test_mention_nodes(self) -> None:
        """Test producing custom nodes from regex groups."""
        tree = make_node("root", [make_node("paragraph", [make_node("text", "ping @ada\nand @bob")])])

        find_and_replace(
            tree,
            re.compile(r"@(\w+)"),
            lambda value, name, info: make_node("mention", [make_node("text", value)], username=name),
        )
        Pipeline(["breaks"]).run(tree)

        mentions = []
        visit_parents(tree, "mention", lambda node, ancestors: mentions.append(node.attributes["username"]))
        assert mentions == ["ada", "bob"]
        assert _types(tree.children[0]) == ["text", "mention", "break", "text", "mention"]
