#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/__init__.py
"""Document tree model, traversal, and find-and-replace.

This package provides the tree machinery the transforms are built on:

- `Node` and builders (`make_node`, `text_node`, `break_node`)
- node tests (`convert`, `matches`)
- depth-first traversal with ancestors (`visit_parents`)
- text search and node splicing (`find_and_replace`)
- JSON serialization (`ast_to_json`, `json_to_ast`)

"""

from mdbreaks.ast.find_and_replace import (
    Expression,
    FindAndReplaceOptions,
    MatchInfo,
    find_and_replace,
)
from mdbreaks.ast.nodes import Node, break_node, make_node, text_node
from mdbreaks.ast.predicates import Test, convert, matches
from mdbreaks.ast.serialization import ast_to_json, dict_to_node, json_to_ast, node_to_dict
from mdbreaks.ast.visit import CONTINUE, EXIT, SKIP, visit_parents, walk

__all__ = [
    # Nodes
    "Node",
    "make_node",
    "text_node",
    "break_node",
    # Tests
    "Test",
    "convert",
    "matches",
    # Traversal
    "visit_parents",
    "walk",
    "CONTINUE",
    "EXIT",
    "SKIP",
    # Find and replace
    "find_and_replace",
    "Expression",
    "MatchInfo",
    "FindAndReplaceOptions",
    # Serialization
    "node_to_dict",
    "dict_to_node",
    "ast_to_json",
    "json_to_ast",
]
