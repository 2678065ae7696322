#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/breaks.py
"""Turn line endings inside text into hard breaks.

Markdown treats a single newline in a paragraph as a soft break that renders
as a space. This transform replaces every line ending left in ``text`` nodes
(``\\r\\n``, ``\\n`` or ``\\r``) with a ``break`` node, so hosts render each
source line on its own line without trailing spaces or backslashes.

Examples
--------
Apply directly to a tree:

    >>> newline_to_break(tree)

Register as a plugin with a host that keeps a list of plugin factories:

    >>> host_plugins.insert(0, remark_breaks)

Keep line endings inside HTML and code:

    >>> transformer = remark_breaks(BreaksOptions(ignore=("html", "code")))
    >>> transformer(tree)

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from mdbreaks.ast.find_and_replace import Expression, MatchInfo, find_and_replace
from mdbreaks.ast.nodes import Node, break_node
from mdbreaks.ast.predicates import Test
from mdbreaks.constants import BREAK_NODE_TYPE, LINE_ENDING_PATTERN
from mdbreaks.options import BreaksOptions

logger = logging.getLogger(__name__)

LINE_ENDING = Expression(LINE_ENDING_PATTERN)


def newline_to_break(tree: Node, ignore: Test = None, break_type: str = BREAK_NODE_TYPE) -> None:
    """Replace each line ending in the tree's text with a break node.

    Parameters
    ----------
    tree : Node
        Tree to change in place
    ignore : Test, optional
        Ancestors whose text keeps its line endings; nothing is ignored by default
    break_type : str, default = "break"
        Type of the inserted nodes

    """

    def replace(value: str, info: MatchInfo) -> Node:
        return break_node(break_type)

    find_and_replace(tree, LINE_ENDING, replace, {"ignore": ignore})


def remark_breaks(options: Optional[BreaksOptions] = None) -> Callable[[Node], None]:
    """Plugin factory returning the line-break transformer.

    Parameters
    ----------
    options : BreaksOptions, optional
        Transform configuration; defaults ignore nothing

    Returns
    -------
    callable
        ``transformer(tree)`` that changes the tree in place

    """
    settings = options or BreaksOptions()

    def transformer(tree: Node, *args: Any) -> None:
        logger.debug(f"Converting line endings to '{settings.break_type}' nodes")
        newline_to_break(tree, settings.ignore_test, settings.break_type)

    return transformer
