#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/find_and_replace.py
"""Find patterns in text nodes and replace them with new nodes.

`find_and_replace` searches the tree in preorder for matches inside the
``value`` of ``text`` nodes and splices the produced nodes into the text
node's parent in its place. Matches never span several text nodes.

A pattern can be:

- a ``str``: matched literally, case-sensitively, every occurrence
- a compiled ``re.Pattern``: every occurrence
- an `Expression`: a regular expression that can be limited to its first
  occurrence per text node with ``is_global=False``

A replacement can be a constant (string, node, list of nodes, or ``None``) or
a function called as ``replace(match, *groups, info)`` where ``info`` is a
`MatchInfo`. Its result is interpreted as follows:

- a non-empty string becomes a text node; an empty string produces nothing
- ``None`` produces nothing, removing the matched text
- a node or a list of nodes is inserted as-is
- ``False`` declines the match and the original text is kept

Examples
--------
Link every issue reference:

    >>> def link_issue(value, number, info):
    ...     return make_node("link", [text_node(value)], url=f"/issues/{number}")
    >>> find_and_replace(tree, re.compile(r"#(\\d+)"), link_issue)

Several patterns in one call, leaving code untouched:

    >>> find_and_replace(
    ...     tree,
    ...     [("(c)", "©"), (re.compile(r"\\s+--\\s+"), " — ")],
    ...     {"ignore": ["code", "inlineCode"]},
    ... )

"""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Union

from mdbreaks.ast.nodes import Node, text_node
from mdbreaks.ast.predicates import Test, convert
from mdbreaks.ast.visit import ActionTuple, visit_parents
from mdbreaks.constants import TEXT_NODE_TYPE
from mdbreaks.exceptions import InvalidSchemaError
from mdbreaks.options import CloneFrozenMixin
from mdbreaks.utils.escape import escape_string_regexp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Expression:
    """A regular expression pattern with an explicit scope.

    Parameters
    ----------
    regex : str or re.Pattern
        Pattern source or compiled pattern
    is_global : bool, default = True
        Process every match in a text node; when False only the first match
        of each text node is processed
    flags : int, default = 0
        ``re`` flags, used only when ``regex`` is a string

    """

    regex: Union[str, re.Pattern[str]]
    is_global: bool = True
    flags: int = 0
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the pattern source."""
        compiled = self.regex if isinstance(self.regex, re.Pattern) else re.compile(self.regex, self.flags)
        object.__setattr__(self, "pattern", compiled)

    def finditer(self, value: str) -> Iterator[re.Match[str]]:
        """Yield the matches to process in ``value``, left to right."""
        if self.is_global:
            yield from self.pattern.finditer(value)
            return

        match = self.pattern.search(value)
        if match is not None:
            yield match


@dataclass(frozen=True)
class MatchInfo:
    """Details about a match, passed as the last argument to replace functions.

    Parameters
    ----------
    index : int
        Offset of the match in ``input``
    input : str
        The complete value of the text node
    stack : list of Node
        Ancestors of the text node followed by the text node itself

    """

    index: int
    input: str
    stack: list[Node]


@dataclass(frozen=True)
class FindAndReplaceOptions(CloneFrozenMixin):
    """Configuration for `find_and_replace`.

    Parameters
    ----------
    ignore : Test, optional
        Test run against every ancestor of a text node; when any ancestor
        matches, the text node is left untouched

    """

    ignore: Test = field(
        default=None,
        metadata={"help": "Skip text inside ancestors matching this test", "importance": "core"},
    )

    @classmethod
    def coerce(cls, options: FindAndReplaceOptions | Mapping[str, Any] | None) -> FindAndReplaceOptions:
        """Accept an options instance, a plain mapping, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(**options)
        raise TypeError(f"Expected FindAndReplaceOptions or mapping as options, got {type(options).__name__}")


ReplaceFunction = Callable[..., Any]
Replace = Union[str, Node, list[Node], None, ReplaceFunction]
Find = Union[str, re.Pattern[str], Expression]
Pair = tuple[Expression, ReplaceFunction]
Schema = Union[list[Any], tuple[Any, ...], Mapping[str, Replace]]


def find_and_replace(
    tree: Node,
    find: Find | Schema,
    replace: Replace | FindAndReplaceOptions | Mapping[str, Any] = None,
    options: FindAndReplaceOptions | Mapping[str, Any] | None = None,
) -> Node:
    """Find patterns in a tree and replace them.

    Parameters
    ----------
    tree : Node
        Tree to change in place
    find : Find or Schema
        A single pattern, or a schema: a list of ``(pattern, replacement)``
        pairs or a mapping of literal strings to replacements
    replace : Replace, optional
        Replacement for a single ``find`` pattern. When ``find`` is a schema
        this argument holds the options instead
    options : FindAndReplaceOptions or mapping, optional
        Options for a single ``find`` pattern

    Returns
    -------
    Node
        The given tree

    Raises
    ------
    InvalidSchemaError
        If the schema is neither a list nor a mapping
    InvalidTestError
        If the ``ignore`` test has an unsupported shape
    TypeError
        If a literal pattern is not a string

    Notes
    -----
    Pairs are applied one after another; each pass sees the tree as changed
    by the previous ones. Exceptions raised by replace functions propagate
    and leave the tree as changed so far.

    """
    if isinstance(find, (str, re.Pattern, Expression)):
        schema: Any = [(find, replace)]
        settings = FindAndReplaceOptions.coerce(options)
    else:
        schema = find
        settings = FindAndReplaceOptions.coerce(replace)  # type: ignore[arg-type]

    ignored = convert(settings.ignore if settings.ignore is not None else [])
    pairs = to_pairs(schema)

    for expression, producer in pairs:
        replaced = 0

        def handler(node: Node, parents: list[Node]) -> ActionTuple | int:
            nonlocal replaced
            parent = parents[-1]
            index = _index_of(parent.children, node)
            value = node.value or ""
            start = 0
            change = False
            nodes: list[Node] = []

            for match in expression.finditer(value):
                position = match.start()
                info = MatchInfo(index=position, input=value, stack=[*parents, node])
                result = producer(match.group(0), *match.groups(), info)

                if isinstance(result, str):
                    result = text_node(result) if result else None

                # Not a match after all
                if result is False:
                    continue

                if start != position:
                    nodes.append(text_node(value[start:position]))
                if isinstance(result, (list, tuple)):
                    nodes.extend(result)
                elif result is not None:
                    nodes.append(result)

                start = match.end()
                change = True
                replaced += 1

            if change:
                if start < len(value):
                    nodes.append(text_node(value[start:]))
                parent.children[index : index + 1] = nodes  # type: ignore[index]
            else:
                nodes = [node]

            return index + len(nodes)

        def visitor(node: Node, parents: list[Node]) -> ActionTuple | int | None:
            grandparent: Optional[Node] = None
            for parent in parents:
                parent_index = _index_of(grandparent.children, parent) if grandparent is not None else None
                if ignored(parent, parent_index, grandparent):
                    return None
                grandparent = parent

            if grandparent is not None:
                return handler(node, parents)
            return None

        visit_parents(tree, TEXT_NODE_TYPE, visitor)
        logger.debug(f"Pattern {expression.pattern.pattern!r} replaced {replaced} match(es)")

    return tree


def to_pairs(schema: Schema) -> list[Pair]:
    """Turn a schema into ``(Expression, replace function)`` pairs.

    Raises
    ------
    InvalidSchemaError
        If ``schema`` is not a list, tuple, or mapping, or a list entry is not a pair

    """
    if isinstance(schema, Mapping):
        return [(to_expression(find), to_function(replace)) for find, replace in schema.items()]

    if not isinstance(schema, (list, tuple)):
        raise InvalidSchemaError(schema)

    result: list[Pair] = []
    for entry in schema:
        if not isinstance(entry, (list, tuple)) or not 1 <= len(entry) <= 2:
            raise InvalidSchemaError(entry)
        replace = entry[1] if len(entry) > 1 else None
        result.append((to_expression(entry[0]), to_function(replace)))
    return result


def to_expression(find: Any) -> Expression:
    """Turn a pattern into an `Expression`; literal strings are escaped and global."""
    if isinstance(find, Expression):
        return find
    if isinstance(find, re.Pattern):
        return Expression(find)
    return Expression(re.compile(escape_string_regexp(find)))


def to_function(replace: Replace) -> ReplaceFunction:
    """Turn a replacement into a replace function."""
    if callable(replace):
        return replace

    def constant(*args: Any) -> Any:
        return copy.deepcopy(replace)

    return constant


def _index_of(children: Optional[list[Node]], node: Node) -> int:
    """Position of ``node`` in ``children`` by identity."""
    for index, child in enumerate(children or ()):
        if child is node:
            return index
    raise ValueError(f"{node.type!r} node is not a child of its parent")
