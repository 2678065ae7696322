#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/visit.py
"""Depth-first tree traversal with ancestor tracking.

`visit_parents` walks a tree in preorder (node, then its children left to
right) or, with ``reverse=True``, in reverse preorder (node, then its
children right to left). For every node that passes the test, the visitor
is called with the node and the list of its ancestors, root first.

The visitor steers the walk through its return value:

- ``None`` or `CONTINUE`: descend into the node's children as usual
- `SKIP`: do not descend into this node's children
- `EXIT`: stop the whole walk immediately
- an ``int``: continue with the sibling at that index
- an ``(action, index)`` tuple: both of the above at once

Returning an index is how a visitor that inserts or removes siblings keeps
the walk correct: it reports where traversal should resume so that
already-processed nodes are not revisited and inserted nodes are not
skipped. The children list and its length are re-read on every step, so
changes to the parent's children are seen immediately.

Examples
--------
Collect all node types in document order:

    >>> seen = []
    >>> visit_parents(tree, lambda node, ancestors: seen.append(node.type))

Remove every ``html`` node, resuming at the removed node's index:

    >>> def drop_html(node, ancestors):
    ...     parent = ancestors[-1]
    ...     index = parent.children.index(node)
    ...     del parent.children[index]
    ...     return index
    >>> visit_parents(tree, "html", drop_html)

"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from mdbreaks.ast.nodes import Node
from mdbreaks.ast.predicates import Test, convert

CONTINUE = True
"""Continue traversing as normal."""

EXIT = False
"""Stop traversing immediately."""

SKIP = "skip"
"""Do not traverse this node's children."""

Action = Union[bool, str, None]
ActionTuple = tuple[Action, Optional[int]]
VisitorResult = Union[Action, int, ActionTuple]
Visitor = Callable[[Node, list[Node]], VisitorResult]


def visit_parents(
    tree: Node,
    test: Test | Visitor = None,
    visitor: Visitor | bool | None = None,
    reverse: bool = False,
) -> None:
    """Walk ``tree`` depth-first, calling ``visitor`` with each node's ancestors.

    Parameters
    ----------
    tree : Node
        Root of the tree to walk; it is tested and visited like any other node
    test : Test, optional
        Which nodes to call ``visitor`` for. When ``visitor`` is omitted, this
        argument is taken to be the visitor and every node is visited
    visitor : callable
        ``visitor(node, ancestors)``; see the module docstring for return values
    reverse : bool, default = False
        Visit children right to left (NRL) instead of left to right (NLR)

    Raises
    ------
    InvalidTestError
        If ``test`` has an unsupported shape; raised before any node is visited
    TypeError
        If no visitor is given

    """
    if callable(test) and not callable(visitor):
        if isinstance(visitor, bool):
            reverse = visitor
        visitor = test
        test = None

    if not callable(visitor):
        raise TypeError(f"Expected a visitor function, got {type(visitor).__name__}")

    is_match = convert(test)
    step = -1 if reverse else 1
    visit_node: Visitor = visitor

    def visit(node: Node, index: Optional[int], parents: list[Node]) -> ActionTuple:
        result: ActionTuple = (CONTINUE, None)

        if test is None or is_match(node, index, parents[-1] if parents else None):
            result = _to_result(visit_node(node, parents))
            if result[0] is EXIT:
                return result

        if isinstance(node, Node) and node.children is not None and result[0] != SKIP:
            offset = (len(node.children) if reverse else -1) + step
            grandparents = parents + [node]

            while node.children is not None and 0 <= offset < len(node.children):
                subresult = visit(node.children[offset], offset, grandparents)
                if subresult[0] is EXIT:
                    return subresult
                offset = subresult[1] if subresult[1] is not None else offset + step

        return result

    visit(tree, None, [])


walk = visit_parents


def _to_result(value: Any) -> ActionTuple:
    """Normalize a visitor return value into an ``(action, index)`` tuple."""
    if isinstance(value, tuple):
        action = value[0] if value else CONTINUE
        index = value[1] if len(value) > 1 else None
        return (CONTINUE if action is None else action, index)
    if value is None or isinstance(value, (bool, str)):
        return (CONTINUE if value is None else value, None)
    if isinstance(value, int):
        return (CONTINUE, value)
    return (value, None)
