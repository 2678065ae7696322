#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/nodes.py
"""Node class for document tree representation.

Trees handled by mdbreaks are produced and rendered by a host pipeline, so the
node model is deliberately schema-free: every node has a string ``type``,
leaves may carry a textual ``value``, and parents hold an ordered ``children``
list. Any other field a host attaches (heading depth, link URL, source
position, ...) lives in ``attributes``.

Node Shape
----------
Parent nodes:
    ``children`` is a list (possibly empty); the node's content is its children.

Leaf nodes:
    ``children`` is ``None``; text-bearing leaves store their payload in ``value``.

Examples
--------
Build a small tree:

    >>> tree = make_node("root", [make_node("paragraph", [text_node("Hello")])])
    >>> tree.children[0].children[0].value
    'Hello'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from mdbreaks.constants import BREAK_NODE_TYPE, NODE_STRUCTURAL_FIELDS, TEXT_NODE_TYPE

_MISSING = object()


@dataclass
class Node:
    """A single node in a document tree.

    Parameters
    ----------
    type : str
        Node type discriminator (e.g. ``"root"``, ``"paragraph"``, ``"text"``)
    value : str or None, default = None
        Textual payload of leaf nodes
    children : list of Node or None, default = None
        Ordered child nodes; ``None`` marks a leaf
    attributes : dict, default = empty dict
        Any other host-defined fields of the node

    """

    type: str
    value: Optional[str] = None
    children: Optional[list[Node]] = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def is_parent(self) -> bool:
        """Whether this node can hold children."""
        return self.children is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a structural field or attribute by name.

        Parameters
        ----------
        key : str
            Field name; ``type``, ``value`` and ``children`` are read from the
            node itself, everything else from ``attributes``
        default : Any, default = None
            Value returned when the field is absent

        Returns
        -------
        Any
            The field value, or ``default``

        """
        if key in NODE_STRUCTURAL_FIELDS:
            result = getattr(self, key)
            return default if result is None else result
        return self.attributes.get(key, default)

    def has(self, key: str) -> bool:
        """Return True if the node defines ``key`` (structurally or as an attribute)."""
        return self.get(key, _MISSING) is not _MISSING


def make_node(type: str, value_or_children: str | list[Node] | None = None, **attributes: Any) -> Node:
    """Build a node in a single call.

    Parameters
    ----------
    type : str
        Node type
    value_or_children : str, list of Node, or None
        A string becomes the node's ``value``, a list becomes its ``children``
    **attributes
        Extra node fields

    Returns
    -------
    Node
        The new node

    Examples
    --------
    >>> make_node("emphasis", [text_node("hi")]).is_parent
    True

    """
    if isinstance(value_or_children, str):
        return Node(type=type, value=value_or_children, attributes=attributes)
    if value_or_children is not None:
        return Node(type=type, children=list(value_or_children), attributes=attributes)
    return Node(type=type, attributes=attributes)


def text_node(value: str) -> Node:
    """Build a text leaf."""
    return Node(type=TEXT_NODE_TYPE, value=value)


def break_node(type: str = BREAK_NODE_TYPE) -> Node:
    """Build a hard break leaf (no payload)."""
    return Node(type=type)
