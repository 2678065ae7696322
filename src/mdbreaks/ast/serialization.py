#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/serialization.py
"""JSON serialization and deserialization for document trees.

This module converts trees to and from the plain JSON shape used by
remark-style hosts (``{"type": ..., "value": ..., "children": [...]}``),
enabling trees to be handed over between processes and tools.

The JSON format preserves:
- Node types, text values and children order
- Every other node field (``depth``, ``url``, ``position``, ...) via
  `Node.attributes`

Examples
--------
Serialize a tree to JSON:

    >>> from mdbreaks.ast import make_node, text_node
    >>> tree = make_node("root", [make_node("paragraph", [text_node("Hi")])])
    >>> json_str = ast_to_json(tree, indent=2)

Deserialize JSON back to a tree:

    >>> tree = json_to_ast(json_str)
    >>> tree.children[0].type
    'paragraph'

"""

from __future__ import annotations

import json
from typing import Any

from mdbreaks.ast.nodes import Node
from mdbreaks.exceptions import SerializationError


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) into a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        Dictionary with ``type`` first, then attributes, ``value`` and ``children``

    """
    result: dict[str, Any] = {"type": node.type}
    result.update(node.attributes)

    if node.value is not None:
        result["value"] = node.value
    if node.children is not None:
        result["children"] = [node_to_dict(child) for child in node.children]

    return result


def dict_to_node(data: Any, path: str = "root") -> Node:
    """Convert a dictionary (as produced by `node_to_dict` or a host) into a node.

    Parameters
    ----------
    data : dict
        Dictionary describing the node
    path : str, default = "root"
        Location of ``data`` in the input, used in error messages

    Returns
    -------
    Node
        The reconstructed node

    Raises
    ------
    SerializationError
        If ``data`` is not a mapping, lacks a string ``type``, or has a
        non-string ``value`` or a non-list ``children``

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object for node, got {type(data).__name__}", path=path)

    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise SerializationError("Node is missing a string 'type'", path=path)

    value = data.get("value")
    if value is not None and not isinstance(value, str):
        raise SerializationError(f"Node 'value' must be a string, got {type(value).__name__}", path=path)

    children_data = data.get("children")
    children: list[Node] | None = None
    if children_data is not None:
        if not isinstance(children_data, list):
            raise SerializationError(
                f"Node 'children' must be a list, got {type(children_data).__name__}", path=path
            )
        children = [dict_to_node(child, f"{path}.children[{i}]") for i, child in enumerate(children_data)]

    attributes = {key: item for key, item in data.items() if key not in ("type", "value", "children")}
    return Node(type=node_type, value=value, children=children, attributes=attributes)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Parameters
    ----------
    node : Node
        Root of the tree
    indent : int or None, default = None
        Indentation passed to ``json.dumps``; None gives compact output

    Returns
    -------
    str
        JSON document

    """
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string into a tree.

    Raises
    ------
    SerializationError
        If the string is not valid JSON or does not describe a tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", original_error=e) from e

    return dict_to_node(data)
