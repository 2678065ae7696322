#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/ast/predicates.py
"""Node tests and their conversion into predicates.

A *test* describes which nodes a walk or a replacement pass cares about. It
can take several shapes:

- ``None``: every node matches
- ``str``: nodes whose ``type`` equals the string
- mapping: nodes whose listed fields equal the given values
- callable: ``check(node, index, parent)`` returning a truthy value
- list or tuple: matches when *any* of the contained tests matches

`convert` resolves a test once into a single callable so the hot traversal
loop never re-inspects the test's shape.

Examples
--------
    >>> is_heading = convert("heading")
    >>> is_heading(make_node("heading", [text_node("Title")]), None, None)
    True
    >>> is_level_two = convert({"type": "heading", "depth": 2})

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from mdbreaks.ast.nodes import Node
from mdbreaks.exceptions import InvalidTestError

Check = Callable[[Node, Optional[int], Optional[Node]], Any]
Assertion = Callable[[Any, Optional[int], Optional[Node]], bool]
Test = Union[None, str, Mapping[str, Any], Check, list[Any], tuple[Any, ...]]

_MISSING = object()


def convert(test: Test = None) -> Assertion:
    """Turn a test into an assertion callable.

    Parameters
    ----------
    test : Test, optional
        Test to convert; see the module docstring for accepted shapes

    Returns
    -------
    Assertion
        Callable taking ``(node, index, parent)`` and returning a bool

    Raises
    ------
    InvalidTestError
        If ``test`` has none of the accepted shapes

    """
    if test is None:
        return _ok
    if isinstance(test, str):
        return _type_factory(test)
    if isinstance(test, Mapping):
        return _props_factory(test)
    if isinstance(test, (list, tuple)):
        return _any_factory(test)
    if callable(test):
        return _cast_factory(test)
    raise InvalidTestError(test)


def matches(node: Any, test: Test = None, index: Optional[int] = None, parent: Optional[Node] = None) -> bool:
    """Check a single node against a test.

    For repeated checks prefer `convert`, which resolves the test only once.
    """
    return convert(test)(node, index, parent)


def _any_factory(tests: list[Any] | tuple[Any, ...]) -> Assertion:
    checks = [convert(sub_test) for sub_test in tests]

    def any_check(node: Node, index: Optional[int], parent: Optional[Node]) -> bool:
        return any(check(node, index, parent) for check in checks)

    return _cast_factory(any_check)


def _props_factory(expected: Mapping[str, Any]) -> Assertion:
    fields = dict(expected)

    def all_fields(node: Node, index: Optional[int], parent: Optional[Node]) -> bool:
        for key, value in fields.items():
            actual = node.get(key, _MISSING)
            if type(actual) is not type(value) or actual != value:
                return False
        return True

    return _cast_factory(all_fields)


def _type_factory(node_type: str) -> Assertion:
    def type_check(node: Node, index: Optional[int], parent: Optional[Node]) -> bool:
        return node.type == node_type

    return _cast_factory(type_check)


def _cast_factory(check: Check) -> Assertion:
    def assertion(node: Any, index: Optional[int] = None, parent: Optional[Node] = None) -> bool:
        return isinstance(node, Node) and bool(check(node, index, parent))

    return assertion


def _ok(node: Any, index: Optional[int] = None, parent: Optional[Node] = None) -> bool:
    return isinstance(node, Node)
