"""Pytest configuration and shared fixtures for the mdbreaks test suite."""

import logging

import pytest

from mdbreaks.ast import Node, make_node, text_node
from mdbreaks.transforms import transform_registry


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_tree() -> Node:
    """Provide the tree ``root{a{x, y}, b}`` used by traversal tests.

    Returns
    -------
    Node
        Root node whose descendants are named by their ``type``.

    """
    return make_node(
        "root",
        [
            make_node("a", [make_node("x"), make_node("y")]),
            make_node("b"),
        ],
    )


@pytest.fixture
def markdown_tree() -> Node:
    """Provide an mdast-like tree with paragraphs, emphasis, and code."""
    return make_node(
        "root",
        [
            make_node("paragraph", [text_node("line1\nline2"), make_node("emphasis", [text_node("a\nb")])]),
            make_node("code", [text_node("keep\nthis")]),
        ],
    )


@pytest.fixture
def clean_registry():
    """Reset the global transform registry around a test."""
    transform_registry.clear()
    yield transform_registry
    transform_registry.clear()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Restore the mdbreaks logger after CLI tests reconfigure it."""
    package_logger = logging.getLogger("mdbreaks")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
