#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/pipeline.py
"""Pipeline orchestration for tree transforms.

A `Pipeline` holds an ordered list of plugins, the same shape remark-style
hosts keep for their markdown renderer. Each entry is one of:

- a plugin factory: called with no arguments, it returns a transformer
- a registered transform name (``"breaks"``)
- a ``(plugin_or_name, options)`` tuple

Running the pipeline calls every plugin in order and applies the returned
transformer to the tree. A transformer changes the tree in place and returns
None, or returns a node that replaces the tree for the following stages.

Examples
--------
    >>> from mdbreaks.transforms import Pipeline, remark_breaks
    >>> pipeline = Pipeline([remark_breaks])
    >>> tree = pipeline.run(tree)

With options:

    >>> pipeline = Pipeline([("breaks", {"ignore": ("code",)})])

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from mdbreaks.ast.nodes import Node
from mdbreaks.exceptions import TransformError
from mdbreaks.transforms.metadata import Plugin, Transformer
from mdbreaks.transforms.registry import transform_registry

logger = logging.getLogger(__name__)

PluginEntry = Union[str, Plugin, tuple[Union[str, Plugin], Any]]


class Pipeline:
    """Ordered list of plugins applied to a tree.

    Parameters
    ----------
    plugins : list, optional
        Initial plugin entries. The list is exposed as ``plugins`` so hosts and
        `activate`/`deactivate` can edit it in place

    """

    def __init__(self, plugins: Optional[list[PluginEntry]] = None):
        """Initialize pipeline with plugin entries."""
        self.plugins: list[PluginEntry] = list(plugins) if plugins is not None else []
        self.registry = transform_registry

    def use(self, plugin: Union[str, Plugin], options: Any = None) -> Pipeline:
        """Append a plugin entry and return the pipeline for chaining."""
        self.plugins.append(plugin if options is None else (plugin, options))
        return self

    def _resolve_transformers(self) -> list[tuple[str, Transformer]]:
        """Call every plugin entry and collect the transformers it returns.

        Raises
        ------
        TypeError
            If an entry is not a name, a callable, or a tuple
        KeyError
            If a transform name is not registered

        """
        result: list[tuple[str, Transformer]] = []

        for entry in self.plugins:
            plugin, options = entry if isinstance(entry, tuple) else (entry, None)

            if isinstance(plugin, str):
                kwargs = dict(options) if isinstance(options, Mapping) else {}
                transformer = self.registry.get_transformer(plugin, **kwargs)
                name = plugin
            elif callable(plugin):
                transformer = plugin() if options is None else plugin(options)
                name = getattr(plugin, "__name__", type(plugin).__name__)
            else:
                raise TypeError(f"Plugin must be str or callable, got {type(plugin).__name__}")

            if transformer is None:
                logger.debug(f"Plugin {name} returned no transformer, skipping")
                continue
            result.append((name, transformer))

        logger.debug(f"Resolved {len(result)} transformer(s) for execution")
        return result

    def run(self, tree: Node) -> Node:
        """Apply every plugin's transformer to ``tree`` in order.

        Returns
        -------
        Node
            The transformed tree (the given tree unless a transformer replaced it)

        Raises
        ------
        TransformError
            If a transformer raises; the tree may be partially changed

        """
        result = tree

        for name, transformer in self._resolve_transformers():
            logger.debug(f"Applying transform: {name}")
            try:
                replaced = transformer(result)
            except Exception as e:
                logger.error(f"Transform {name} failed: {e}", exc_info=True)
                raise TransformError(f"Transform {name} failed: {e}", transform_name=name, original_error=e) from e

            if isinstance(replaced, Node):
                result = replaced
            elif replaced is not None:
                raise TransformError(
                    f"Transform {name} must return a Node or None, got {type(replaced).__name__}",
                    transform_name=name,
                )

        return result


def apply(tree: Node, plugins: list[PluginEntry]) -> Node:
    """Apply plugins to a tree without keeping a `Pipeline` around."""
    return Pipeline(plugins).run(tree)
