#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/metadata.py
"""Metadata classes for tree transforms.

This module defines the metadata structure used for transform registration
and discovery through entry points.

Examples
--------
Describe a plugin factory with metadata:

    >>> from mdbreaks.transforms import TransformMetadata
    >>>
    >>> def smart_quotes():
    ...     def transformer(tree):
    ...         find_and_replace(tree, [('"', "“")])
    ...     return transformer
    ...
    >>> METADATA = TransformMetadata(
    ...     name="smart-quotes",
    ...     description="Curl straight quotes",
    ...     plugin=smart_quotes,
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from mdbreaks.ast.nodes import Node

logger = logging.getLogger(__name__)

Transformer = Callable[[Node], Optional[Node]]
Plugin = Callable[..., Optional[Transformer]]


@dataclass
class TransformMetadata:
    """Metadata describing a registered transform.

    Parameters
    ----------
    name : str
        Unique transform name (e.g. ``"breaks"``)
    description : str
        Human-readable description
    plugin : callable
        Plugin factory; called (optionally with an options instance) it
        returns the transformer applied to trees
    options_class : type, optional
        Options dataclass built from keyword parameters and passed to ``plugin``
    tags : list of str, default = empty list
        Free-form tags for filtering
    priority : int, default = 100
        Execution priority (lower runs first); orders named transforms and listings

    """

    name: str
    description: str
    plugin: Plugin
    options_class: Optional[Type[Any]] = None
    tags: list[str] = field(default_factory=list)
    priority: int = 100

    def __post_init__(self) -> None:
        """Validate metadata fields.

        Raises
        ------
        ValueError
            If the name is empty, the plugin is not callable, or the priority is negative

        """
        if not self.name:
            raise ValueError("Transform name must be a non-empty string")
        if not callable(self.plugin):
            raise ValueError(f"Transform '{self.name}' plugin must be callable")
        if self.priority < 0:
            raise ValueError(f"Priority must be non-negative, got {self.priority}")

    def create_transformer(self, **kwargs: Any) -> Optional[Transformer]:
        """Call the plugin factory, building its options from ``kwargs``.

        Parameters
        ----------
        **kwargs
            Fields for ``options_class``

        Returns
        -------
        callable or None
            The transformer returned by the plugin

        Raises
        ------
        ValueError
            If parameters are given for a transform without an options class

        """
        if self.options_class is None:
            if kwargs:
                raise ValueError(f"Transform '{self.name}' does not accept parameters: {sorted(kwargs)}")
            return self.plugin()

        options = self.options_class(**kwargs)
        logger.debug(f"Creating transformer '{self.name}' with {options!r}")
        return self.plugin(options)
