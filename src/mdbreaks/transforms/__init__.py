#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/__init__.py
"""Transform system for document trees.

This package provides:

- the line-break transform (`newline_to_break`, `remark_breaks`)
- host lifecycle hooks (`activate`, `deactivate`)
- a transform registry with entry point discovery
- a pipeline applying plugins in order

Examples
--------
Apply the line-break transform by name:

    >>> from mdbreaks.transforms import apply
    >>> tree = apply(tree, ["breaks"])

Register a custom transform:

    >>> from mdbreaks.transforms import transform_registry, TransformMetadata
    >>> transform_registry.register(
    ...     TransformMetadata(name="my-transform", description="...", plugin=my_plugin)
    ... )

"""

from __future__ import annotations

from ._builtin_metadata import BREAKS_METADATA
from .breaks import LINE_ENDING, newline_to_break, remark_breaks
from .metadata import Plugin, TransformMetadata, Transformer
from .pipeline import Pipeline, apply
from .plugin import activate, deactivate
from .registry import TransformRegistry, transform_registry

__all__ = [
    # Line breaks
    "LINE_ENDING",
    "newline_to_break",
    "remark_breaks",
    "BREAKS_METADATA",
    # Host lifecycle
    "activate",
    "deactivate",
    # Metadata
    "TransformMetadata",
    "Plugin",
    "Transformer",
    # Registry
    "TransformRegistry",
    "transform_registry",
    # Pipeline
    "Pipeline",
    "apply",
]
