#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/_builtin_metadata.py
"""Metadata for built-in transforms."""

from mdbreaks.options import BreaksOptions
from mdbreaks.transforms.breaks import remark_breaks
from mdbreaks.transforms.metadata import TransformMetadata

BREAKS_METADATA = TransformMetadata(
    name="breaks",
    description="Turn line endings in text into hard breaks",
    plugin=remark_breaks,
    options_class=BreaksOptions,
    tags=["text", "breaks"],
    priority=10,
)

BUILTIN_TRANSFORMS = [BREAKS_METADATA]
