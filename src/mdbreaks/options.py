#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option classes for tree transforms.

Options are frozen dataclasses; use `CloneFrozenMixin.create_updated` to derive
a modified copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdbreaks.constants import BREAK_NODE_TYPE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BreaksOptions(CloneFrozenMixin):
    """Configuration for the line-break transform.

    Parameters
    ----------
    ignore : tuple of str, default = ()
        Node types whose subtrees keep their line endings (e.g. ``("code",)``)
    break_type : str, default = "break"
        Type of the node inserted for each line ending

    """

    ignore: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Node types whose text keeps its line endings", "importance": "core"},
    )
    break_type: str = field(
        default=BREAK_NODE_TYPE,
        metadata={"help": "Type of the node inserted for each line ending", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate and normalize option values.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if isinstance(self.ignore, str):
            object.__setattr__(self, "ignore", (self.ignore,))
        else:
            object.__setattr__(self, "ignore", tuple(self.ignore))

        for node_type in self.ignore:
            if not isinstance(node_type, str) or not node_type:
                raise ValueError(f"ignore entries must be non-empty node type names, got {node_type!r}")

        if not self.break_type:
            raise ValueError("break_type must be a non-empty node type name")

    @property
    def ignore_test(self) -> list[str] | None:
        """The ``ignore`` types as a node test, or None when nothing is ignored."""
        return list(self.ignore) or None
