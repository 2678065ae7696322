#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/transforms/plugin.py
"""Host lifecycle hooks for the line-break plugin.

The host owns an ordered list of plugin factories that its markdown renderer
runs before rendering. `activate` puts `remark_breaks` at the front of that
list and `deactivate` removes it again; the list is passed in explicitly.

Examples
--------
    >>> pipeline = Pipeline()
    >>> activate(pipeline.plugins)
    >>> ...
    >>> deactivate(pipeline.plugins)

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from mdbreaks.transforms.breaks import remark_breaks

logger = logging.getLogger(__name__)


def activate(transforms: list[Any]) -> list[Any]:
    """Insert `remark_breaks` at the front of the host's plugin list.

    Returns
    -------
    list
        The same list, for chaining

    """
    transforms.insert(0, remark_breaks)
    logger.debug("Activated line-break plugin")
    return transforms


def deactivate(transforms: Optional[list[Any]]) -> None:
    """Remove every `remark_breaks` entry from the host's plugin list, in place.

    A ``None`` list (host already torn down) is ignored.
    """
    if transforms is None:
        return

    before = len(transforms)
    transforms[:] = [entry for entry in transforms if _plugin_of(entry) is not remark_breaks]
    logger.debug(f"Deactivated line-break plugin, removed {before - len(transforms)} entries")


def _plugin_of(entry: Any) -> Any:
    return entry[0] if isinstance(entry, tuple) and entry else entry
