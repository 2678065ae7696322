#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbreaks/utils/escape.py
"""Regular expression escaping utilities."""

from __future__ import annotations

import re
from typing import Any


def escape_string_regexp(value: Any) -> str:
    r"""Escape every character with special meaning in a regular expression.

    Parameters
    ----------
    value : str
        Literal text to match verbatim

    Returns
    -------
    str
        Pattern source matching exactly ``value``

    Raises
    ------
    TypeError
        If ``value`` is not a string

    Examples
    --------
        >>> escape_string_regexp("1+1=2?")
        '1\\+1=2\\?'

    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")

    return re.escape(value)
