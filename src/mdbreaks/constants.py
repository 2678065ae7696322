#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants shared across the mdbreaks package.

Node type names follow the mdast vocabulary so trees produced by remark-style
hosts can be processed without translation.
"""

from __future__ import annotations

# =============================================================================
# Node types
# =============================================================================

TEXT_NODE_TYPE = "text"
BREAK_NODE_TYPE = "break"
ROOT_NODE_TYPE = "root"

# Fields with structural meaning on a node; anything else is an attribute
NODE_STRUCTURAL_FIELDS = ("type", "value", "children")

# =============================================================================
# Line endings
# =============================================================================

# One match per line ending: CRLF, bare LF, or bare CR
LINE_ENDING_PATTERN = r"\r?\n|\r"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".mdbreaks.toml", ".mdbreaks.yaml", ".mdbreaks.yml", ".mdbreaks.json"]
PYPROJECT_TOOL_SECTION = "mdbreaks"
CONFIG_ENV_VAR = "MDBREAKS_CONFIG"

DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"

# =============================================================================
# Logging
# =============================================================================

PACKAGE_LOGGER_NAME = "mdbreaks"
LOG_FORMAT = "mdbreaks: %(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)-8s %(name)s:%(lineno)d %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# CLI exit codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
