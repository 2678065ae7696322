"""mdbreaks - hard line breaks for markdown document trees.

Markdown renders a single newline inside a paragraph as a space. mdbreaks
provides a tree transform that turns every line ending left in text nodes into
a hard ``break`` node, so each source line is rendered on its own line. It is
meant to be inserted into a host's markdown rendering pipeline, ahead of the
host's own transforms.

The transform is built on two general tree utilities that are useful on
their own:

- `visit_parents`: depth-first traversal with ancestors, filtering, skipping,
  early exit, and safe continuation after the visitor edits siblings
- `find_and_replace`: pattern search over text nodes that splices produced
  nodes into the tree in place of matched text

Examples
--------
Apply the transform to a tree:

    >>> from mdbreaks import json_to_ast, newline_to_break
    >>> tree = json_to_ast(json_str)
    >>> newline_to_break(tree)

Register with a host pipeline:

    >>> from mdbreaks import Pipeline, activate, deactivate
    >>> pipeline = Pipeline()
    >>> activate(pipeline.plugins)
    >>> tree = pipeline.run(tree)
    >>> deactivate(pipeline.plugins)

"""

import sys

# Check Python version before any imports
if sys.version_info < (3, 10):
    raise RuntimeError(
        f"mdbreaks requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdbreaks.ast import (  # noqa: E402
    CONTINUE,
    EXIT,
    SKIP,
    Expression,
    FindAndReplaceOptions,
    MatchInfo,
    Node,
    ast_to_json,
    break_node,
    convert,
    find_and_replace,
    json_to_ast,
    make_node,
    matches,
    text_node,
    visit_parents,
    walk,
)
from mdbreaks.exceptions import (  # noqa: E402
    ConfigError,
    InvalidSchemaError,
    InvalidTestError,
    MdBreaksError,
    SerializationError,
    TransformError,
    ValidationError,
)
from mdbreaks.options import BreaksOptions  # noqa: E402
from mdbreaks.transforms import (  # noqa: E402
    Pipeline,
    TransformMetadata,
    activate,
    apply,
    deactivate,
    newline_to_break,
    remark_breaks,
    transform_registry,
)
from mdbreaks.utils.escape import escape_string_regexp  # noqa: E402

__all__ = [
    "__version__",
    # Tree model
    "Node",
    "make_node",
    "text_node",
    "break_node",
    "ast_to_json",
    "json_to_ast",
    # Traversal
    "visit_parents",
    "walk",
    "convert",
    "matches",
    "CONTINUE",
    "EXIT",
    "SKIP",
    # Find and replace
    "find_and_replace",
    "Expression",
    "MatchInfo",
    "FindAndReplaceOptions",
    "escape_string_regexp",
    # Line breaks
    "newline_to_break",
    "remark_breaks",
    "BreaksOptions",
    # Host integration
    "activate",
    "deactivate",
    "Pipeline",
    "apply",
    "TransformMetadata",
    "transform_registry",
    # Exceptions
    "MdBreaksError",
    "ValidationError",
    "InvalidTestError",
    "InvalidSchemaError",
    "SerializationError",
    "ConfigError",
    "TransformError",
]
