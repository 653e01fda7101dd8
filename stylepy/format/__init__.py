"""Doc generation for stylesheets.

Importing this package registers every node formatter on `doc_gen`.
"""

from stylepy.format import at_rule, block, conditions, values  # noqa: F401  (formatter registration)
from stylepy.format.context import FormatContext
from stylepy.format.errors import FormatError, InvariantViolationError, UnsupportedConstructError
from stylepy.format.gen import doc_gen, format_separated_list, list_separator
from stylepy.format.options import BlockSelectorLineBreak, FormatOptions, LineBreak
from stylepy.format.runner import format_at_rule, format_prelude, format_stylesheet, render_stylesheet, run_format

__all__ = [
    "BlockSelectorLineBreak",
    "FormatContext",
    "FormatError",
    "FormatOptions",
    "InvariantViolationError",
    "LineBreak",
    "UnsupportedConstructError",
    "doc_gen",
    "format_at_rule",
    "format_prelude",
    "format_separated_list",
    "format_stylesheet",
    "list_separator",
    "render_stylesheet",
    "run_format",
]
