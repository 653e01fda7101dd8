"""Node-to-doc dispatch shared by every formatter module."""

from __future__ import annotations

from collections.abc import Iterable
from functools import singledispatch

from stylepy.doc import Doc, concat, group, hard_line, join, line_or_space, nest, soft_line, text
from stylepy.format.context import FormatContext
from stylepy.format.errors import UnsupportedConstructError
from stylepy.format.options import BlockSelectorLineBreak


@singledispatch
def doc_gen(node: object, ctx: FormatContext) -> Doc:
    """Build the doc for `node`; every node type registers its own formatter."""
    raise UnsupportedConstructError.for_node(node)


def list_separator(ctx: FormatContext) -> Doc:
    """`,` followed by the break flavor the block selector policy asks for."""
    match ctx.block_selector_linebreak:
        case BlockSelectorLineBreak.ALWAYS:
            line = hard_line()
        case BlockSelectorLineBreak.CONSISTENT:
            line = line_or_space()
        case BlockSelectorLineBreak.WRAP:
            line = soft_line()
    return concat(text(","), line)


def format_separated_list(docs: Iterable[Doc], ctx: FormatContext) -> Doc:
    """Comma-separated items in one group, continuation lines indented one level."""
    return nest(group(join(list_separator(ctx), docs)), ctx.indent_width)


__all__ = ["doc_gen", "format_separated_list", "list_separator"]
