"""Blocks, statements and the stylesheet root."""

from __future__ import annotations

from stylepy.ast import AtRule, Block, Declaration, QualifiedRule, Statement, Stylesheet
from stylepy.doc import Doc, concat, hard_line, join, nest, space, text
from stylepy.format.context import FormatContext
from stylepy.format.gen import doc_gen


@doc_gen.register(Block)
def format_block(node: Block, ctx: FormatContext) -> Doc:
    if not node.statements:
        return text("{}")
    body = join(hard_line(), (format_statement(statement, ctx) for statement in node.statements))
    return concat(text("{"), nest(concat(hard_line(), body), ctx.indent_width), hard_line(), text("}"))


def format_statement(node: Statement, ctx: FormatContext) -> Doc:
    """Declarations and block-less at-rules end with `;`."""
    doc = doc_gen(node, ctx)
    match node:
        case Declaration():
            return concat(doc, text(";"))
        case AtRule(block=None):
            return concat(doc, text(";"))
        case _:
            return doc


@doc_gen.register(QualifiedRule)
def format_qualified_rule(node: QualifiedRule, ctx: FormatContext) -> Doc:
    return concat(doc_gen(node.selector, ctx), space(), format_block(node.block, ctx))


@doc_gen.register(Stylesheet)
def format_stylesheet_node(node: Stylesheet, ctx: FormatContext) -> Doc:
    return join(hard_line(), (format_statement(statement, ctx) for statement in node.statements))


__all__ = ["format_block", "format_qualified_rule", "format_statement", "format_stylesheet_node"]
