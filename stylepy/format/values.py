"""Leaf formatters for component values, declarations and selectors."""

from __future__ import annotations

from collections.abc import Sequence

from stylepy.ast import (
    ComponentValue,
    DashedIdent,
    Declaration,
    Delimiter,
    Dimension,
    Function,
    HexColor,
    Ident,
    InterpolatedIdent,
    Interpolation,
    LessEscapedStr,
    LessVariable,
    Number,
    Percentage,
    Ratio,
    SassVariable,
    Selector,
    SelectorList,
    Str,
    Url,
    UrlRaw,
)
from stylepy.doc import Doc, concat, space, text
from stylepy.format.context import FormatContext
from stylepy.format.errors import require_items
from stylepy.format.gen import doc_gen, format_separated_list


@doc_gen.register(Ident)
def format_ident(node: Ident, ctx: FormatContext) -> Doc:
    return text(node.name)


@doc_gen.register(Interpolation)
def format_interpolation(node: Interpolation, ctx: FormatContext) -> Doc:
    return text(f"#{{{node.expr}}}")


@doc_gen.register(InterpolatedIdent)
def format_interpolated_ident(node: InterpolatedIdent, ctx: FormatContext) -> Doc:
    require_items(node.elements, node, "elements")
    return concat(
        *(text(element) if isinstance(element, str) else format_interpolation(element, ctx) for element in node.elements)
    )


@doc_gen.register(DashedIdent)
def format_dashed_ident(node: DashedIdent, ctx: FormatContext) -> Doc:
    return text(f"--{node.name}")


@doc_gen.register(Str)
def format_str(node: Str, ctx: FormatContext) -> Doc:
    return text(node.raw)


@doc_gen.register(Number)
def format_number(node: Number, ctx: FormatContext) -> Doc:
    return text(node.raw)


@doc_gen.register(Percentage)
def format_percentage(node: Percentage, ctx: FormatContext) -> Doc:
    return text(f"{node.value.raw}%")


@doc_gen.register(Dimension)
def format_dimension(node: Dimension, ctx: FormatContext) -> Doc:
    return text(f"{node.value.raw}{node.unit.name}")


@doc_gen.register(Ratio)
def format_ratio(node: Ratio, ctx: FormatContext) -> Doc:
    return text(f"{node.numerator.raw}/{node.denominator.raw}")


@doc_gen.register(Url)
def format_url(node: Url, ctx: FormatContext) -> Doc:
    if isinstance(node.value, UrlRaw):
        return text(f"url({node.value.raw})")
    return concat(text("url("), format_str(node.value, ctx), text(")"))


@doc_gen.register(Function)
def format_function(node: Function, ctx: FormatContext) -> Doc:
    return concat(
        doc_gen(node.name, ctx),
        text("("),
        format_component_values(node.args, ctx),
        text(")"),
    )


@doc_gen.register(Delimiter)
def format_delimiter(node: Delimiter, ctx: FormatContext) -> Doc:
    return text(node.kind)


@doc_gen.register(HexColor)
def format_hex_color(node: HexColor, ctx: FormatContext) -> Doc:
    return text(f"#{node.value}")


@doc_gen.register(SassVariable)
def format_sass_variable(node: SassVariable, ctx: FormatContext) -> Doc:
    return text(f"${node.name}")


@doc_gen.register(LessVariable)
def format_less_variable(node: LessVariable, ctx: FormatContext) -> Doc:
    return text(f"@{node.name}")


@doc_gen.register(LessEscapedStr)
def format_less_escaped_str(node: LessEscapedStr, ctx: FormatContext) -> Doc:
    return concat(text("~"), format_str(node.value, ctx))


def format_component_values(values: Sequence[ComponentValue], ctx: FormatContext) -> Doc:
    """Space-separated values; commas hug the value before them and unary signs the value after."""
    docs: list[Doc] = []
    for index, value in enumerate(values):
        if index > 0 and not _is_comma(value) and not _is_unary_sign(values[index - 1]):
            docs.append(space())
        docs.append(doc_gen(value, ctx))
    return concat(*docs)


def _is_comma(value: ComponentValue) -> bool:
    return isinstance(value, Delimiter) and value.kind == ","


def _is_unary_sign(value: ComponentValue) -> bool:
    return isinstance(value, Delimiter) and value.unary


@doc_gen.register(Declaration)
def format_declaration(node: Declaration, ctx: FormatContext) -> Doc:
    """`name: values` without the trailing semicolon, which belongs to the enclosing block."""
    docs = [doc_gen(node.name, ctx), text(":")]
    if node.values:
        docs.append(space())
        docs.append(format_component_values(node.values, ctx))
    if node.important:
        docs.append(text(" !important"))
    return concat(*docs)


@doc_gen.register(Selector)
def format_selector(node: Selector, ctx: FormatContext) -> Doc:
    return text(node.raw)


@doc_gen.register(SelectorList)
def format_selector_list(node: SelectorList, ctx: FormatContext) -> Doc:
    selectors = require_items(node.selectors, node, "selectors")
    return format_separated_list((format_selector(selector, ctx) for selector in selectors), ctx)


__all__ = [
    "format_component_values",
    "format_dashed_ident",
    "format_declaration",
    "format_delimiter",
    "format_dimension",
    "format_function",
    "format_hex_color",
    "format_ident",
    "format_interpolated_ident",
    "format_interpolation",
    "format_less_escaped_str",
    "format_less_variable",
    "format_number",
    "format_percentage",
    "format_ratio",
    "format_sass_variable",
    "format_selector",
    "format_selector_list",
    "format_str",
    "format_url",
]
