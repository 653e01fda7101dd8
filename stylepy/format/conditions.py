"""Formatters for media queries, container conditions and supports conditions."""

from __future__ import annotations

from stylepy.ast import (
    MediaAnd,
    MediaCondition,
    MediaConditionInParens,
    MediaFeatureBoolean,
    MediaFeaturePlain,
    MediaFeatureRange,
    MediaFeatureRangeInterval,
    MediaNot,
    MediaOr,
    MediaQueryList,
    MediaQueryWithType,
    SupportsAnd,
    SupportsCondition,
    SupportsConditionInParens,
    SupportsDecl,
    SupportsNot,
    SupportsOr,
    SupportsSelector,
)
from stylepy.doc import Doc, concat, group, join, line_or_space, nest, space, text
from stylepy.format.context import FormatContext
from stylepy.format.errors import require_items
from stylepy.format.gen import doc_gen


@doc_gen.register(MediaQueryList)
def format_media_query_list(node: MediaQueryList, ctx: FormatContext) -> Doc:
    queries = require_items(node.queries, node, "queries")
    return nest(
        group(join(concat(text(","), line_or_space()), (doc_gen(query, ctx) for query in queries))),
        ctx.indent_width,
    )


@doc_gen.register(MediaQueryWithType)
def format_media_query_with_type(node: MediaQueryWithType, ctx: FormatContext) -> Doc:
    docs: list[Doc] = []
    if node.modifier is not None:
        docs.extend((doc_gen(node.modifier, ctx), space()))
    docs.append(doc_gen(node.media_type, ctx))
    if node.condition is not None:
        docs.extend((text(" and "), format_media_condition(node.condition, ctx)))
    return concat(*docs)


@doc_gen.register(MediaCondition)
def format_media_condition(node: MediaCondition, ctx: FormatContext) -> Doc:
    conditions = require_items(node.conditions, node, "conditions")
    return join(space(), (doc_gen(condition, ctx) for condition in conditions))


@doc_gen.register(MediaConditionInParens)
def format_media_condition_in_parens(node: MediaConditionInParens, ctx: FormatContext) -> Doc:
    return concat(text("("), format_media_condition(node.condition, ctx), text(")"))


@doc_gen.register(MediaNot)
def format_media_not(node: MediaNot, ctx: FormatContext) -> Doc:
    return concat(text("not "), doc_gen(node.condition, ctx))


@doc_gen.register(MediaAnd)
def format_media_and(node: MediaAnd, ctx: FormatContext) -> Doc:
    return concat(text("and "), doc_gen(node.condition, ctx))


@doc_gen.register(MediaOr)
def format_media_or(node: MediaOr, ctx: FormatContext) -> Doc:
    return concat(text("or "), doc_gen(node.condition, ctx))


@doc_gen.register(MediaFeaturePlain)
def format_media_feature_plain(node: MediaFeaturePlain, ctx: FormatContext) -> Doc:
    return concat(text("("), doc_gen(node.name, ctx), text(": "), doc_gen(node.value, ctx), text(")"))


@doc_gen.register(MediaFeatureBoolean)
def format_media_feature_boolean(node: MediaFeatureBoolean, ctx: FormatContext) -> Doc:
    return concat(text("("), doc_gen(node.name, ctx), text(")"))


@doc_gen.register(MediaFeatureRange)
def format_media_feature_range(node: MediaFeatureRange, ctx: FormatContext) -> Doc:
    return concat(
        text("("),
        doc_gen(node.left, ctx),
        text(f" {node.comparison} "),
        doc_gen(node.right, ctx),
        text(")"),
    )


@doc_gen.register(MediaFeatureRangeInterval)
def format_media_feature_range_interval(node: MediaFeatureRangeInterval, ctx: FormatContext) -> Doc:
    return concat(
        text("("),
        doc_gen(node.left, ctx),
        text(f" {node.left_comparison} "),
        doc_gen(node.name, ctx),
        text(f" {node.right_comparison} "),
        doc_gen(node.right, ctx),
        text(")"),
    )


@doc_gen.register(SupportsCondition)
def format_supports_condition(node: SupportsCondition, ctx: FormatContext) -> Doc:
    conditions = require_items(node.conditions, node, "conditions")
    return join(space(), (doc_gen(condition, ctx) for condition in conditions))


@doc_gen.register(SupportsConditionInParens)
def format_supports_condition_in_parens(node: SupportsConditionInParens, ctx: FormatContext) -> Doc:
    return concat(text("("), format_supports_condition(node.condition, ctx), text(")"))


@doc_gen.register(SupportsDecl)
def format_supports_decl(node: SupportsDecl, ctx: FormatContext) -> Doc:
    return concat(text("("), doc_gen(node.declaration, ctx), text(")"))


@doc_gen.register(SupportsSelector)
def format_supports_selector(node: SupportsSelector, ctx: FormatContext) -> Doc:
    return concat(text("selector("), doc_gen(node.selector, ctx), text(")"))


@doc_gen.register(SupportsNot)
def format_supports_not(node: SupportsNot, ctx: FormatContext) -> Doc:
    return concat(text("not "), doc_gen(node.condition, ctx))


@doc_gen.register(SupportsAnd)
def format_supports_and(node: SupportsAnd, ctx: FormatContext) -> Doc:
    return concat(text("and "), doc_gen(node.condition, ctx))


@doc_gen.register(SupportsOr)
def format_supports_or(node: SupportsOr, ctx: FormatContext) -> Doc:
    return concat(text("or "), doc_gen(node.condition, ctx))


__all__ = [
    "format_media_and",
    "format_media_condition",
    "format_media_condition_in_parens",
    "format_media_feature_boolean",
    "format_media_feature_plain",
    "format_media_feature_range",
    "format_media_feature_range_interval",
    "format_media_not",
    "format_media_or",
    "format_media_query_list",
    "format_media_query_with_type",
    "format_supports_and",
    "format_supports_condition",
    "format_supports_condition_in_parens",
    "format_supports_decl",
    "format_supports_not",
    "format_supports_or",
    "format_supports_selector",
]
