"""At-rule formatting.

`format_at_rule` composes `@name`, the prelude and the block. `format_prelude`
picks the formatter for the active prelude variant; every variant of
`AtRulePrelude` has a case, and `UnknownPrelude` (an at-rule the grammar keeps
as raw text) fails with `UnsupportedConstructError` instead of guessing.
"""

from __future__ import annotations

import logging

from stylepy.ast import (
    AtRule,
    AtRulePrelude,
    ContainerPrelude,
    CustomMedia,
    DeviceCmyk,
    DocumentPrelude,
    Ident,
    ImportLayer,
    ImportPrelude,
    ImportSupports,
    KeyframeBlock,
    KeyframeSelector,
    LayerName,
    LayerNames,
    NamespacePrelude,
    PageSelector,
    PageSelectorList,
    Percentage,
    PreludeCharset,
    PreludeColorProfile,
    PreludeContainer,
    PreludeCounterStyle,
    PreludeCustomMedia,
    PreludeDocument,
    PreludeFontFeatureValues,
    PreludeFontPaletteValues,
    PreludeImport,
    PreludeKeyframes,
    PreludeLayer,
    PreludeMedia,
    PreludeNamespace,
    PreludeNest,
    PreludePage,
    PreludePositionFallback,
    PreludeProperty,
    PreludeSassExpr,
    PreludeScrollTimeline,
    PreludeSupports,
    PreludeUnknown,
    PseudoPage,
    SassExpr,
    UnknownPrelude,
    UnquotedFontFamilyName,
)
from stylepy.doc import Doc, concat, group, join, line_or_space, nest, space, text
from stylepy.format.context import FormatContext
from stylepy.format.errors import InvariantViolationError, UnsupportedConstructError, require_items
from stylepy.format.gen import doc_gen, format_separated_list
from stylepy.format.values import format_component_values

logger = logging.getLogger(__name__)

_KEYFRAME_KEYWORDS: frozenset[str] = frozenset({"from", "to"})


@doc_gen.register(AtRule)
def format_at_rule(node: AtRule, ctx: FormatContext) -> Doc:
    docs: list[Doc] = [text(f"@{node.name.lower()}")]
    if node.prelude is not None:
        docs.append(space())
        docs.append(format_prelude(node.prelude, ctx))
    if node.block is not None:
        docs.append(space())
        docs.append(doc_gen(node.block, ctx))
    return concat(*docs)


def format_prelude(prelude: AtRulePrelude, ctx: FormatContext) -> Doc:
    match prelude:
        case PreludeMedia(value=value):
            return doc_gen(value, ctx)
        case PreludeCharset(value=value):
            return doc_gen(value, ctx)
        case PreludeColorProfile(value=value):
            return doc_gen(value, ctx)
        case PreludeContainer(value=value):
            return format_container_prelude(value, ctx)
        case PreludeCounterStyle(value=value):
            return doc_gen(value, ctx)
        case PreludeCustomMedia(value=value):
            return format_custom_media(value, ctx)
        case PreludeDocument(value=value):
            return format_document_prelude(value, ctx)
        case PreludeFontFeatureValues(value=value):
            return doc_gen(value, ctx)
        case PreludeFontPaletteValues(value=value):
            return doc_gen(value, ctx)
        case PreludeImport(value=value):
            return format_import_prelude(value, ctx)
        case PreludeKeyframes(value=value):
            return doc_gen(value, ctx)
        case PreludeLayer(value=value):
            return format_layer_names(value, ctx)
        case PreludeNamespace(value=value):
            return format_namespace_prelude(value, ctx)
        case PreludeNest(value=value):
            return doc_gen(value, ctx)
        case PreludePage(value=value):
            return format_page_selector_list(value, ctx)
        case PreludePositionFallback(value=value):
            return doc_gen(value, ctx)
        case PreludeProperty(value=value):
            return doc_gen(value, ctx)
        case PreludeSassExpr(value=value):
            return format_sass_expr(value, ctx)
        case PreludeScrollTimeline(value=value):
            return doc_gen(value, ctx)
        case PreludeSupports(value=value):
            return doc_gen(value, ctx)
        case PreludeUnknown(value=value):
            logger.debug("no formatter for at-rule prelude %r", value.raw)
            raise UnsupportedConstructError.for_node(value, f"`{value.raw}`")
        case _:
            raise UnsupportedConstructError.for_node(prelude)


@doc_gen.register(UnknownPrelude)
def format_unknown_prelude(node: UnknownPrelude, ctx: FormatContext) -> Doc:
    raise UnsupportedConstructError.for_node(node, f"`{node.raw}`")


@doc_gen.register(DeviceCmyk)
def format_device_cmyk(node: DeviceCmyk, ctx: FormatContext) -> Doc:
    return text("device-cmyk")


@doc_gen.register(ContainerPrelude)
def format_container_prelude(node: ContainerPrelude, ctx: FormatContext) -> Doc:
    condition = doc_gen(node.condition, ctx)
    if node.name is None:
        return condition
    return concat(doc_gen(node.name, ctx), space(), condition)


@doc_gen.register(CustomMedia)
def format_custom_media(node: CustomMedia, ctx: FormatContext) -> Doc:
    match node.value:
        case True:
            value = text("true")
        case False:
            value = text("false")
        case media_query_list:
            value = doc_gen(media_query_list, ctx)
    return concat(doc_gen(node.name, ctx), space(), value)


@doc_gen.register(DocumentPrelude)
def format_document_prelude(node: DocumentPrelude, ctx: FormatContext) -> Doc:
    matchers = require_items(node.matchers, node, "matchers")
    return format_separated_list((doc_gen(matcher, ctx) for matcher in matchers), ctx)


@doc_gen.register(UnquotedFontFamilyName)
def format_unquoted_font_family_name(node: UnquotedFontFamilyName, ctx: FormatContext) -> Doc:
    idents = require_items(node.idents, node, "idents")
    return join(space(), (doc_gen(ident, ctx) for ident in idents))


@doc_gen.register(ImportPrelude)
def format_import_prelude(node: ImportPrelude, ctx: FormatContext) -> Doc:
    docs = [doc_gen(node.href, ctx)]
    if node.layer is not None:
        docs.extend((line_or_space(), format_import_layer(node.layer, ctx)))
    if node.supports is not None:
        docs.extend((line_or_space(), format_import_supports(node.supports, ctx)))
    if node.media is not None:
        docs.extend((line_or_space(), doc_gen(node.media, ctx)))
    if len(docs) == 1:
        return docs[0]
    return nest(group(concat(*docs)), ctx.indent_width)


@doc_gen.register(ImportLayer)
def format_import_layer(node: ImportLayer, ctx: FormatContext) -> Doc:
    if node.name is None:
        return text("layer")
    return concat(text("layer("), format_layer_name(node.name, ctx), text(")"))


@doc_gen.register(ImportSupports)
def format_import_supports(node: ImportSupports, ctx: FormatContext) -> Doc:
    return concat(text("supports("), doc_gen(node.condition, ctx), text(")"))


@doc_gen.register(KeyframeBlock)
def format_keyframe_block(node: KeyframeBlock, ctx: FormatContext) -> Doc:
    selectors = require_items(node.selectors, node, "selectors")
    return concat(
        format_separated_list((format_keyframe_selector(selector, ctx) for selector in selectors), ctx),
        space(),
        doc_gen(node.block, ctx),
    )


def format_keyframe_selector(node: KeyframeSelector, ctx: FormatContext) -> Doc:
    """`from` and `to` are case-insensitive keywords and always print lowercase."""
    match node:
        case Percentage():
            return doc_gen(node, ctx)
        case Ident(name=name) if name.lower() in _KEYFRAME_KEYWORDS:
            return text(name.lower())
        case _:
            return doc_gen(node, ctx)


@doc_gen.register(LayerName)
def format_layer_name(node: LayerName, ctx: FormatContext) -> Doc:
    idents = require_items(node.idents, node, "idents")
    return join(text("."), (doc_gen(ident, ctx) for ident in idents))


@doc_gen.register(LayerNames)
def format_layer_names(node: LayerNames, ctx: FormatContext) -> Doc:
    names = require_items(node.names, node, "names")
    return nest(
        group(join(concat(text(","), line_or_space()), (format_layer_name(name, ctx) for name in names))),
        ctx.indent_width,
    )


@doc_gen.register(NamespacePrelude)
def format_namespace_prelude(node: NamespacePrelude, ctx: FormatContext) -> Doc:
    uri = doc_gen(node.uri, ctx)
    if node.prefix is None:
        return uri
    return nest(group(concat(doc_gen(node.prefix, ctx), line_or_space(), uri)), ctx.indent_width)


@doc_gen.register(PageSelector)
def format_page_selector(node: PageSelector, ctx: FormatContext) -> Doc:
    if node.name is None and not node.pseudo:
        raise InvariantViolationError.for_node(node, "page selector has neither a name nor a pseudo-page")
    pseudo = concat(*(format_pseudo_page(pseudo, ctx) for pseudo in node.pseudo))
    if node.name is None:
        return pseudo
    return concat(doc_gen(node.name, ctx), pseudo)


@doc_gen.register(PageSelectorList)
def format_page_selector_list(node: PageSelectorList, ctx: FormatContext) -> Doc:
    selectors = require_items(node.selectors, node, "selectors")
    return format_separated_list((format_page_selector(selector, ctx) for selector in selectors), ctx)


@doc_gen.register(PseudoPage)
def format_pseudo_page(node: PseudoPage, ctx: FormatContext) -> Doc:
    return concat(text(":"), doc_gen(node.name, ctx))


@doc_gen.register(SassExpr)
def format_sass_expr(node: SassExpr, ctx: FormatContext) -> Doc:
    values = require_items(node.values, node, "values")
    return format_component_values(values, ctx)


__all__ = [
    "format_at_rule",
    "format_container_prelude",
    "format_custom_media",
    "format_device_cmyk",
    "format_document_prelude",
    "format_import_layer",
    "format_import_prelude",
    "format_import_supports",
    "format_keyframe_block",
    "format_keyframe_selector",
    "format_layer_name",
    "format_layer_names",
    "format_namespace_prelude",
    "format_page_selector",
    "format_page_selector_list",
    "format_prelude",
    "format_pseudo_page",
    "format_sass_expr",
    "format_unknown_prelude",
    "format_unquoted_font_family_name",
]
