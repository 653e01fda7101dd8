"""Hypothesis strategies for generating stylesheets the parser can read back.

Generated trees stay inside the modeled grammar: identifiers avoid the
keywords the grammar gives meaning to, and every list the data model
declares 1..N is non-empty. Every modeled at-rule prelude has a strategy;
only the raw `PreludeUnknown` fallback is left out.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from hypothesis import strategies as st

from stylepy.ast import (
    AtRule,
    Block,
    ComponentValue,
    ContainerPrelude,
    CustomMedia,
    CustomMediaValue,
    DashedIdent,
    Declaration,
    Delimiter,
    DeviceCmyk,
    Dimension,
    DocumentPrelude,
    DocumentPreludeMatcher,
    Function,
    Ident,
    ImportLayer,
    ImportPrelude,
    ImportSupports,
    KeyframeBlock,
    KeyframeSelector,
    KeyframesName,
    LayerName,
    LayerNames,
    LessEscapedStr,
    LessVariable,
    MediaAnd,
    MediaCondition,
    MediaConditionKind,
    MediaFeature,
    MediaFeatureBoolean,
    MediaFeaturePlain,
    MediaOr,
    MediaQuery,
    MediaQueryList,
    MediaQueryWithType,
    NamespacePrelude,
    Number,
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
    PseudoPage,
    QualifiedRule,
    SassExpr,
    SassVariable,
    Selector,
    SelectorList,
    Statement,
    Str,
    Stylesheet,
    SupportsAnd,
    SupportsCondition,
    SupportsConditionInParens,
    SupportsConditionKind,
    SupportsDecl,
    SupportsInParens,
    SupportsNot,
    SupportsOr,
    SupportsSelector,
    UnquotedFontFamilyName,
    Url,
    UrlRaw,
)
from stylepy.format import BlockSelectorLineBreak, FormatOptions

Draw = Callable[[st.SearchStrategy[Any]], Any]

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "and",
        "device-cmyk",
        "false",
        "from",
        "layer",
        "not",
        "only",
        "or",
        "selector",
        "supports",
        "to",
        "true",
        "url",
    }
)

KEYFRAME_KEYWORDS: tuple[str, ...] = ("from", "FROM", "From", "to", "TO", "To")

DOCUMENT_MATCHER_FUNCTIONS: tuple[str, ...] = ("url-prefix", "domain", "regexp", "media-document")


def s_name() -> st.SearchStrategy[str]:
    return st.from_regex(r"[a-z][a-z0-9]{0,6}(-[a-z0-9]{1,4})?", fullmatch=True).filter(
        lambda name: name not in RESERVED_WORDS
    )


def s_ident() -> st.SearchStrategy[Ident]:
    return s_name().map(Ident)


def s_dashed_ident() -> st.SearchStrategy[DashedIdent]:
    return s_name().map(DashedIdent)


def s_str() -> st.SearchStrategy[Str]:
    return st.text(alphabet="abc xyz-_./:", max_size=12).map(lambda s: Str(f'"{s}"'))


def s_url() -> st.SearchStrategy[Url]:
    raw = st.text(alphabet="abcxyz:/.-", min_size=1, max_size=12).map(UrlRaw)
    return st.builds(Url, st.one_of(raw, s_str()))


def s_number() -> st.SearchStrategy[Number]:
    return st.integers(min_value=0, max_value=2000).map(lambda n: Number(str(n)))


def s_value() -> st.SearchStrategy[ComponentValue]:
    dimension = st.builds(Dimension, s_number(), st.sampled_from(["px", "em", "rem"]).map(Ident))
    return st.one_of(s_ident(), s_number(), dimension)


def s_declaration() -> st.SearchStrategy[Declaration]:
    values = st.lists(s_value(), min_size=1, max_size=3).map(tuple)
    return st.builds(Declaration, s_ident(), values)


def s_declaration_block() -> st.SearchStrategy[Block]:
    return st.lists(s_declaration(), max_size=3).map(lambda declarations: Block(tuple(declarations)))


def s_selector() -> st.SearchStrategy[Selector]:
    return st.one_of(s_name(), s_name().map(lambda name: f".{name}")).map(Selector)


def s_selector_list() -> st.SearchStrategy[SelectorList]:
    return st.lists(s_selector(), min_size=1, max_size=3).map(lambda items: SelectorList(tuple(items)))


# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------


def s_media_feature() -> st.SearchStrategy[MediaFeature]:
    return st.one_of(
        st.builds(MediaFeatureBoolean, s_ident()),
        st.builds(MediaFeaturePlain, s_ident(), s_value()),
    )


@st.composite
def s_media_condition(draw: Draw, *, allow_or: bool = True) -> MediaCondition:
    conditions: list[MediaConditionKind] = [draw(s_media_feature())]
    joiners = [MediaAnd, MediaOr] if allow_or else [MediaAnd]
    for _ in range(draw(st.integers(min_value=0, max_value=2))):
        joiner = draw(st.sampled_from(joiners))
        conditions.append(joiner(draw(s_media_feature())))
    return MediaCondition(tuple(conditions))


@st.composite
def s_media_query(draw: Draw) -> MediaQuery:
    if draw(st.booleans()):
        return draw(s_media_condition())
    modifier = draw(st.sampled_from([None, "not", "only"]))
    return MediaQueryWithType(
        modifier=Ident(modifier) if modifier is not None else None,
        media_type=draw(s_ident()),
        condition=draw(st.none() | s_media_condition(allow_or=False)),
    )


def s_media_query_list() -> st.SearchStrategy[MediaQueryList]:
    return st.lists(s_media_query(), min_size=1, max_size=3).map(lambda items: MediaQueryList(tuple(items)))


@st.composite
def s_supports_in_parens(draw: Draw, depth: int = 1) -> SupportsInParens:
    options: list[st.SearchStrategy[SupportsInParens]] = [
        st.builds(SupportsDecl, s_declaration()),
        st.builds(SupportsSelector, s_selector()),
    ]
    if depth > 0:
        options.append(st.builds(SupportsConditionInParens, s_supports_condition(depth - 1)))
    return draw(st.one_of(options))


@st.composite
def s_supports_condition(draw: Draw, depth: int = 1) -> SupportsCondition:
    if draw(st.booleans()):
        return SupportsCondition((SupportsNot(draw(s_supports_in_parens(depth))),))
    conditions: list[SupportsConditionKind] = [draw(s_supports_in_parens(depth))]
    for _ in range(draw(st.integers(min_value=0, max_value=2))):
        joiner = draw(st.sampled_from([SupportsAnd, SupportsOr]))
        conditions.append(joiner(draw(s_supports_in_parens(depth))))
    return SupportsCondition(tuple(conditions))


# ---------------------------------------------------------------------------
# Prelude payloads
# ---------------------------------------------------------------------------


@st.composite
def s_page_selector(draw: Draw) -> PageSelector:
    name = draw(st.none() | s_ident())
    pseudo = draw(st.lists(s_ident().map(PseudoPage), min_size=0 if name is not None else 1, max_size=2))
    return PageSelector(name, tuple(pseudo))


def s_keyframe_selector() -> st.SearchStrategy[KeyframeSelector]:
    percentage = st.integers(min_value=0, max_value=100).map(lambda n: Percentage(Number(str(n))))
    keyword = st.sampled_from(KEYFRAME_KEYWORDS).map(Ident)
    return st.one_of(percentage, keyword, s_ident())


def s_keyframes_name() -> st.SearchStrategy[KeyframesName]:
    return st.one_of(
        s_ident(),
        s_str(),
        s_name().map(LessVariable),
        s_str().map(LessEscapedStr),
    )


def s_layer_name() -> st.SearchStrategy[LayerName]:
    return st.lists(s_ident(), min_size=1, max_size=3).map(lambda idents: LayerName(tuple(idents)))


def s_custom_media_value() -> st.SearchStrategy[CustomMediaValue]:
    return st.one_of(st.booleans(), s_media_query_list())


def s_document_matcher() -> st.SearchStrategy[DocumentPreludeMatcher]:
    function = st.builds(
        Function,
        st.sampled_from(DOCUMENT_MATCHER_FUNCTIONS).map(Ident),
        st.lists(s_str(), min_size=1, max_size=1).map(tuple),
    )
    return st.one_of(function, s_url())


def s_import_prelude() -> st.SearchStrategy[ImportPrelude]:
    layer = st.builds(ImportLayer, st.none() | s_layer_name())
    supports = st.builds(ImportSupports, st.one_of(s_declaration(), s_supports_condition()))
    return st.builds(
        ImportPrelude,
        st.one_of(s_str(), s_url()),
        st.none() | layer,
        st.none() | supports,
        st.none() | s_media_query_list(),
    )


@st.composite
def s_sass_expr(draw: Draw) -> SassExpr:
    """Operands joined by binary operators; a unary `-` only ever prefixes a variable."""
    operand = st.one_of(s_name().map(SassVariable), s_number(), s_ident())

    def term() -> list[ComponentValue]:
        value = draw(operand)
        if isinstance(value, SassVariable) and draw(st.booleans()):
            return [Delimiter("-", unary=True), value]
        return [value]

    values = term()
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        values.append(Delimiter(draw(st.sampled_from(["+", "-", "*", "/", ","]))))
        values.extend(term())
    return SassExpr(tuple(values))


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def s_media_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("media"), s_media_query_list().map(PreludeMedia), s_declaration_block())


def s_page_rule() -> st.SearchStrategy[AtRule]:
    selectors = st.lists(s_page_selector(), min_size=1, max_size=3).map(
        lambda items: PageSelectorList(tuple(items))
    )
    return st.builds(AtRule, st.just("page"), selectors.map(PreludePage), s_declaration_block())


@st.composite
def s_layer_rule(draw: Draw) -> AtRule:
    if draw(st.booleans()):
        names = draw(st.lists(s_layer_name(), min_size=1, max_size=3))
        return AtRule("layer", PreludeLayer(LayerNames(tuple(names))), None)
    name = draw(s_layer_name())
    return AtRule("layer", PreludeLayer(LayerNames((name,))), draw(s_declaration_block()))


def s_keyframes_rule() -> st.SearchStrategy[AtRule]:
    keyframe_block = st.builds(
        KeyframeBlock,
        st.lists(s_keyframe_selector(), min_size=1, max_size=3).map(tuple),
        s_declaration_block(),
    )
    blocks = st.lists(keyframe_block, max_size=3).map(lambda items: Block(tuple(items)))
    return st.builds(
        AtRule,
        st.sampled_from(["keyframes", "-webkit-keyframes"]),
        s_keyframes_name().map(PreludeKeyframes),
        blocks,
    )


def s_namespace_rule() -> st.SearchStrategy[AtRule]:
    prelude = st.builds(NamespacePrelude, st.none() | s_ident(), st.one_of(s_str(), s_url())).map(PreludeNamespace)
    return st.builds(AtRule, st.just("namespace"), prelude, st.none())


def s_charset_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("charset"), s_str().map(PreludeCharset), st.none())


def s_color_profile_rule() -> st.SearchStrategy[AtRule]:
    profile = st.one_of(s_dashed_ident(), st.just(DeviceCmyk()))
    return st.builds(AtRule, st.just("color-profile"), profile.map(PreludeColorProfile), s_declaration_block())


def s_container_rule() -> st.SearchStrategy[AtRule]:
    prelude = st.builds(ContainerPrelude, st.none() | s_ident(), s_media_condition()).map(PreludeContainer)
    return st.builds(AtRule, st.just("container"), prelude, s_declaration_block())


def s_counter_style_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("counter-style"), s_ident().map(PreludeCounterStyle), s_declaration_block())


def s_custom_media_rule() -> st.SearchStrategy[AtRule]:
    custom_media = st.builds(CustomMedia, s_name().map(lambda name: Ident(f"--{name}")), s_custom_media_value())
    return st.builds(AtRule, st.just("custom-media"), custom_media.map(PreludeCustomMedia), st.none())


def s_document_rule() -> st.SearchStrategy[AtRule]:
    matchers = st.lists(s_document_matcher(), min_size=1, max_size=3).map(
        lambda items: DocumentPrelude(tuple(items))
    )
    return st.builds(
        AtRule,
        st.sampled_from(["document", "-moz-document"]),
        matchers.map(PreludeDocument),
        s_declaration_block(),
    )


def s_font_feature_values_rule() -> st.SearchStrategy[AtRule]:
    unquoted = st.lists(s_ident(), min_size=1, max_size=3).map(lambda idents: UnquotedFontFamilyName(tuple(idents)))
    family = st.one_of(s_str(), unquoted)
    return st.builds(AtRule, st.just("font-feature-values"), family.map(PreludeFontFeatureValues), s_declaration_block())


def s_import_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("import"), s_import_prelude().map(PreludeImport), st.none())


def s_nest_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("nest"), s_selector_list().map(PreludeNest), s_declaration_block())


@st.composite
def s_dashed_ident_rule(draw: Draw) -> AtRule:
    name, wrapper = draw(
        st.sampled_from(
            [
                ("font-palette-values", PreludeFontPaletteValues),
                ("position-fallback", PreludePositionFallback),
                ("property", PreludeProperty),
                ("scroll-timeline", PreludeScrollTimeline),
            ]
        )
    )
    return AtRule(name, wrapper(draw(s_dashed_ident())), draw(s_declaration_block()))


def s_sass_expr_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(
        AtRule,
        st.sampled_from(["debug", "warn", "error", "return"]),
        s_sass_expr().map(PreludeSassExpr),
        st.none(),
    )


def s_supports_rule() -> st.SearchStrategy[AtRule]:
    return st.builds(AtRule, st.just("supports"), s_supports_condition().map(PreludeSupports), s_declaration_block())


def s_qualified_rule() -> st.SearchStrategy[QualifiedRule]:
    return st.builds(QualifiedRule, s_selector_list(), s_declaration_block())


def s_at_rule() -> st.SearchStrategy[AtRule]:
    return st.one_of(
        s_media_rule(),
        s_charset_rule(),
        s_color_profile_rule(),
        s_container_rule(),
        s_counter_style_rule(),
        s_custom_media_rule(),
        s_document_rule(),
        s_font_feature_values_rule(),
        s_import_rule(),
        s_keyframes_rule(),
        s_layer_rule(),
        s_namespace_rule(),
        s_nest_rule(),
        s_page_rule(),
        s_dashed_ident_rule(),
        s_sass_expr_rule(),
        s_supports_rule(),
    )


def s_statement() -> st.SearchStrategy[Statement]:
    return st.one_of(s_at_rule(), s_qualified_rule())


def s_stylesheet() -> st.SearchStrategy[Stylesheet]:
    return st.lists(s_statement(), max_size=4).map(lambda statements: Stylesheet(tuple(statements)))


def s_format_options() -> st.SearchStrategy[FormatOptions]:
    return st.builds(
        FormatOptions,
        print_width=st.sampled_from([10, 40, 80]),
        indent_width=st.sampled_from([2, 4]),
        block_selector_linebreak=st.sampled_from(list(BlockSelectorLineBreak)),
    )


# ---------------------------------------------------------------------------
# Expected tree after printing
# ---------------------------------------------------------------------------


def normalize_keyframe_keywords(stylesheet: Stylesheet) -> Stylesheet:
    """The tree a printed stylesheet parses back to: `from`/`to` come back lowercase."""
    return replace(stylesheet, statements=tuple(_normalize_statement(statement) for statement in stylesheet.statements))


def _normalize_statement(statement: Statement) -> Statement:
    if not isinstance(statement, AtRule) or statement.block is None:
        return statement
    statements = tuple(
        replace(item, selectors=tuple(_normalize_selector(selector) for selector in item.selectors))
        if isinstance(item, KeyframeBlock)
        else item
        for item in statement.block.statements
    )
    return replace(statement, block=replace(statement.block, statements=statements))


def _normalize_selector(selector: KeyframeSelector) -> KeyframeSelector:
    if isinstance(selector, Ident) and selector.name.lower() in {"from", "to"}:
        return Ident(selector.name.lower())
    return selector
