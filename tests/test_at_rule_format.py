from typing import get_args

import pytest

from stylepy.ast import (
    AtRule,
    AtRulePrelude,
    Block,
    ContainerPrelude,
    CustomMedia,
    DashedIdent,
    Declaration,
    Delimiter,
    DeviceCmyk,
    DocumentPrelude,
    Function,
    Ident,
    ImportLayer,
    ImportPrelude,
    ImportSupports,
    InterpolatedIdent,
    Interpolation,
    KeyframeBlock,
    LayerName,
    LayerNames,
    LessVariable,
    MediaCondition,
    MediaFeatureBoolean,
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
    PreludeUnknown,
    PseudoPage,
    SassExpr,
    SassVariable,
    Selector,
    SelectorList,
    Str,
    SupportsCondition,
    SupportsSelector,
    UnknownPrelude,
    UnquotedFontFamilyName,
    Url,
    UrlRaw,
)
from stylepy.doc import Doc, Group, Nest, render
from stylepy.format import (
    BlockSelectorLineBreak,
    FormatContext,
    FormatOptions,
    InvariantViolationError,
    UnsupportedConstructError,
    doc_gen,
)
from stylepy.format.at_rule import format_at_rule, format_keyframe_selector, format_prelude
from stylepy.text import TextRange, TextSize


def make_ctx(
    policy: BlockSelectorLineBreak = BlockSelectorLineBreak.CONSISTENT,
    *,
    indent_width: int = 2,
) -> FormatContext:
    return FormatContext(FormatOptions(indent_width=indent_width, block_selector_linebreak=policy))


def show(doc: Doc, width: int = 80) -> str:
    return render(doc, print_width=width)


def page_list(*selectors: PageSelector) -> PreludePage:
    return PreludePage(PageSelectorList(selectors))


def named_page(name: str) -> PageSelector:
    return PageSelector(Ident(name))


FIRST_AND_TOC = page_list(
    PageSelector(None, (PseudoPage(Ident("first")),)),
    PageSelector(Ident("toc"), (PseudoPage(Ident("left")),)),
)
A_B_C = page_list(named_page("a"), named_page("b"), named_page("c"))


PRELUDE_SAMPLES: list[tuple[AtRulePrelude, str]] = [
    (PreludeMedia(MediaQueryList((MediaQueryWithType(None, Ident("print")),))), "print"),
    (PreludeCharset(Str('"utf-8"')), '"utf-8"'),
    (PreludeColorProfile(DeviceCmyk()), "device-cmyk"),
    (PreludeContainer(ContainerPrelude(None, MediaCondition((MediaFeatureBoolean(Ident("hover")),)))), "(hover)"),
    (PreludeCounterStyle(Ident("thumbs")), "thumbs"),
    (PreludeCustomMedia(CustomMedia(Ident("--off"), False)), "--off false"),
    (PreludeDocument(DocumentPrelude((Url(UrlRaw("x")),))), "url(x)"),
    (PreludeFontFeatureValues(Str('"Font One"')), '"Font One"'),
    (PreludeFontPaletteValues(DashedIdent("palette")), "--palette"),
    (PreludeImport(ImportPrelude(Str('"a.css"'))), '"a.css"'),
    (PreludeKeyframes(LessVariable("name")), "@name"),
    (PreludeLayer(LayerNames((LayerName((Ident("base"),)),))), "base"),
    (PreludeNamespace(NamespacePrelude(None, Str('"urn:x"'))), '"urn:x"'),
    (PreludeNest(SelectorList((Selector("&:hover"),))), "&:hover"),
    (page_list(PageSelector(None, (PseudoPage(Ident("first")),))), ":first"),
    (PreludePositionFallback(DashedIdent("fallback")), "--fallback"),
    (PreludeProperty(DashedIdent("x")), "--x"),
    (PreludeSassExpr(SassExpr((SassVariable("a"), Delimiter("+"), Number("1")))), "$a + 1"),
    (PreludeScrollTimeline(DashedIdent("timeline")), "--timeline"),
    (PreludeSupports(SupportsCondition((SupportsSelector(Selector("a > b")),))), "selector(a > b)"),
]


def test_every_prelude_variant_has_a_sample() -> None:
    variants = set(get_args(AtRulePrelude.__value__))
    assert variants - {PreludeUnknown} == {type(prelude) for prelude, _ in PRELUDE_SAMPLES}


@pytest.mark.parametrize(
    ("prelude", "expected"),
    PRELUDE_SAMPLES,
    ids=[type(prelude).__name__ for prelude, _ in PRELUDE_SAMPLES],
)
def test_every_modeled_prelude_formats(prelude: AtRulePrelude, expected: str) -> None:
    assert show(format_prelude(prelude, make_ctx())) == expected


# ---------------------------------------------------------------------------
# Selector-like lists follow the line-break policy
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("prelude", "policy", "width", "expected"),
    [
        (FIRST_AND_TOC, BlockSelectorLineBreak.ALWAYS, 80, ":first,\n  toc:left"),
        (FIRST_AND_TOC, BlockSelectorLineBreak.CONSISTENT, 80, ":first, toc:left"),
        (FIRST_AND_TOC, BlockSelectorLineBreak.CONSISTENT, 10, ":first,\n  toc:left"),
        (FIRST_AND_TOC, BlockSelectorLineBreak.WRAP, 80, ":first, toc:left"),
        (A_B_C, BlockSelectorLineBreak.ALWAYS, 80, "a,\n  b,\n  c"),
        (A_B_C, BlockSelectorLineBreak.CONSISTENT, 5, "a,\n  b,\n  c"),
        (A_B_C, BlockSelectorLineBreak.WRAP, 5, "a, b,\n  c"),
    ],
    ids=[
        "always-breaks-even-when-fitting",
        "consistent-fits",
        "consistent-breaks",
        "wrap-fits",
        "always-three",
        "consistent-breaks-all",
        "wrap-breaks-only-overflow",
    ],
)
def test_page_selector_list_policy(
    prelude: PreludePage,
    policy: BlockSelectorLineBreak,
    width: int,
    expected: str,
) -> None:
    assert show(format_prelude(prelude, make_ctx(policy)), width) == expected


def test_continuation_lines_use_indent_width() -> None:
    ctx = make_ctx(BlockSelectorLineBreak.ALWAYS, indent_width=4)
    assert show(format_prelude(FIRST_AND_TOC, ctx)) == ":first,\n    toc:left"


def test_page_selector_list_is_a_nested_group() -> None:
    doc = format_prelude(FIRST_AND_TOC, make_ctx())
    assert isinstance(doc, Nest)
    assert isinstance(doc.child, Group)


def test_document_matchers_follow_policy() -> None:
    prelude = PreludeDocument(
        DocumentPrelude(
            (
                Function(Ident("url-prefix"), (Str('"a"'),)),
                Function(Ident("domain"), (Str('"b"'),)),
            )
        )
    )
    assert show(format_prelude(prelude, make_ctx())) == 'url-prefix("a"), domain("b")'
    assert show(format_prelude(prelude, make_ctx(BlockSelectorLineBreak.ALWAYS))) == 'url-prefix("a"),\n  domain("b")'


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", ["from", "FROM", "From", "to", "TO", "tO"])
def test_keyframe_keywords_print_lowercase(name: str) -> None:
    assert show(format_keyframe_selector(Ident(name), make_ctx())) == name.lower()


def test_other_keyframe_selectors_are_unchanged() -> None:
    ctx = make_ctx()
    assert show(format_keyframe_selector(Ident("Fromage"), ctx)) == "Fromage"
    assert show(format_keyframe_selector(Percentage(Number("50")), ctx)) == "50%"
    interpolated = InterpolatedIdent(("fr", Interpolation("$x")))
    assert show(format_keyframe_selector(interpolated, ctx)) == "fr#{$x}"


def test_keyframe_block() -> None:
    block = KeyframeBlock((Ident("FROM"), Percentage(Number("50"))), Block())
    assert show(doc_gen(block, make_ctx())) == "from, 50% {}"


# ---------------------------------------------------------------------------
# Individual preludes
# ---------------------------------------------------------------------------


def test_layer_names() -> None:
    ctx = make_ctx()
    dotted = PreludeLayer(LayerNames((LayerName((Ident("a"), Ident("b"), Ident("c"))),)))
    assert show(format_prelude(dotted, ctx)) == "a.b.c"
    pair = PreludeLayer(LayerNames((LayerName((Ident("base"),)), LayerName((Ident("components"),)))))
    assert show(format_prelude(pair, ctx)) == "base, components"
    assert show(format_prelude(pair, ctx), 10) == "base,\n  components"


def test_namespace_prefix_and_uri_break_together() -> None:
    prelude = PreludeNamespace(NamespacePrelude(Ident("svg"), Str('"http://www.w3.org/2000/svg"')))
    assert show(format_prelude(prelude, make_ctx())) == 'svg "http://www.w3.org/2000/svg"'
    assert show(format_prelude(prelude, make_ctx()), 20) == 'svg\n  "http://www.w3.org/2000/svg"'


def test_import_parts_break_onto_continuation_lines() -> None:
    prelude = PreludeImport(
        ImportPrelude(
            href=Url(Str('"theme.css"')),
            layer=ImportLayer(LayerName((Ident("theme"),))),
            supports=ImportSupports(Declaration(Ident("display"), (Ident("grid"),))),
            media=MediaQueryList((MediaQueryWithType(None, Ident("screen")),)),
        )
    )
    ctx = make_ctx()
    assert show(format_prelude(prelude, ctx)) == 'url("theme.css") layer(theme) supports(display: grid) screen'
    assert show(format_prelude(prelude, ctx), 40) == (
        'url("theme.css")\n  layer(theme)\n  supports(display: grid)\n  screen'
    )


def test_import_anonymous_layer() -> None:
    prelude = PreludeImport(ImportPrelude(Str('"a.css"'), layer=ImportLayer()))
    assert show(format_prelude(prelude, make_ctx())) == '"a.css" layer'


def test_custom_media_boolean_values() -> None:
    ctx = make_ctx()
    assert show(format_prelude(PreludeCustomMedia(CustomMedia(Ident("--on"), True)), ctx)) == "--on true"
    assert show(format_prelude(PreludeCustomMedia(CustomMedia(Ident("--off"), False)), ctx)) == "--off false"


def test_container_name_precedes_condition() -> None:
    prelude = PreludeContainer(ContainerPrelude(Ident("card"), MediaCondition((MediaFeatureBoolean(Ident("hover")),))))
    assert show(format_prelude(prelude, make_ctx())) == "card (hover)"


def test_unquoted_font_family_is_space_joined() -> None:
    family = UnquotedFontFamilyName((Ident("Times"), Ident("New"), Ident("Roman")))
    assert show(format_prelude(PreludeFontFeatureValues(family), make_ctx())) == "Times New Roman"


def test_color_profile_dashed_ident() -> None:
    assert show(format_prelude(PreludeColorProfile(DashedIdent("swop5c")), make_ctx())) == "--swop5c"


# ---------------------------------------------------------------------------
# At-rule assembly
# ---------------------------------------------------------------------------


def test_at_rule_name_is_lowercased_and_prelude_kept() -> None:
    rule = AtRule("-WEBKIT-Keyframes", PreludeKeyframes(Ident("Spin")), Block((KeyframeBlock((Ident("TO"),), Block()),)))
    assert show(format_at_rule(rule, make_ctx())) == "@-webkit-keyframes Spin {\n  to {}\n}"


def test_at_rule_without_prelude_or_block() -> None:
    ctx = make_ctx()
    assert show(format_at_rule(AtRule("font-face", None, Block()), ctx)) == "@font-face {}"
    layer = AtRule("layer", PreludeLayer(LayerNames((LayerName((Ident("base"),)),))), None)
    assert show(format_at_rule(layer, ctx)) == "@layer base"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "prelude",
    [
        PreludeLayer(LayerNames(())),
        PreludeLayer(LayerNames((LayerName(()),))),
        page_list(),
        page_list(PageSelector(None, ())),
        PreludeDocument(DocumentPrelude(())),
        PreludeFontFeatureValues(UnquotedFontFamilyName(())),
        PreludeSassExpr(SassExpr(())),
        PreludeMedia(MediaQueryList(())),
    ],
    ids=[
        "empty-layer-names",
        "empty-layer-name",
        "empty-page-list",
        "empty-page-selector",
        "empty-document",
        "empty-font-family",
        "empty-sass-expr",
        "empty-media-query-list",
    ],
)
def test_malformed_trees_raise_invariant_violation(prelude: AtRulePrelude) -> None:
    with pytest.raises(InvariantViolationError) as excinfo:
        format_prelude(prelude, make_ctx())
    assert excinfo.value.diagnostic.code == "FORMAT_INVARIANT_VIOLATION"


def test_unknown_prelude_is_unsupported() -> None:
    span = TextRange.new(TextSize.from_int(9), TextSize.from_int(15))
    prelude = PreludeUnknown(UnknownPrelude("foo(1)", span=span))
    with pytest.raises(UnsupportedConstructError) as excinfo:
        format_prelude(prelude, make_ctx())
    diagnostic = excinfo.value.diagnostic
    assert diagnostic.code == "FORMAT_UNSUPPORTED_CONSTRUCT"
    assert diagnostic.range == span
    assert "foo(1)" in diagnostic.message


def test_unknown_prelude_payload_is_unsupported_through_dispatch() -> None:
    with pytest.raises(UnsupportedConstructError):
        doc_gen(UnknownPrelude("foo"), make_ctx())


def test_non_prelude_is_unsupported() -> None:
    with pytest.raises(UnsupportedConstructError):
        format_prelude(Ident("x"), make_ctx())  # type: ignore[arg-type]
    with pytest.raises(UnsupportedConstructError):
        doc_gen(object(), make_ctx())
