"""Grammar for at-rule preludes.

The prelude parser is picked by the at-rule name, lowercased and with any
vendor prefix removed (`@-webkit-keyframes` parses like `@keyframes`). Names
without a modeled grammar keep their prelude as `UnknownPrelude` raw text.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from stylepy.ast import (
    AtRulePrelude,
    ContainerPrelude,
    CustomMedia,
    CustomMediaValue,
    DeviceCmyk,
    DocumentPrelude,
    DocumentPreludeMatcher,
    FontFamilyName,
    Function,
    Ident,
    ImportLayer,
    ImportPrelude,
    ImportSupports,
    InterpolableIdent,
    KeyframesName,
    LayerName,
    LayerNames,
    LessEscapedStr,
    LessVariable,
    MediaQueryList,
    NamespacePrelude,
    NamespacePreludeUri,
    PageSelector,
    PageSelectorList,
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
    Str,
    UnknownPrelude,
    UnquotedFontFamilyName,
    Url,
)
from stylepy.diagnostics import PARSER_INVALID_PRELUDE
from stylepy.lexer import TokenKind
from stylepy.parser.conditions import (
    at_supports_declaration,
    parse_media_condition,
    parse_media_query_list,
    parse_supports_condition,
)
from stylepy.parser.parser import Parser
from stylepy.parser.values import (
    IDENT_START,
    parse_component_value,
    parse_component_values,
    parse_dashed_ident,
    parse_declaration,
    parse_ident,
    parse_interpolable_ident,
    parse_selector_list,
    parse_str,
)
from stylepy.text import slice_text_range

PRELUDE_END: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.LBRACE, TokenKind.SEMICOLON, TokenKind.RBRACE, TokenKind.EOF}
)

_CONDITION_KEYWORDS: Final[frozenset[str]] = frozenset({"not", "and", "or"})


def unprefixed_name(name: str) -> str:
    """`-webkit-keyframes` -> `keyframes`; custom names like `--x` are left alone."""
    lowered = name.lower()
    if lowered.startswith("-") and not lowered.startswith("--"):
        second_dash = lowered.find("-", 1)
        if second_dash > 0:
            return lowered[second_dash + 1 :]
    return lowered


def parse_prelude(p: Parser, name: str) -> AtRulePrelude | None:
    """Parse the prelude of `@name`; `None` when the rule has no prelude tokens."""
    if p.at_set(PRELUDE_END):
        return None
    start = p.current_range.start
    parser = _PRELUDE_PARSERS.get(unprefixed_name(name))
    if parser is None:
        return PreludeUnknown(value=_parse_unknown(p), span=p.span_from(start))
    prelude = parser(p)
    if not p.at_set(PRELUDE_END):
        raise p.failure(PARSER_INVALID_PRELUDE, f"Unexpected `{p.current_text}` in `@{name}` prelude")
    return prelude


def _parse_unknown(p: Parser) -> UnknownPrelude:
    start = p.current_range.start
    depth = 0
    while not p.at(TokenKind.EOF):
        if depth == 0 and p.at_set(PRELUDE_END):
            break
        if p.at_set({TokenKind.LPAREN, TokenKind.LBRACKET}):
            depth += 1
        elif p.at_set({TokenKind.RPAREN, TokenKind.RBRACKET}) and depth > 0:
            depth -= 1
        p.bump()
    span = p.span_from(start)
    return UnknownPrelude(raw=slice_text_range(p.source, span), span=span)


# ---------------------------------------------------------------------------
# One parser per modeled at-rule
# ---------------------------------------------------------------------------


def _media(p: Parser) -> PreludeMedia:
    start = p.current_range.start
    return PreludeMedia(value=parse_media_query_list(p), span=p.span_from(start))


def _charset(p: Parser) -> PreludeCharset:
    start = p.current_range.start
    return PreludeCharset(value=parse_str(p), span=p.span_from(start))


def _color_profile(p: Parser) -> PreludeColorProfile:
    start = p.current_range.start
    if p.at_ident("device-cmyk"):
        token = p.bump()
        return PreludeColorProfile(value=DeviceCmyk(span=token.range), span=p.span_from(start))
    return PreludeColorProfile(value=parse_dashed_ident(p), span=p.span_from(start))


def _container(p: Parser) -> PreludeContainer | PreludeUnknown:
    start = p.current_range.start
    if _has_function_query(p):
        # style() and scroll-state() queries are kept verbatim.
        return PreludeUnknown(value=_parse_unknown(p), span=p.span_from(start))
    name: InterpolableIdent | None = None
    if p.at_set(IDENT_START) and p.current_text.lower() not in _CONDITION_KEYWORDS:
        name = parse_interpolable_ident(p)
    condition = parse_media_condition(p)
    container = ContainerPrelude(name=name, condition=condition, span=p.span_from(start))
    return PreludeContainer(value=container, span=p.span_from(start))


def _has_function_query(p: Parser) -> bool:
    n = 0
    depth = 0
    while p.nth(n) not in PRELUDE_END:
        kind = p.nth(n)
        if kind == TokenKind.LPAREN:
            depth += 1
        elif kind == TokenKind.RPAREN:
            depth -= 1
        elif depth == 0 and kind == TokenKind.IDENT and p.nth(n + 1) == TokenKind.LPAREN and p.nth_is_adjacent(n + 1):
            return True
        n += 1
    return False


def _counter_style(p: Parser) -> PreludeCounterStyle:
    start = p.current_range.start
    return PreludeCounterStyle(value=parse_interpolable_ident(p), span=p.span_from(start))


def _custom_media(p: Parser) -> PreludeCustomMedia:
    start = p.current_range.start
    name = parse_ident(p)
    value: CustomMediaValue
    if p.at_ident("true") or p.at_ident("false"):
        value = p.text(p.bump()).lower() == "true"
    else:
        value = parse_media_query_list(p)
    custom_media = CustomMedia(name=name, value=value, span=p.span_from(start))
    return PreludeCustomMedia(value=custom_media, span=p.span_from(start))


def _document(p: Parser) -> PreludeDocument:
    start = p.current_range.start
    matchers = [_document_matcher(p)]
    while p.eat(TokenKind.COMMA):
        matchers.append(_document_matcher(p))
    document = DocumentPrelude(matchers=tuple(matchers), span=p.span_from(start))
    return PreludeDocument(value=document, span=p.span_from(start))


def _document_matcher(p: Parser) -> DocumentPreludeMatcher:
    value = parse_component_value(p)
    if not isinstance(value, Function | Url):
        raise p.failure(PARSER_INVALID_PRELUDE, "Expected `url(...)` or a matcher function such as `url-prefix(...)`")
    return value


def _font_feature_values(p: Parser) -> PreludeFontFeatureValues:
    start = p.current_range.start
    family: FontFamilyName
    if p.at(TokenKind.STRING):
        family = parse_str(p)
    else:
        idents = [parse_interpolable_ident(p)]
        while p.at_set(IDENT_START):
            idents.append(parse_interpolable_ident(p))
        family = UnquotedFontFamilyName(idents=tuple(idents), span=p.span_from(start))
    return PreludeFontFeatureValues(value=family, span=p.span_from(start))


def _import(p: Parser) -> PreludeImport:
    start = p.current_range.start
    href = _href(p)
    layer: ImportLayer | None = None
    supports: ImportSupports | None = None
    media: MediaQueryList | None = None
    if p.at_ident("layer"):
        layer = _import_layer(p)
    if p.at_ident("supports") and _at_function_start(p):
        supports = _import_supports(p)
    if not p.at_set(PRELUDE_END):
        media = parse_media_query_list(p)
    prelude = ImportPrelude(href=href, layer=layer, supports=supports, media=media, span=p.span_from(start))
    return PreludeImport(value=prelude, span=p.span_from(start))


def _at_function_start(p: Parser) -> bool:
    """Current identifier opens a function: `(` follows with no whitespace."""
    return p.at(TokenKind.IDENT) and p.nth(1) == TokenKind.LPAREN and p.nth_is_adjacent(1)


def _href(p: Parser) -> Str | Url:
    value = parse_component_value(p)
    if not isinstance(value, Str | Url):
        raise p.failure(PARSER_INVALID_PRELUDE, "Expected a string or `url(...)`")
    return value


def _import_layer(p: Parser) -> ImportLayer:
    start = p.current_range.start
    p.bump()
    if p.at(TokenKind.LPAREN) and not p.has_preceding_trivia:
        p.bump()
        name = parse_layer_name(p)
        p.expect(TokenKind.RPAREN, "`)`")
        return ImportLayer(name=name, span=p.span_from(start))
    return ImportLayer(span=p.span_from(start))


def _import_supports(p: Parser) -> ImportSupports:
    start = p.current_range.start
    p.bump()
    p.bump()
    if at_supports_declaration(p):
        condition = parse_declaration(p)
    else:
        condition = parse_supports_condition(p)
    p.expect(TokenKind.RPAREN, "`)`")
    return ImportSupports(condition=condition, span=p.span_from(start))


def _keyframes(p: Parser) -> PreludeKeyframes:
    start = p.current_range.start
    name: KeyframesName
    match p.current:
        case TokenKind.STRING:
            name = parse_str(p)
        case TokenKind.AT_KEYWORD:
            token = p.bump()
            name = LessVariable(name=p.text(token)[1:], span=token.range)
        case TokenKind.TILDE:
            value = parse_component_value(p)
            if not isinstance(value, LessEscapedStr):
                raise p.failure(PARSER_INVALID_PRELUDE, "Expected a keyframes name")
            name = value
        case _:
            name = parse_interpolable_ident(p)
    return PreludeKeyframes(value=name, span=p.span_from(start))


def _layer(p: Parser) -> PreludeLayer:
    start = p.current_range.start
    names = [parse_layer_name(p)]
    while p.eat(TokenKind.COMMA):
        names.append(parse_layer_name(p))
    layer_names = LayerNames(names=tuple(names), span=p.span_from(start))
    return PreludeLayer(value=layer_names, span=p.span_from(start))


def parse_layer_name(p: Parser) -> LayerName:
    """Dot-separated identifiers with no whitespace around the dots."""
    start = p.current_range.start
    idents = [parse_interpolable_ident(p)]
    while p.at(TokenKind.DOT) and not p.has_preceding_trivia and p.nth_is_adjacent(1):
        p.bump()
        idents.append(parse_interpolable_ident(p))
    return LayerName(idents=tuple(idents), span=p.span_from(start))


def _namespace(p: Parser) -> PreludeNamespace:
    start = p.current_range.start
    prefix: Ident | None = None
    if p.at(TokenKind.IDENT) and not _at_function_start(p):
        prefix = parse_ident(p)
    uri: NamespacePreludeUri = _href(p)
    namespace = NamespacePrelude(prefix=prefix, uri=uri, span=p.span_from(start))
    return PreludeNamespace(value=namespace, span=p.span_from(start))


def _nest(p: Parser) -> PreludeNest:
    start = p.current_range.start
    return PreludeNest(value=parse_selector_list(p), span=p.span_from(start))


def _page(p: Parser) -> PreludePage:
    start = p.current_range.start
    selectors = [_page_selector(p)]
    while p.eat(TokenKind.COMMA):
        selectors.append(_page_selector(p))
    selector_list = PageSelectorList(selectors=tuple(selectors), span=p.span_from(start))
    return PreludePage(value=selector_list, span=p.span_from(start))


def _page_selector(p: Parser) -> PageSelector:
    start = p.current_range.start
    name = parse_ident(p) if p.at(TokenKind.IDENT) else None
    pseudo: list[PseudoPage] = []
    while p.at(TokenKind.COLON) and ((name is None and not pseudo) or not p.has_preceding_trivia):
        pseudo_start = p.current_range.start
        p.bump()
        if not p.at(TokenKind.IDENT) or p.has_preceding_trivia:
            raise p.failure(PARSER_INVALID_PRELUDE, "Expected a pseudo-page name after `:`")
        pseudo.append(PseudoPage(name=parse_ident(p), span=p.span_from(pseudo_start)))
    if name is None and not pseudo:
        raise p.failure(PARSER_INVALID_PRELUDE, "Expected a page name or pseudo-page")
    return PageSelector(name=name, pseudo=tuple(pseudo), span=p.span_from(start))


def _dashed_ident_prelude[T](wrapper: Callable[..., T]) -> Callable[[Parser], T]:
    def parse(p: Parser) -> T:
        start = p.current_range.start
        return wrapper(value=parse_dashed_ident(p), span=p.span_from(start))

    return parse


def _sass_expr(p: Parser) -> PreludeSassExpr:
    start = p.current_range.start
    values = parse_component_values(p)
    if not values:
        raise p.unexpected()
    return PreludeSassExpr(value=SassExpr(values=values, span=p.span_from(start)), span=p.span_from(start))


def _supports(p: Parser) -> PreludeSupports:
    start = p.current_range.start
    return PreludeSupports(value=parse_supports_condition(p), span=p.span_from(start))


_PRELUDE_PARSERS: Final[dict[str, Callable[[Parser], AtRulePrelude]]] = {
    "media": _media,
    "charset": _charset,
    "color-profile": _color_profile,
    "container": _container,
    "counter-style": _counter_style,
    "custom-media": _custom_media,
    "document": _document,
    "font-feature-values": _font_feature_values,
    "font-palette-values": _dashed_ident_prelude(PreludeFontPaletteValues),
    "import": _import,
    "keyframes": _keyframes,
    "layer": _layer,
    "namespace": _namespace,
    "nest": _nest,
    "page": _page,
    "position-fallback": _dashed_ident_prelude(PreludePositionFallback),
    "property": _dashed_ident_prelude(PreludeProperty),
    "scroll-timeline": _dashed_ident_prelude(PreludeScrollTimeline),
    "supports": _supports,
    "debug": _sass_expr,
    "warn": _sass_expr,
    "error": _sass_expr,
    "return": _sass_expr,
}

__all__ = ["PRELUDE_END", "parse_layer_name", "parse_prelude", "unprefixed_name"]
