"""Grammar for media queries and supports conditions."""

from __future__ import annotations

from typing import Final

from stylepy.ast import (
    Comparison,
    ComponentValue,
    Ident,
    MediaAnd,
    MediaCondition,
    MediaConditionInParens,
    MediaConditionKind,
    MediaFeature,
    MediaFeatureBoolean,
    MediaFeaturePlain,
    MediaFeatureRange,
    MediaFeatureRangeInterval,
    MediaInParens,
    MediaNot,
    MediaOr,
    MediaQuery,
    MediaQueryList,
    MediaQueryWithType,
    Number,
    Ratio,
    SupportsAnd,
    SupportsCondition,
    SupportsConditionInParens,
    SupportsConditionKind,
    SupportsDecl,
    SupportsInParens,
    SupportsNot,
    SupportsOr,
    SupportsSelector,
)
from stylepy.diagnostics import PARSER_EXPECTED_VALUE
from stylepy.lexer import TokenKind
from stylepy.parser.parser import Parser
from stylepy.parser.values import (
    at_dashed_ident,
    parse_component_value,
    parse_declaration,
    parse_ident,
    parse_selector,
)
from stylepy.text import TextSize

_COMPARISONS: Final[dict[TokenKind, Comparison]] = {
    TokenKind.LESS_THAN: "<",
    TokenKind.LESS_THAN_OR_EQUAL: "<=",
    TokenKind.GREATER_THAN: ">",
    TokenKind.GREATER_THAN_OR_EQUAL: ">=",
    TokenKind.EQUAL: "=",
}

_MEDIA_MODIFIERS: Final[frozenset[str]] = frozenset({"not", "only"})


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


def parse_media_query_list(p: Parser) -> MediaQueryList:
    start = p.current_range.start
    queries = [parse_media_query(p)]
    while p.eat(TokenKind.COMMA):
        queries.append(parse_media_query(p))
    return MediaQueryList(queries=tuple(queries), span=p.span_from(start))


def parse_media_query(p: Parser) -> MediaQuery:
    if p.at(TokenKind.LPAREN) or (p.at_ident("not") and p.nth(1) == TokenKind.LPAREN):
        return parse_media_condition(p)

    start = p.current_range.start
    modifier: Ident | None = None
    if p.current_text.lower() in _MEDIA_MODIFIERS and p.nth(1) == TokenKind.IDENT:
        modifier = parse_ident(p)
    media_type = parse_ident(p)
    condition: MediaCondition | None = None
    if p.at_ident("and"):
        p.bump()
        condition = parse_media_condition(p, allow_or=False)
    return MediaQueryWithType(modifier=modifier, media_type=media_type, condition=condition, span=p.span_from(start))


def parse_media_condition(p: Parser, *, allow_or: bool = True) -> MediaCondition:
    """`not (x)` or `(x) [and (y)]...` / `(x) [or (y)]...`."""
    start = p.current_range.start
    conditions: list[MediaConditionKind] = []
    if p.at_ident("not"):
        not_start = p.current_range.start
        p.bump()
        conditions.append(MediaNot(condition=parse_media_in_parens(p), span=p.span_from(not_start)))
        return MediaCondition(conditions=tuple(conditions), span=p.span_from(start))

    conditions.append(parse_media_in_parens(p))
    while p.at_ident("and") or (allow_or and p.at_ident("or")):
        term_start = p.current_range.start
        keyword = p.bump()
        term = parse_media_in_parens(p)
        if p.text(keyword).lower() == "and":
            conditions.append(MediaAnd(condition=term, span=p.span_from(term_start)))
        else:
            conditions.append(MediaOr(condition=term, span=p.span_from(term_start)))
    return MediaCondition(conditions=tuple(conditions), span=p.span_from(start))


def parse_media_in_parens(p: Parser) -> MediaInParens:
    start = p.current_range.start
    p.expect(TokenKind.LPAREN, "`(`")
    if p.at(TokenKind.LPAREN) or (p.at_ident("not") and p.nth(1) == TokenKind.LPAREN):
        condition = parse_media_condition(p)
        p.expect(TokenKind.RPAREN, "`)`")
        return MediaConditionInParens(condition=condition, span=p.span_from(start))
    return _parse_media_feature_rest(p, start)


def _parse_media_feature_rest(p: Parser, start: TextSize) -> MediaFeature:
    if p.at(TokenKind.IDENT) and p.nth(1) == TokenKind.RPAREN:
        name = parse_ident(p)
        p.bump()
        return MediaFeatureBoolean(name=name, span=p.span_from(start))

    if p.at(TokenKind.IDENT) and p.nth(1) == TokenKind.COLON:
        name = parse_ident(p)
        p.bump()
        value = parse_media_feature_value(p)
        p.expect(TokenKind.RPAREN, "`)`")
        return MediaFeaturePlain(name=name, value=value, span=p.span_from(start))

    left = parse_media_feature_value(p)
    left_comparison = _parse_comparison(p)
    middle = parse_media_feature_value(p)
    if p.at_set(frozenset(_COMPARISONS)):
        if not isinstance(middle, Ident):
            raise p.failure(PARSER_EXPECTED_VALUE, "Expected a media feature name between the comparisons")
        right_comparison = _parse_comparison(p)
        right = parse_media_feature_value(p)
        p.expect(TokenKind.RPAREN, "`)`")
        return MediaFeatureRangeInterval(
            left=left,
            left_comparison=left_comparison,
            name=middle,
            right_comparison=right_comparison,
            right=right,
            span=p.span_from(start),
        )
    p.expect(TokenKind.RPAREN, "`)`")
    return MediaFeatureRange(left=left, comparison=left_comparison, right=middle, span=p.span_from(start))


def parse_media_feature_value(p: Parser) -> ComponentValue:
    """A single value; `number / number` reads as a ratio."""
    if p.at(TokenKind.NUMBER) and p.nth(1) == TokenKind.SLASH and p.nth(2) == TokenKind.NUMBER:
        start = p.current_range.start
        numerator = p.bump()
        p.bump()
        denominator = p.bump()
        return Ratio(
            numerator=Number(raw=p.text(numerator), span=numerator.range),
            denominator=Number(raw=p.text(denominator), span=denominator.range),
            span=p.span_from(start),
        )
    return parse_component_value(p)


def _parse_comparison(p: Parser) -> Comparison:
    comparison = _COMPARISONS.get(p.current)
    if comparison is None:
        raise p.failure(PARSER_EXPECTED_VALUE, "Expected `:` or a comparison operator")
    p.bump()
    return comparison


# ---------------------------------------------------------------------------
# Supports conditions
# ---------------------------------------------------------------------------


def parse_supports_condition(p: Parser) -> SupportsCondition:
    start = p.current_range.start
    conditions: list[SupportsConditionKind] = []
    if p.at_ident("not"):
        p.bump()
        term = parse_supports_in_parens(p)
        conditions.append(SupportsNot(condition=term, span=p.span_from(start)))
        return SupportsCondition(conditions=tuple(conditions), span=p.span_from(start))

    conditions.append(parse_supports_in_parens(p))
    while p.at_ident("and") or p.at_ident("or"):
        term_start = p.current_range.start
        keyword = p.bump()
        term = parse_supports_in_parens(p)
        if p.text(keyword).lower() == "and":
            conditions.append(SupportsAnd(condition=term, span=p.span_from(term_start)))
        else:
            conditions.append(SupportsOr(condition=term, span=p.span_from(term_start)))
    return SupportsCondition(conditions=tuple(conditions), span=p.span_from(start))


def parse_supports_in_parens(p: Parser) -> SupportsInParens:
    start = p.current_range.start
    if p.at_ident("selector") and p.nth(1) == TokenKind.LPAREN and p.nth_is_adjacent(1):
        p.bump()
        p.bump()
        selector = parse_selector(p, closing=TokenKind.RPAREN)
        p.expect(TokenKind.RPAREN, "`)`")
        return SupportsSelector(selector=selector, span=p.span_from(start))

    p.expect(TokenKind.LPAREN, "`(`")
    if at_supports_declaration(p):
        declaration = parse_declaration(p)
        p.expect(TokenKind.RPAREN, "`)`")
        return SupportsDecl(declaration=declaration, span=p.span_from(start))
    condition = parse_supports_condition(p)
    p.expect(TokenKind.RPAREN, "`)`")
    return SupportsConditionInParens(condition=condition, span=p.span_from(start))


def at_supports_declaration(p: Parser) -> bool:
    return (p.at(TokenKind.IDENT) or at_dashed_ident(p)) and p.nth(1) == TokenKind.COLON


__all__ = [
    "at_supports_declaration",
    "parse_media_condition",
    "parse_media_feature_value",
    "parse_media_in_parens",
    "parse_media_query",
    "parse_media_query_list",
    "parse_supports_condition",
    "parse_supports_in_parens",
]
