"""Grammar for component values, identifiers, declarations and selectors."""

from __future__ import annotations

import re
from typing import Final

from stylepy.ast import (
    ComponentValue,
    DashedIdent,
    Declaration,
    Delimiter,
    Dimension,
    Function,
    HexColor,
    Ident,
    InterpolableIdent,
    InterpolatedIdent,
    Interpolation,
    LessEscapedStr,
    LessVariable,
    Number,
    Percentage,
    SassVariable,
    Selector,
    SelectorList,
    Str,
    Url,
    UrlRaw,
)
from stylepy.diagnostics import PARSER_EXPECTED_VALUE
from stylepy.lexer import Token, TokenKind
from stylepy.parser.parser import Parser
from stylepy.text import TextSize

_NUMBER_PREFIX: Final = re.compile(r"[+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?")

_DELIMITERS: Final[dict[TokenKind, str]] = {
    TokenKind.COMMA: ",",
    TokenKind.SLASH: "/",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.EQUAL: "=",
}

VALUE_START: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.IDENT,
        TokenKind.INTERPOLATION,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.PERCENTAGE,
        TokenKind.DIMENSION,
        TokenKind.URL,
        TokenKind.HASH,
        TokenKind.DOLLAR_VARIABLE,
        TokenKind.AT_KEYWORD,
        TokenKind.TILDE,
        *_DELIMITERS,
    }
)

IDENT_START: Final[frozenset[TokenKind]] = frozenset({TokenKind.IDENT, TokenKind.INTERPOLATION})

_SIGNS: Final[frozenset[TokenKind]] = frozenset({TokenKind.PLUS, TokenKind.MINUS})
_SIGN_OPERANDS: Final[frozenset[TokenKind]] = VALUE_START.difference(_DELIMITERS)

_NESTING_OPEN: Final[frozenset[TokenKind]] = frozenset({TokenKind.LPAREN, TokenKind.LBRACKET})
_NESTING_CLOSE: Final[frozenset[TokenKind]] = frozenset({TokenKind.RPAREN, TokenKind.RBRACKET})


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def parse_interpolable_ident(p: Parser) -> InterpolableIdent:
    """Adjacent identifier and `#{...}` tokens form one identifier."""
    if not p.at_set(IDENT_START):
        raise p.failure(PARSER_EXPECTED_VALUE, "Expected an identifier")
    start = p.current_range.start
    elements: list[str | Interpolation] = []
    while p.at_set(IDENT_START) and (not elements or not p.has_preceding_trivia):
        token = p.bump()
        text = p.text(token)
        if token.kind == TokenKind.INTERPOLATION:
            elements.append(Interpolation(expr=text[2:-1], span=token.range))
        else:
            elements.append(text)
    span = p.span_from(start)
    if len(elements) == 1 and isinstance(elements[0], str):
        return Ident(name=elements[0], span=span)
    return InterpolatedIdent(elements=tuple(elements), span=span)


def parse_ident(p: Parser) -> Ident:
    token = p.expect(TokenKind.IDENT, "an identifier")
    return Ident(name=p.text(token), span=token.range)


def parse_dashed_ident(p: Parser) -> DashedIdent:
    if not p.at(TokenKind.IDENT) or not p.current_text.startswith("--"):
        raise p.failure(PARSER_EXPECTED_VALUE, "Expected a dashed identifier such as `--name`")
    token = p.bump()
    return DashedIdent(name=p.text(token)[2:], span=token.range)


def at_dashed_ident(p: Parser) -> bool:
    return p.at(TokenKind.IDENT) and p.current_text.startswith("--")


def parse_str(p: Parser) -> Str:
    token = p.expect(TokenKind.STRING, "a string")
    return Str(raw=p.text(token), span=token.range)


# ---------------------------------------------------------------------------
# Component values
# ---------------------------------------------------------------------------


def parse_component_values(p: Parser) -> tuple[ComponentValue, ...]:
    """Values up to the first token that cannot start one."""
    values: list[ComponentValue] = []
    while p.at_set(VALUE_START):
        separated = not values or p.has_preceding_trivia or _is_comma(values[-1])
        values.append(parse_component_value(p, separated=separated))
    return tuple(values)


def parse_component_value(p: Parser, *, separated: bool = True) -> ComponentValue:
    """One value; `separated` says whether whitespace or a comma comes before it."""
    start = p.current_range.start
    match p.current:
        case TokenKind.IDENT | TokenKind.INTERPOLATION:
            name = parse_interpolable_ident(p)
            if p.at(TokenKind.LPAREN) and not p.has_preceding_trivia:
                return _parse_function_rest(p, name, start)
            if isinstance(name, Ident) and name.name.startswith("--"):
                return DashedIdent(name=name.name[2:], span=name.span)
            return name
        case TokenKind.STRING:
            return parse_str(p)
        case TokenKind.NUMBER:
            token = p.bump()
            return Number(raw=p.text(token), span=token.range)
        case TokenKind.PERCENTAGE:
            token = p.bump()
            return Percentage(value=Number(raw=p.text(token)[:-1], span=token.range), span=token.range)
        case TokenKind.DIMENSION:
            return _dimension(p, p.bump())
        case TokenKind.URL:
            token = p.bump()
            raw = p.text(token)[4:-1].strip()
            return Url(value=UrlRaw(raw=raw, span=token.range), span=token.range)
        case TokenKind.HASH:
            token = p.bump()
            return HexColor(value=p.text(token)[1:], span=token.range)
        case TokenKind.DOLLAR_VARIABLE:
            token = p.bump()
            return SassVariable(name=p.text(token)[1:], span=token.range)
        case TokenKind.AT_KEYWORD:
            token = p.bump()
            return LessVariable(name=p.text(token)[1:], span=token.range)
        case TokenKind.TILDE if p.nth(1) == TokenKind.STRING and p.nth_is_adjacent(1):
            p.bump()
            return LessEscapedStr(value=parse_str(p), span=p.span_from(start))
        case kind if kind in _SIGNS and separated and _sign_hugs_operand(p):
            token = p.bump()
            return Delimiter(kind=_DELIMITERS[kind], unary=True, span=token.range)
        case kind if kind in _DELIMITERS:
            token = p.bump()
            return Delimiter(kind=_DELIMITERS[kind], span=token.range)
        case _:
            raise p.failure(PARSER_EXPECTED_VALUE, f"Expected a value but found `{p.current_text}`")


def _sign_hugs_operand(p: Parser) -> bool:
    return p.nth(1) in _SIGN_OPERANDS and p.nth_is_adjacent(1)


def _is_comma(value: ComponentValue) -> bool:
    return isinstance(value, Delimiter) and value.kind == ","


def _parse_function_rest(p: Parser, name: InterpolableIdent, start: TextSize) -> Function | Url:
    p.expect(TokenKind.LPAREN, "`(`")
    args = parse_component_values(p)
    p.expect(TokenKind.RPAREN, "`)`")
    span = p.span_from(start)
    if isinstance(name, Ident) and name.name.lower() == "url" and len(args) == 1 and isinstance(args[0], Str):
        return Url(value=args[0], span=span)
    return Function(name=name, args=args, span=span)


def _dimension(p: Parser, token: Token) -> Dimension:
    text = p.text(token)
    match = _NUMBER_PREFIX.match(text)
    split = match.end() if match is not None else 0
    return Dimension(
        value=Number(raw=text[:split], span=token.range),
        unit=Ident(name=text[split:], span=token.range),
        span=token.range,
    )


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


def parse_declaration(p: Parser) -> Declaration:
    """`name: values [!important]`; the terminator is left for the caller."""
    start = p.current_range.start
    name: InterpolableIdent | DashedIdent | SassVariable
    if p.at(TokenKind.DOLLAR_VARIABLE):
        token = p.bump()
        name = SassVariable(name=p.text(token)[1:], span=token.range)
    elif at_dashed_ident(p) and not (p.nth(1) == TokenKind.INTERPOLATION and p.nth_is_adjacent(1)):
        name = parse_dashed_ident(p)
    else:
        name = parse_interpolable_ident(p)
    p.expect(TokenKind.COLON, "`:`")
    values = parse_component_values(p)
    important = False
    if p.eat(TokenKind.BANG):
        if not p.at_ident("important"):
            raise p.unexpected()
        p.bump()
        important = True
    return Declaration(name=name, values=values, important=important, span=p.span_from(start))


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def parse_selector_list(p: Parser) -> SelectorList:
    """Comma-separated selectors up to the `{` that opens the rule's block."""
    start = p.current_range.start
    selectors = [parse_selector(p)]
    while p.eat(TokenKind.COMMA):
        selectors.append(parse_selector(p))
    return SelectorList(selectors=tuple(selectors), span=p.span_from(start))


def parse_selector(p: Parser, *, closing: TokenKind | None = None) -> Selector:
    """One complex selector kept as text; runs of whitespace collapse to one space."""
    start = p.current_range.start
    parts: list[str] = []
    depth = 0
    while not p.at(TokenKind.EOF):
        if depth == 0 and p.at_set({TokenKind.COMMA, TokenKind.LBRACE, TokenKind.SEMICOLON, TokenKind.RBRACE}):
            break
        if depth == 0 and closing is not None and p.at(closing):
            break
        if p.at_set(_NESTING_OPEN):
            depth += 1
        elif p.at_set(_NESTING_CLOSE):
            if depth == 0:
                raise p.unexpected()
            depth -= 1
        if parts and p.has_preceding_trivia:
            parts.append(" ")
        parts.append(p.text(p.bump()))
    if not parts:
        raise p.failure(PARSER_EXPECTED_VALUE, "Expected a selector")
    return Selector(raw="".join(parts), span=p.span_from(start))


__all__ = [
    "IDENT_START",
    "VALUE_START",
    "at_dashed_ident",
    "parse_component_value",
    "parse_component_values",
    "parse_dashed_ident",
    "parse_declaration",
    "parse_ident",
    "parse_interpolable_ident",
    "parse_selector",
    "parse_selector_list",
    "parse_str",
]
