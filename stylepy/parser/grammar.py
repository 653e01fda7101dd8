"""Statement-level grammar: stylesheets, blocks, rules and declarations."""

from __future__ import annotations

from typing import Final

from stylepy.ast import (
    AtRule,
    Block,
    KeyframeBlock,
    KeyframeSelector,
    Number,
    Percentage,
    QualifiedRule,
    Statement,
    Stylesheet,
)
from stylepy.diagnostics import PARSER_EXPECTED_VALUE
from stylepy.lexer import TokenKind
from stylepy.parser.parser import CssSyntaxError, Parser, ParserProgress
from stylepy.parser.prelude import parse_prelude, unprefixed_name
from stylepy.parser.values import (
    IDENT_START,
    parse_declaration,
    parse_interpolable_ident,
    parse_selector_list,
)

_STATEMENT_END: Final[frozenset[TokenKind]] = frozenset({TokenKind.SEMICOLON, TokenKind.RBRACE, TokenKind.EOF})


def parse_source_file(p: Parser) -> Stylesheet:
    start = p.current_range.start
    statements = parse_statement_list(p, nested=False)
    return Stylesheet(statements=tuple(statements), span=p.span_from(start))


def parse_statement_list(p: Parser, *, nested: bool, in_keyframes: bool = False) -> list[Statement]:
    """Statements until `}` (nested) or end of file; a bad statement is skipped, not fatal."""
    statements: list[Statement] = []
    progress = ParserProgress()
    while not p.at(TokenKind.EOF) and not (nested and p.at(TokenKind.RBRACE)):
        if p.eat(TokenKind.SEMICOLON):
            continue
        try:
            statements.append(parse_statement(p, in_keyframes=in_keyframes))
        except CssSyntaxError as error:
            p.error(error.diagnostic)
            _recover(p, nested=nested)
        progress.assert_progressing(p)
    return statements


def parse_statement(p: Parser, *, in_keyframes: bool = False) -> Statement:
    if p.at(TokenKind.AT_KEYWORD):
        return parse_at_rule(p)
    if in_keyframes:
        return parse_keyframe_block(p)
    if _declaration_ahead(p):
        declaration = parse_declaration(p)
        if not p.at_set(_STATEMENT_END):
            raise p.unexpected()
        return declaration
    return parse_qualified_rule(p)


def parse_at_rule(p: Parser) -> AtRule:
    start = p.current_range.start
    keyword = p.expect(TokenKind.AT_KEYWORD, "an at-rule")
    name = p.text(keyword)[1:]
    prelude = parse_prelude(p, name)
    block: Block | None = None
    if p.at(TokenKind.LBRACE):
        block = parse_block(p, in_keyframes=unprefixed_name(name) == "keyframes")
    elif not p.at_set(_STATEMENT_END):
        raise p.unexpected()
    return AtRule(name=name, prelude=prelude, block=block, span=p.span_from(start))


def parse_qualified_rule(p: Parser) -> QualifiedRule:
    start = p.current_range.start
    selector = parse_selector_list(p)
    block = parse_block(p)
    return QualifiedRule(selector=selector, block=block, span=p.span_from(start))


def parse_keyframe_block(p: Parser) -> KeyframeBlock:
    start = p.current_range.start
    selectors = [_parse_keyframe_selector(p)]
    while p.eat(TokenKind.COMMA):
        selectors.append(_parse_keyframe_selector(p))
    block = parse_block(p)
    return KeyframeBlock(selectors=tuple(selectors), block=block, span=p.span_from(start))


def _parse_keyframe_selector(p: Parser) -> KeyframeSelector:
    if p.at(TokenKind.PERCENTAGE):
        token = p.bump()
        return Percentage(value=Number(raw=p.text(token)[:-1], span=token.range), span=token.range)
    if p.at_set(IDENT_START):
        return parse_interpolable_ident(p)
    raise p.failure(PARSER_EXPECTED_VALUE, "Expected a keyframe selector such as `from`, `to` or `50%`")


def parse_block(p: Parser, *, in_keyframes: bool = False) -> Block:
    start = p.current_range.start
    p.expect(TokenKind.LBRACE, "`{`")
    statements = parse_statement_list(p, nested=True, in_keyframes=in_keyframes)
    p.expect(TokenKind.RBRACE, "`}`")
    return Block(statements=tuple(statements), span=p.span_from(start))


def _declaration_ahead(p: Parser) -> bool:
    """A `{` before the next `;` or `}` means a rule; anything else is a declaration."""
    n = 0
    depth = 0
    while True:
        kind = p.nth(n)
        if kind == TokenKind.EOF:
            return True
        if kind in (TokenKind.LPAREN, TokenKind.LBRACKET):
            depth += 1
        elif kind in (TokenKind.RPAREN, TokenKind.RBRACKET):
            depth = max(depth - 1, 0)
        elif depth == 0 and kind == TokenKind.LBRACE:
            return False
        elif depth == 0 and kind in (TokenKind.SEMICOLON, TokenKind.RBRACE):
            return True
        n += 1


def _recover(p: Parser, *, nested: bool) -> None:
    """Skip to just past the next top-level `;` or `{...}`, or up to the enclosing `}`."""
    depth = 0
    while not p.at(TokenKind.EOF):
        if p.at(TokenKind.LBRACE):
            depth += 1
        elif p.at(TokenKind.RBRACE):
            if depth == 0:
                if not nested:
                    p.bump()
                return
            depth -= 1
            if depth == 0:
                p.bump()
                return
        elif depth == 0 and p.at(TokenKind.SEMICOLON):
            p.bump()
            return
        p.bump()


__all__ = [
    "parse_at_rule",
    "parse_block",
    "parse_keyframe_block",
    "parse_qualified_rule",
    "parse_source_file",
    "parse_statement",
    "parse_statement_list",
]
