"""High-level parse entrypoint for CSS, SCSS and Less source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylepy.diagnostics import collect_diagnostics
from stylepy.lexer import Lexer, TokenKind
from stylepy.parser.grammar import parse_source_file
from stylepy.parser.parsed import ParsedStylesheet
from stylepy.parser.parser import Parser

if TYPE_CHECKING:
    from stylepy.pipeline import CssParseResult


def parse_stylesheet(text: str) -> ParsedStylesheet:
    lexer = Lexer(text)
    tokens = lexer.lex()
    parser = Parser(text, tokens)

    root = parse_source_file(parser)
    diagnostics = collect_diagnostics(lexer.diagnostics, parser.diagnostics)

    return ParsedStylesheet(
        root=root,
        diagnostics=diagnostics,
        has_comments=any(token.kind == TokenKind.COMMENT for token in tokens),
    )


def parse_result(text: str) -> CssParseResult:
    from stylepy.pipeline import CssParseResult

    return CssParseResult(source_text=text, parsed=parse_stylesheet(text))
