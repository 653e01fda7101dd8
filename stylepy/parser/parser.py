"""Recursive-descent parser core over the non-trivia token stream."""

from __future__ import annotations

from dataclasses import dataclass

from stylepy.diagnostics import PARSER_EXPECTED_TOKEN, PARSER_UNEXPECTED_TOKEN, Diagnostic, DiagnosticSpec
from stylepy.lexer import Token, TokenKind, token_text
from stylepy.text import TextRange, TextSize


class CssSyntaxError(Exception):
    """Raised inside grammar functions; the statement loop records it and recovers."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: Parser) -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: Parser) -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Token cursor with one-token commits and fixed lookahead through `nth`."""

    def __init__(self, source: str, tokens: list[Token]) -> None:
        self._source = source
        self._tokens = [token for token in tokens if not token.kind.is_trivia]
        if not self._tokens or self._tokens[-1].kind != TokenKind.EOF:
            self._tokens.append(Token(TokenKind.EOF, TextRange.empty(TextSize.of(source))))
        self._position = 0
        self._last_end = TextSize.from_int(0)
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def current_token(self) -> Token:
        return self._tokens[self._position]

    @property
    def current(self) -> TokenKind:
        return self.current_token.kind

    @property
    def current_range(self) -> TextRange:
        return self.current_token.range

    @property
    def current_text(self) -> str:
        return token_text(self._source, self.current_token)

    @property
    def has_preceding_trivia(self) -> bool:
        return self.current_token.has_preceding_trivia()

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def at_ident(self, name: str) -> bool:
        """Current token is the identifier `name`, compared case-insensitively."""
        return self.current == TokenKind.IDENT and self.current_text.lower() == name

    def nth_token(self, n: int) -> Token:
        index = min(self._position + n, len(self._tokens) - 1)
        return self._tokens[index]

    def nth(self, n: int) -> TokenKind:
        return self.nth_token(n).kind

    def nth_text(self, n: int) -> str:
        return token_text(self._source, self.nth_token(n))

    def nth_is_adjacent(self, n: int) -> bool:
        """The n-th token follows the one before it with no trivia in between."""
        token = self.nth_token(n)
        return token.kind != TokenKind.EOF and not token.has_preceding_trivia()

    def text(self, token: Token) -> str:
        return token_text(self._source, token)

    def bump(self) -> Token:
        token = self.current_token
        if token.kind != TokenKind.EOF:
            self._position += 1
            self._last_end = token.range.end
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, expected: str) -> Token:
        if self.current == kind:
            return self.bump()
        raise self.failure(PARSER_EXPECTED_TOKEN, f"Expected {expected} but found {self._describe_current()}")

    def failure(self, spec: DiagnosticSpec, message: str | None = None) -> CssSyntaxError:
        """Build the error for the current token; callers raise it."""
        return CssSyntaxError(Diagnostic.from_spec(spec, self.current_range, message))

    def unexpected(self) -> CssSyntaxError:
        return self.failure(PARSER_UNEXPECTED_TOKEN, f"Unexpected {self._describe_current()}")

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def span_from(self, start: TextSize) -> TextRange:
        """Range from `start` to the end of the last consumed token."""
        end = self._last_end if self._last_end >= start else start
        return TextRange.new(start, end)

    def _describe_current(self) -> str:
        if self.current == TokenKind.EOF:
            return "end of file"
        return f"`{self.current_text}`"


__all__ = ["CssSyntaxError", "Parser", "ParserProgress"]
