"""Lexer."""

from stylepy.diagnostics import Diagnostic
from stylepy.diagnostics.codes import (
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_INTERPOLATION,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from stylepy.lexer.tokens import Token, TokenFlags, TokenKind
from stylepy.text import TextRange, TextSize, slice_text_range

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "/": TokenKind.SLASH,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    ">": TokenKind.GREATER_THAN,
    "<": TokenKind.LESS_THAN,
    "=": TokenKind.EQUAL,
    "~": TokenKind.TILDE,
    "!": TokenKind.BANG,
    "&": TokenKind.AMP,
    "|": TokenKind.PIPE,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = False
        self._after_trivia = False
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE
        self._eof_emitted = False
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._eof_emitted = True
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._trivia_flags())

        kind = self._lex_token()
        self._current_kind = kind

        if kind.is_trivia:
            self._after_trivia = True
            return Token(kind, self.current_range, self._current_flags)

        self._current_flags |= self._trivia_flags()
        self._after_newline = False
        self._after_trivia = False
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _trivia_flags(self) -> TokenFlags:
        flags = TokenFlags.NONE
        if self._after_newline:
            flags |= TokenFlags.PRECEDING_LINE_BREAK
        if self._after_trivia:
            flags |= TokenFlags.PRECEDING_TRIVIA
        return flags

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in "\r\n\t\f ":
            return self._consume_newline_or_whitespaces()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()
        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == '"' or ch == "'":
            return self._lex_string(ch)

        if self._at_number_start():
            return self._lex_numeric()

        if self._at_ident_start():
            return self._lex_ident_like()

        if ch == "@":
            self._advance(1)
            if self._at_ident_start():
                self._consume_ident_chars()
                return TokenKind.AT_KEYWORD
            return TokenKind.DELIM

        if ch == "#":
            if self._peek_char() == "{":
                return self._lex_interpolation()
            self._advance(1)
            if _is_ident_char(self._current_char()):
                self._consume_ident_chars()
                return TokenKind.HASH
            return TokenKind.DELIM

        if ch == "$":
            self._advance(1)
            if self._at_ident_start():
                self._consume_ident_chars()
                return TokenKind.DOLLAR_VARIABLE
            return TokenKind.DELIM

        # Two-character operators
        if ch == ">" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.GREATER_THAN_OR_EQUAL
        if ch == "<" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.LESS_THAN_OR_EQUAL

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        self._advance(1)
        return kind if kind is not None else TokenKind.DELIM

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.COMMENT
            self._advance(1)
        self._report(LEXER_UNTERMINATED_COMMENT)
        return TokenKind.COMMENT

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_string(self, quote: str) -> TokenKind:
        self._advance(1)
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                closed = True
                break
            if ch == "\\":
                self._current_flags |= TokenFlags.HAS_ESCAPE
                self._advance(1)
                if not self.is_eof:
                    self._advance(1)
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

        if not closed:
            self._report(LEXER_UNTERMINATED_STRING)

        return TokenKind.STRING

    def _lex_numeric(self) -> TokenKind:
        if self._current_char() in "+-":
            self._advance(1)
        while self._current_char().isdigit():
            self._advance(1)
        if self._current_char() == "." and self._peek_char().isdigit():
            self._advance(1)
            while self._current_char().isdigit():
                self._advance(1)
        if self._current_char() in "eE":
            sign = self._peek_char()
            if sign.isdigit():
                self._advance(1)
            elif sign in "+-" and self._peek_char(2).isdigit():
                self._advance(2)
            while self._current_char().isdigit():
                self._advance(1)

        if self._current_char() == "%":
            self._advance(1)
            return TokenKind.PERCENTAGE
        if self._at_ident_start():
            self._consume_ident_chars()
            return TokenKind.DIMENSION
        return TokenKind.NUMBER

    def _lex_ident_like(self) -> TokenKind:
        start = self._position
        self._consume_ident_chars()
        name = self._source[start : self._position]
        if name.lower() == "url" and self._current_char() == "(" and not self._quoted_argument_follows():
            return self._lex_url_rest()
        return TokenKind.IDENT

    def _lex_url_rest(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == ")":
                self._advance(1)
                return TokenKind.URL
            if ch == "\\":
                self._current_flags |= TokenFlags.HAS_ESCAPE
                self._advance(2)
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        self._report(LEXER_UNTERMINATED_STRING, "Unterminated `url(`.")
        return TokenKind.URL

    def _lex_interpolation(self) -> TokenKind:
        self._advance(2)
        depth = 1
        while not self.is_eof:
            ch = self._current_char()
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    self._advance(1)
                    return TokenKind.INTERPOLATION
            self._advance(1)
        self._report(LEXER_UNTERMINATED_INTERPOLATION)
        return TokenKind.INTERPOLATION

    def _quoted_argument_follows(self) -> bool:
        index = self._position + 1
        while index < len(self._source) and self._source[index] in " \t\r\n\f":
            index += 1
        return index < len(self._source) and self._source[index] in "\"'"

    def _at_number_start(self) -> bool:
        ch = self._current_char()
        if ch.isdigit():
            return True
        if ch == ".":
            return self._peek_char().isdigit()
        if ch in "+-":
            following = self._peek_char()
            return following.isdigit() or (following == "." and self._peek_char(2).isdigit())
        return False

    def _at_ident_start(self) -> bool:
        ch = self._current_char()
        if _is_name_start(ch) or ch == "\\":
            return True
        if ch == "-":
            following = self._peek_char()
            return _is_name_start(following) or following == "-" or following == "\\"
        return False

    def _consume_ident_chars(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\\":
                self._current_flags |= TokenFlags.HAS_ESCAPE
                self._advance(2)
                continue
            if _is_ident_char(ch):
                self._advance(1)
                continue
            break

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            self._after_newline = True
            return TokenKind.NEWLINE
        while not self.is_eof and self._current_char() in " \t\f":
            self._advance(1)
        return TokenKind.WHITESPACE

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _report(self, spec: DiagnosticSpec, message: str | None = None) -> None:
        self._diagnostics.append(
            Diagnostic.from_spec(
                spec,
                TextRange.new(self._current_start, TextSize.from_int(self._position)),
                message,
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))


def _is_name_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_" or (ch != "\0" and ord(ch) > 0x7F)


def _is_ident_char(ch: str) -> bool:
    return _is_name_start(ch) or ch.isdigit() or ch == "-"


def token_text(
    source: str,
    token: Token,
    null_char_on_eof: bool = False,
) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<22} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
