"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from stylepy.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENT = 20  # foo, -webkit-box, --custom
    STRING = 21  # "..." or '...'
    NUMBER = 22  # 1, -1.5, .5
    PERCENTAGE = 23  # 50%
    DIMENSION = 24  # 10px
    URL = 25  # url(unquoted)
    HASH = 26  # #fff
    AT_KEYWORD = 27  # @media
    DOLLAR_VARIABLE = 28  # $var
    INTERPOLATION = 29  # #{...}

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 40  # :
    SEMICOLON = 41  # ;
    COMMA = 42  # ,
    DOT = 43  # .
    SLASH = 44  # /

    PLUS = 50  # +
    MINUS = 51  # -
    STAR = 52  # *
    GREATER_THAN = 53  # >
    LESS_THAN = 54  # <
    GREATER_THAN_OR_EQUAL = 55  # >=
    LESS_THAN_OR_EQUAL = 56  # <=
    EQUAL = 57  # =
    TILDE = 58  # ~
    BANG = 59  # !
    AMP = 60  # &
    PIPE = 61  # |
    DELIM = 62  # any other single code point

    LBRACE = 70  # {
    RBRACE = 71  # }
    LBRACKET = 72  # [
    RBRACKET = 73  # ]
    LPAREN = 74  # (
    RPAREN = 75  # )

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
        )


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    PRECEDING_TRIVIA = 1 << 1  # any whitespace or comment before
    HAS_ESCAPE = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def has_preceding_trivia(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_TRIVIA)


EOF_TOKEN: Final[Token] = Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(0)))
