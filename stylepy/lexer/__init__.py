"""Lexer."""

from stylepy.lexer.lexer import Lexer, dump_tokens, token_text
from stylepy.lexer.tokens import EOF_TOKEN, Token, TokenFlags, TokenKind

__all__ = [
    "EOF_TOKEN",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
