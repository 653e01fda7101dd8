"""Diagnostics."""

from stylepy.diagnostics.codes import (
    FORMAT_COMMENTS_UNSUPPORTED,
    FORMAT_INVARIANT_VIOLATION,
    FORMAT_UNSUPPORTED_CONSTRUCT,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_INTERPOLATION,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_INVALID_PRELUDE,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from stylepy.diagnostics.diagnostic import Diagnostic, Severity
from stylepy.diagnostics.report import collect_diagnostics, has_errors

__all__ = [
    "FORMAT_COMMENTS_UNSUPPORTED",
    "FORMAT_INVARIANT_VIOLATION",
    "FORMAT_UNSUPPORTED_CONSTRUCT",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_INTERPOLATION",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_INVALID_PRELUDE",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
]
