"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote it was opened with.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_INTERPOLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_INTERPOLATION",
    message="Unterminated interpolation.",
    hint="Close the interpolation with `}`.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_INVALID_PRELUDE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_PRELUDE",
    message="Invalid at-rule prelude",
    severity="error",
    category="parser",
)

FORMAT_UNSUPPORTED_CONSTRUCT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_UNSUPPORTED_CONSTRUCT",
    message="Unsupported construct; the source was left unformatted.",
    hint="The formatter does not model this at-rule yet.",
    severity="error",
    category="format",
)

FORMAT_INVARIANT_VIOLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_INVARIANT_VIOLATION",
    message="Internal error: syntax tree violates its data model.",
    hint="This points at a parser defect; please report it with the input.",
    severity="error",
    category="format",
)

FORMAT_COMMENTS_UNSUPPORTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_COMMENTS_UNSUPPORTED",
    message="Sources with comments are left unformatted; the formatter cannot preserve them.",
    severity="warning",
    category="format",
)
