"""Parser output carrier."""

from __future__ import annotations

from dataclasses import dataclass

from stylepy.ast import Stylesheet
from stylepy.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class ParsedStylesheet:
    """Typed tree plus the lexer and parser diagnostics, in source order."""

    root: Stylesheet
    diagnostics: list[Diagnostic]
    has_comments: bool = False
