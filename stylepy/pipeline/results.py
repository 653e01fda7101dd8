"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from stylepy.diagnostics import Diagnostic
from stylepy.pipeline.result import CssParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: CssParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
