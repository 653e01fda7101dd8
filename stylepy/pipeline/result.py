"""Parse carrier shared by every tool entrypoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stylepy.diagnostics import has_errors
from stylepy.parser.parsed import ParsedStylesheet

if TYPE_CHECKING:
    from stylepy.ast import Stylesheet
    from stylepy.diagnostics import Diagnostic


@dataclass(slots=True)
class CssParseResult:
    """Stylesheet parse result for parse-once/consume-many workflows."""

    source_text: str
    parsed: ParsedStylesheet

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    @property
    def has_comments(self) -> bool:
        return self.parsed.has_comments

    @property
    def root(self) -> Stylesheet:
        return self.parsed.root
