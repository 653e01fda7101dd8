"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylepy.pipeline.result import CssParseResult
from stylepy.pipeline.results import FormatRunResult

if TYPE_CHECKING:
    from stylepy.ast import AtRule, AtRulePrelude
    from stylepy.doc import Doc
    from stylepy.format import FormatOptions


def parse_result(text: str) -> CssParseResult:
    from stylepy.pipeline.entrypoints import parse_result as _parse_result

    return _parse_result(text)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: CssParseResult | None = None,
) -> FormatRunResult:
    from stylepy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, options, parse=parse)


def format_at_rule(at_rule: AtRule, options: FormatOptions | None = None) -> Doc:
    from stylepy.pipeline.entrypoints import format_at_rule as _format_at_rule

    return _format_at_rule(at_rule, options)


def format_prelude(prelude: AtRulePrelude, options: FormatOptions | None = None) -> Doc:
    from stylepy.pipeline.entrypoints import format_prelude as _format_prelude

    return _format_prelude(prelude, options)


__all__ = [
    "CssParseResult",
    "FormatRunResult",
    "format_at_rule",
    "format_prelude",
    "parse_result",
    "run_format",
]
