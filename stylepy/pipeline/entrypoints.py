"""Entrypoints that format with one parse lifecycle."""

from __future__ import annotations

from stylepy.ast import AtRule, AtRulePrelude
from stylepy.doc import Doc
from stylepy.format import FormatOptions
from stylepy.format import format_at_rule as _format_at_rule
from stylepy.format import format_prelude as _format_prelude
from stylepy.format import run_format as _run_format
from stylepy.parser import parse_result as _parse_result
from stylepy.pipeline.result import CssParseResult
from stylepy.pipeline.results import FormatRunResult


def parse_result(text: str) -> CssParseResult:
    return _parse_result(text)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: CssParseResult | None = None,
) -> FormatRunResult:
    """Format `text`, reusing `parse` when the caller already parsed it."""
    return _run_format(text, options, parse=parse)


def format_at_rule(at_rule: AtRule, options: FormatOptions | None = None) -> Doc:
    return _format_at_rule(at_rule, options)


def format_prelude(prelude: AtRulePrelude, options: FormatOptions | None = None) -> Doc:
    return _format_prelude(prelude, options)
