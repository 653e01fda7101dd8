"""Format runner over a shared stylesheet parse result."""

from __future__ import annotations

import logging

from stylepy.ast import AtRule, AtRulePrelude, Stylesheet
from stylepy.diagnostics import FORMAT_COMMENTS_UNSUPPORTED, Diagnostic
from stylepy.doc import Doc, render
from stylepy.format.at_rule import format_at_rule as _format_at_rule
from stylepy.format.at_rule import format_prelude as _format_prelude
from stylepy.format.context import FormatContext
from stylepy.format.errors import FormatError
from stylepy.format.gen import doc_gen
from stylepy.format.options import FormatOptions
from stylepy.parser import parse_result
from stylepy.pipeline.result import CssParseResult
from stylepy.pipeline.results import FormatRunResult
from stylepy.text import EMPTY_RANGE

logger = logging.getLogger(__name__)


def format_stylesheet(stylesheet: Stylesheet, options: FormatOptions | None = None) -> Doc:
    return doc_gen(stylesheet, _context(options))


def format_at_rule(at_rule: AtRule, options: FormatOptions | None = None) -> Doc:
    return _format_at_rule(at_rule, _context(options))


def format_prelude(prelude: AtRulePrelude, options: FormatOptions | None = None) -> Doc:
    return _format_prelude(prelude, _context(options))


def render_stylesheet(stylesheet: Stylesheet, options: FormatOptions | None = None) -> str:
    """Format and print `stylesheet`; non-empty output ends with one line break."""
    resolved = options if options is not None else FormatOptions()
    line_break = resolved.line_break.text
    printed = render(format_stylesheet(stylesheet, resolved), print_width=resolved.print_width, line_break=line_break)
    return f"{printed}{line_break}" if printed else printed


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parse: CssParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, parse=parse)
    diagnostics = list(resolved_parse.diagnostics)

    if resolved_parse.has_errors:
        logger.debug("skipping format: source has %d parse diagnostics", len(diagnostics))
        return _unchanged(resolved_parse, diagnostics)

    if resolved_parse.has_comments:
        logger.debug("skipping format: source has comments")
        diagnostics.append(Diagnostic.from_spec(FORMAT_COMMENTS_UNSUPPORTED, EMPTY_RANGE))
        return _unchanged(resolved_parse, diagnostics)

    try:
        formatted_text = render_stylesheet(resolved_parse.root, options)
    except FormatError as error:
        logger.warning("format pass abandoned: %s", error)
        diagnostics.append(error.diagnostic)
        return _unchanged(resolved_parse, diagnostics)

    changed = formatted_text != resolved_parse.source_text
    logger.debug("formatted %d characters (changed=%s)", len(resolved_parse.source_text), changed)
    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=changed,
    )


def _context(options: FormatOptions | None) -> FormatContext:
    return FormatContext(options) if options is not None else FormatContext()


def _unchanged(parse: CssParseResult, diagnostics: list[Diagnostic]) -> FormatRunResult:
    return FormatRunResult(
        parse=parse,
        formatted_text=parse.source_text,
        diagnostics=diagnostics,
        changed=False,
    )


def _resolve_parse(text: str, *, parse: CssParseResult | None) -> CssParseResult:
    if parse is not None:
        if parse.source_text != text:
            raise ValueError("Provided parse result was built from different source text")
        return parse
    return parse_result(text)


__all__ = ["format_at_rule", "format_prelude", "format_stylesheet", "render_stylesheet", "run_format"]
