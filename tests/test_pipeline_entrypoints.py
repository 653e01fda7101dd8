import logging

import pytest

from stylepy.ast import AtRule, Ident, PreludeKeyframes
from stylepy.diagnostics import Diagnostic
from stylepy.doc import render
from stylepy.format import BlockSelectorLineBreak, FormatOptions, LineBreak
from stylepy.pipeline import (
    CssParseResult,
    format_at_rule,
    format_prelude,
    parse_result,
    run_format,
)
from tests._shared_cases import FORMAT_CASES, StyleCase, case_id


def diagnostic_codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


@pytest.mark.parametrize("case", FORMAT_CASES, ids=case_id)
def test_run_format_matches_expected_output(case: StyleCase) -> None:
    result = run_format(case.source)
    assert result.diagnostics == []
    assert result.formatted_text == case.expected
    assert result.changed == (case.source != case.expected)


@pytest.mark.parametrize("case", FORMAT_CASES, ids=case_id)
def test_run_format_is_idempotent(case: StyleCase) -> None:
    result = run_format(case.expected)
    assert result.formatted_text == case.expected
    assert not result.changed


def test_run_format_reuses_provided_parse() -> None:
    source = "@layer a,b;"
    parse = parse_result(source)
    assert isinstance(parse, CssParseResult)

    result = run_format(source, parse=parse)

    assert result.parse is parse
    assert result.formatted_text == "@layer a, b;\n"


def test_run_format_rejects_parse_of_other_text() -> None:
    parse = parse_result("@layer a;")
    with pytest.raises(ValueError, match="different source text"):
        run_format("@layer b;", parse=parse)


def test_unsupported_at_rule_leaves_source_unchanged(caplog: pytest.LogCaptureFixture) -> None:
    source = "@include button;\na{color:red}"
    with caplog.at_level(logging.WARNING, logger="stylepy.format.runner"):
        result = run_format(source)
    assert result.formatted_text == source
    assert not result.changed
    assert diagnostic_codes(result.diagnostics) == ["FORMAT_UNSUPPORTED_CONSTRUCT"]
    assert "format pass abandoned" in caplog.text


def test_parse_errors_leave_source_unchanged() -> None:
    source = "a { color: red"
    result = run_format(source)
    assert result.formatted_text == source
    assert not result.changed
    assert result.parse.has_errors
    assert diagnostic_codes(result.diagnostics) == ["PARSER_EXPECTED_TOKEN"]


@pytest.mark.parametrize(
    "source",
    ["/* brand */\n@layer   base;", "a{color:red // accent\n}"],
)
def test_sources_with_comments_are_left_unchanged(source: str) -> None:
    result = run_format(source)
    assert result.formatted_text == source
    assert not result.changed
    assert diagnostic_codes(result.diagnostics) == ["FORMAT_COMMENTS_UNSUPPORTED"]
    assert result.diagnostics[0].severity == "warning"


def test_options_flow_through_run_format() -> None:
    options = FormatOptions(
        indent_width=4,
        line_break=LineBreak.CRLF,
        block_selector_linebreak=BlockSelectorLineBreak.ALWAYS,
    )
    result = run_format("@page :first,:left{margin:0}", options)
    assert result.formatted_text == "@page :first,\r\n    :left {\r\n    margin: 0;\r\n}\r\n"


def test_narrow_width_breaks_import_prelude() -> None:
    source = '@import url("theme.css") layer(theme) supports(display: grid) screen;'
    result = run_format(source, FormatOptions(print_width=40))
    assert result.formatted_text == (
        '@import url("theme.css")\n  layer(theme)\n  supports(display: grid)\n  screen;\n'
    )


def test_at_rule_and_prelude_entrypoints() -> None:
    rule = AtRule("keyframes", PreludeKeyframes(Ident("fade")), None)
    assert render(format_at_rule(rule)) == "@keyframes fade"
    assert render(format_prelude(PreludeKeyframes(Ident("fade")), FormatOptions())) == "fade"
