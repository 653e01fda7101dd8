"""Property tests: printed stylesheets parse back to the tree they were printed from.

For generated trees and option sets this asserts:
1) the printed text parses without diagnostics,
2) the parsed tree equals the input with keyframe keywords lowercased, and
3) formatting the printed text again is a no-op.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings

from stylepy.ast import Stylesheet
from stylepy.format import FormatOptions, render_stylesheet, run_format
from stylepy.parser import parse_stylesheet
from tests.strategies_stylepy import normalize_keyframe_keywords, s_format_options, s_stylesheet


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=100,
)
@given(stylesheet=s_stylesheet(), options=s_format_options())
def test_printed_stylesheet_parses_back(stylesheet: Stylesheet, options: FormatOptions) -> None:
    printed = render_stylesheet(stylesheet, options)

    parsed = parse_stylesheet(printed)

    assert parsed.diagnostics == []
    assert parsed.root == normalize_keyframe_keywords(stylesheet)


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=50,
)
@given(stylesheet=s_stylesheet(), options=s_format_options())
def test_formatting_printed_output_is_stable(stylesheet: Stylesheet, options: FormatOptions) -> None:
    printed = render_stylesheet(stylesheet, options)

    result = run_format(printed, options)

    assert result.diagnostics == []
    assert result.formatted_text == printed
    assert not result.changed


def test_printed_lines_have_no_trailing_spaces() -> None:
    source = "@media screen and (min-width: 100px), print, (hover) {\n  a: b;\n}\n"
    for width in (10, 40, 80):
        printed = run_format(source, FormatOptions(print_width=width)).formatted_text
        assert all(line == line.rstrip(" ") for line in printed.splitlines())
