from stylepy.ast import AtRule, Stylesheet
from stylepy.parser import parse_result, parse_stylesheet


def test_parse_result_exposes_root_diagnostics_and_error_state() -> None:
    result = parse_result("@layer base;\n")

    assert result.root is result.parsed.root
    assert isinstance(result.root, Stylesheet)
    assert isinstance(result.root.statements[0], AtRule)
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.has_comments is False


def test_parse_result_matches_parse_stylesheet_contract() -> None:
    source = "@charset utf-8;\n"

    result = parse_result(source)
    parsed = parse_stylesheet(source)

    assert result.source_text == source
    assert result.diagnostics == parsed.diagnostics
    assert result.root == parsed.root
    assert result.has_errors is True


def test_parse_result_flags_comment_only_source() -> None:
    result = parse_result("/* only a comment */")

    assert result.has_comments is True
    assert result.has_errors is False
    assert result.root == Stylesheet()


def test_parse_result_for_empty_source() -> None:
    result = parse_result("")

    assert result.root == Stylesheet()
    assert result.diagnostics == []
