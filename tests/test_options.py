import pytest

from stylepy.format import BlockSelectorLineBreak, FormatContext, FormatOptions, LineBreak


def test_defaults() -> None:
    options = FormatOptions()
    assert options.print_width == 80
    assert options.indent_width == 2
    assert options.line_break is LineBreak.LF
    assert options.block_selector_linebreak is BlockSelectorLineBreak.CONSISTENT

    ctx = FormatContext()
    assert ctx.indent_width == 2
    assert ctx.block_selector_linebreak is BlockSelectorLineBreak.CONSISTENT


def test_from_mapping_accepts_camel_snake_and_kebab_keys() -> None:
    options = FormatOptions.from_mapping(
        {
            "printWidth": 100,
            "indent-width": 4,
            "line_break": "CRLF",
            "blockSelectorLinebreak": "always",
        }
    )
    assert options == FormatOptions(
        print_width=100,
        indent_width=4,
        line_break=LineBreak.CRLF,
        block_selector_linebreak=BlockSelectorLineBreak.ALWAYS,
    )


def test_from_mapping_passes_enum_members_through() -> None:
    options = FormatOptions.from_mapping({"blockSelectorLinebreak": BlockSelectorLineBreak.WRAP})
    assert options.block_selector_linebreak is BlockSelectorLineBreak.WRAP


def test_line_break_text() -> None:
    assert LineBreak.LF.text == "\n"
    assert LineBreak.CRLF.text == "\r\n"


@pytest.mark.parametrize(
    ("values", "message"),
    [
        ({"tabWidth": 2}, "Unknown format option"),
        ({"printWidth": "80"}, "must be an integer"),
        ({"printWidth": True}, "must be an integer"),
        ({"blockSelectorLinebreak": "sometimes"}, "must be one of"),
        ({"lineBreak": 1}, "must be one of"),
        ({"printWidth": 0}, "print_width must be >= 1"),
        ({"indentWidth": -1}, "indent_width must be >= 0"),
    ],
    ids=[
        "unknown-key",
        "string-width",
        "bool-width",
        "bad-policy",
        "non-string-line-break",
        "zero-width",
        "negative-indent",
    ],
)
def test_from_mapping_rejects_invalid_values(values: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        FormatOptions.from_mapping(values)
