import pytest

from stylepy.text import EMPTY_RANGE, TextRange, TextSize, slice_text_range


def test_range_slices_source_by_offsets() -> None:
    source = "@layer base;"
    span = TextRange.new(TextSize.from_int(7), TextSize.from_int(11))
    assert slice_text_range(source, span) == "base"
    assert span.as_tuple() == (7, 11)


def test_empty_range_at_end_of_source() -> None:
    source = "a {}"
    span = TextRange.empty(TextSize.of(source))
    assert span.start == span.end == TextSize(4)
    assert slice_text_range(source, span) == ""
    assert slice_text_range(source, EMPTY_RANGE) == ""


def test_range_rejects_reversed_offsets() -> None:
    with pytest.raises(ValueError, match="start > end"):
        TextRange.new(TextSize.from_int(3), TextSize.from_int(1))


def test_size_rejects_negative_offsets() -> None:
    with pytest.raises(ValueError, match="negative"):
        TextSize.from_int(-1)
