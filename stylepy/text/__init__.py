"""Source text positions."""

from stylepy.text.text import EMPTY_RANGE, TextRange, TextSize, slice_text_range

__all__ = [
    "EMPTY_RANGE",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
