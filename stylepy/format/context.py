"""Read-only context threaded through every formatter call."""

from __future__ import annotations

from dataclasses import dataclass, field

from stylepy.format.options import BlockSelectorLineBreak, FormatOptions


@dataclass(frozen=True, slots=True)
class FormatContext:
    options: FormatOptions = field(default_factory=FormatOptions)

    @property
    def indent_width(self) -> int:
        return self.options.indent_width

    @property
    def block_selector_linebreak(self) -> BlockSelectorLineBreak:
        return self.options.block_selector_linebreak


__all__ = ["FormatContext"]
