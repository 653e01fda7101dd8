"""Formatter configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
import re


class BlockSelectorLineBreak(StrEnum):
    """Line-break policy between the items of selector-like lists."""

    ALWAYS = "always"
    CONSISTENT = "consistent"
    WRAP = "wrap"


class LineBreak(StrEnum):
    LF = "lf"
    CRLF = "crlf"

    @property
    def text(self) -> str:
        return "\r\n" if self == LineBreak.CRLF else "\n"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Per-invocation formatting options; never mutated during a run."""

    print_width: int = 80
    indent_width: int = 2
    line_break: LineBreak = LineBreak.LF
    block_selector_linebreak: BlockSelectorLineBreak = BlockSelectorLineBreak.CONSISTENT

    def __post_init__(self) -> None:
        if self.print_width < 1:
            raise ValueError("print_width must be >= 1")
        if self.indent_width < 0:
            raise ValueError("indent_width must be >= 0")

    @staticmethod
    def from_mapping(values: Mapping[str, object]) -> "FormatOptions":
        """Build options from loaded configuration; keys may be snake_case or camelCase."""
        known = {f.name for f in fields(FormatOptions)}
        resolved: dict[str, object] = {}
        for key, value in values.items():
            name = _snake_case(key)
            if name not in known:
                raise ValueError(f"Unknown format option: {key!r}")
            resolved[name] = _coerce_option(name, value)
        return FormatOptions(**resolved)  # type: ignore[arg-type]


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).replace("-", "_").lower()


def _coerce_option(name: str, value: object) -> object:
    if name in {"print_width", "indent_width"}:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Format option {name!r} must be an integer, got {value!r}")
        return value
    if name == "line_break":
        return _coerce_enum(LineBreak, name, value)
    if name == "block_selector_linebreak":
        return _coerce_enum(BlockSelectorLineBreak, name, value)
    return value


def _coerce_enum[E: StrEnum](enum_type: type[E], name: str, value: object) -> E:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type(value.lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_type)
    raise ValueError(f"Format option {name!r} must be one of: {allowed}; got {value!r}")


__all__ = ["BlockSelectorLineBreak", "FormatOptions", "LineBreak"]
