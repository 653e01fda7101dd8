"""AST data model for component values, declarations and selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stylepy.text import EMPTY_RANGE, TextRange


def span_field() -> Any:
    """Source span field that never takes part in node equality."""
    return field(default=EMPTY_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Ident:
    """Identifier preserved exactly as written (casing and escapes included)."""

    name: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Interpolation:
    """Sass interpolation `#{expr}`; the expression is kept as raw text."""

    expr: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class InterpolatedIdent:
    """Identifier assembled from literal runs and interpolations, e.g. `icon-#{$name}`."""

    elements: tuple[str | Interpolation, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class DashedIdent:
    """Author-defined name such as `--brand`; `name` excludes the leading dashes."""

    name: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Str:
    """Quoted string; `raw` keeps the quotes and escapes as written."""

    raw: str
    span: TextRange = span_field()

    @property
    def value(self) -> str:
        return self.raw[1:-1]


@dataclass(frozen=True, slots=True)
class Number:
    raw: str
    span: TextRange = span_field()

    @property
    def value(self) -> float:
        return float(self.raw)


@dataclass(frozen=True, slots=True)
class Percentage:
    value: Number
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Dimension:
    value: Number
    unit: Ident
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Ratio:
    numerator: Number
    denominator: Number
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class UrlRaw:
    """Unquoted `url(...)` argument."""

    raw: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Url:
    value: UrlRaw | Str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Function:
    name: InterpolableIdent
    args: tuple[ComponentValue, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Delimiter:
    """Separator inside a value list: `,`, `/`, `+`, `-`, `*` or `=`.

    `unary` marks a `+` or `-` written flush against the value after it
    (`0 -$gap`), which Sass reads as a sign rather than an operator.
    """

    kind: str
    unary: bool = False
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class HexColor:
    value: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SassVariable:
    name: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class LessVariable:
    name: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class LessEscapedStr:
    """Less escaped string `~"..."`."""

    value: Str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Declaration:
    name: InterpolableIdent | DashedIdent | SassVariable
    values: tuple[ComponentValue, ...]
    important: bool = False
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Selector:
    """Complex selector kept as whitespace-normalized source text."""

    raw: str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SelectorList:
    selectors: tuple[Selector, ...]
    span: TextRange = span_field()


type InterpolableIdent = Ident | InterpolatedIdent
type ComponentValue = (
    Ident
    | InterpolatedIdent
    | DashedIdent
    | Str
    | Number
    | Percentage
    | Dimension
    | Ratio
    | Url
    | Function
    | Delimiter
    | HexColor
    | SassVariable
    | LessVariable
    | LessEscapedStr
)


__all__ = [
    "ComponentValue",
    "DashedIdent",
    "Declaration",
    "Delimiter",
    "Dimension",
    "Function",
    "HexColor",
    "Ident",
    "InterpolableIdent",
    "InterpolatedIdent",
    "Interpolation",
    "LessEscapedStr",
    "LessVariable",
    "Number",
    "Percentage",
    "Ratio",
    "SassVariable",
    "Selector",
    "SelectorList",
    "Str",
    "Url",
    "UrlRaw",
    "span_field",
]
