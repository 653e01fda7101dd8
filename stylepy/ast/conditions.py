"""Media, container and supports query conditions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from stylepy.ast.model import ComponentValue, Declaration, Ident, Selector, span_field
from stylepy.text import TextRange

type Comparison = Literal["<", "<=", ">", ">=", "="]


@dataclass(frozen=True, slots=True)
class MediaFeaturePlain:
    """`(name: value)`"""

    name: Ident
    value: ComponentValue
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaFeatureBoolean:
    """`(name)`"""

    name: Ident
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaFeatureRange:
    """`(width >= 600px)` or `(600px <= width)`"""

    left: ComponentValue
    comparison: Comparison
    right: ComponentValue
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaFeatureRangeInterval:
    """`(400px <= width < 700px)`"""

    left: ComponentValue
    left_comparison: Comparison
    name: Ident
    right_comparison: Comparison
    right: ComponentValue
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaConditionInParens:
    condition: MediaCondition
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaNot:
    condition: MediaInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaAnd:
    condition: MediaInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaOr:
    condition: MediaInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaCondition:
    """Leading `not`/in-parens term followed by `and`/`or` terms, in source order."""

    conditions: tuple[MediaConditionKind, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaQueryWithType:
    """`[not | only] media_type [and condition]`"""

    modifier: Ident | None
    media_type: Ident
    condition: MediaCondition | None = None
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class MediaQueryList:
    queries: tuple[MediaQuery, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsDecl:
    """`(property: value)`"""

    declaration: Declaration
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsSelector:
    """`selector(...)`"""

    selector: Selector
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsConditionInParens:
    condition: SupportsCondition
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsNot:
    condition: SupportsInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsAnd:
    condition: SupportsInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsOr:
    condition: SupportsInParens
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SupportsCondition:
    conditions: tuple[SupportsConditionKind, ...]
    span: TextRange = span_field()


type MediaFeature = MediaFeaturePlain | MediaFeatureBoolean | MediaFeatureRange | MediaFeatureRangeInterval
type MediaInParens = MediaFeature | MediaConditionInParens
type MediaConditionKind = MediaInParens | MediaNot | MediaAnd | MediaOr
type MediaQuery = MediaQueryWithType | MediaCondition
type SupportsInParens = SupportsDecl | SupportsSelector | SupportsConditionInParens
type SupportsConditionKind = SupportsInParens | SupportsNot | SupportsAnd | SupportsOr


__all__ = [
    "Comparison",
    "MediaAnd",
    "MediaCondition",
    "MediaConditionInParens",
    "MediaConditionKind",
    "MediaFeature",
    "MediaFeatureBoolean",
    "MediaFeaturePlain",
    "MediaFeatureRange",
    "MediaFeatureRangeInterval",
    "MediaInParens",
    "MediaNot",
    "MediaOr",
    "MediaQuery",
    "MediaQueryList",
    "MediaQueryWithType",
    "SupportsAnd",
    "SupportsCondition",
    "SupportsConditionInParens",
    "SupportsConditionKind",
    "SupportsDecl",
    "SupportsInParens",
    "SupportsNot",
    "SupportsOr",
    "SupportsSelector",
]
