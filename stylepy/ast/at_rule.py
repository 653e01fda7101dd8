"""AST data model for at-rules, their preludes, and the statements around them."""

from __future__ import annotations

from dataclasses import dataclass

from stylepy.ast.conditions import MediaCondition, MediaQueryList, SupportsCondition
from stylepy.ast.model import (
    ComponentValue,
    DashedIdent,
    Declaration,
    Function,
    Ident,
    InterpolableIdent,
    LessEscapedStr,
    LessVariable,
    Percentage,
    SelectorList,
    Str,
    Url,
    span_field,
)
from stylepy.text import TextRange

# ---------------------------------------------------------------------------
# Prelude payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DeviceCmyk:
    """The `device-cmyk` keyword of `@color-profile`."""

    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class ContainerPrelude:
    name: InterpolableIdent | None
    condition: MediaCondition
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class CustomMedia:
    name: Ident
    value: CustomMediaValue
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class DocumentPrelude:
    matchers: tuple[DocumentPreludeMatcher, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class UnquotedFontFamilyName:
    idents: tuple[InterpolableIdent, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class LayerName:
    idents: tuple[InterpolableIdent, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class LayerNames:
    names: tuple[LayerName, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class ImportLayer:
    """Bare `layer` keyword or `layer(name)`."""

    name: LayerName | None = None
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class ImportSupports:
    condition: SupportsCondition | Declaration
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class ImportPrelude:
    href: Str | Url
    layer: ImportLayer | None = None
    supports: ImportSupports | None = None
    media: MediaQueryList | None = None
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class KeyframeBlock:
    selectors: tuple[KeyframeSelector, ...]
    block: Block
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class NamespacePrelude:
    prefix: Ident | None
    uri: NamespacePreludeUri
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PseudoPage:
    name: Ident
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PageSelector:
    name: Ident | None
    pseudo: tuple[PseudoPage, ...] = ()
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PageSelectorList:
    selectors: tuple[PageSelector, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class SassExpr:
    values: tuple[ComponentValue, ...]
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class UnknownPrelude:
    """Prelude of an at-rule whose grammar is not modeled; kept as raw text."""

    raw: str
    span: TextRange = span_field()


type ColorProfilePrelude = DashedIdent | DeviceCmyk
type CustomMediaValue = MediaQueryList | bool
type DocumentPreludeMatcher = Function | Url
type FontFamilyName = Str | UnquotedFontFamilyName
type KeyframesName = InterpolableIdent | Str | LessVariable | LessEscapedStr
type KeyframeSelector = Percentage | InterpolableIdent
type NamespacePreludeUri = Str | Url

# ---------------------------------------------------------------------------
# Prelude variants (one per at-rule kind)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PreludeMedia:
    value: MediaQueryList
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeCharset:
    value: Str
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeColorProfile:
    value: ColorProfilePrelude
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeContainer:
    value: ContainerPrelude
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeCounterStyle:
    value: InterpolableIdent
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeCustomMedia:
    value: CustomMedia
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeDocument:
    value: DocumentPrelude
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeFontFeatureValues:
    value: FontFamilyName
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeFontPaletteValues:
    value: DashedIdent
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeImport:
    value: ImportPrelude
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeKeyframes:
    value: KeyframesName
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeLayer:
    value: LayerNames
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeNamespace:
    value: NamespacePrelude
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeNest:
    value: SelectorList
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludePage:
    value: PageSelectorList
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludePositionFallback:
    value: DashedIdent
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeProperty:
    value: DashedIdent
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeSassExpr:
    value: SassExpr
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeScrollTimeline:
    value: DashedIdent
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeSupports:
    value: SupportsCondition
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class PreludeUnknown:
    value: UnknownPrelude
    span: TextRange = span_field()


type AtRulePrelude = (
    PreludeMedia
    | PreludeCharset
    | PreludeColorProfile
    | PreludeContainer
    | PreludeCounterStyle
    | PreludeCustomMedia
    | PreludeDocument
    | PreludeFontFeatureValues
    | PreludeFontPaletteValues
    | PreludeImport
    | PreludeKeyframes
    | PreludeLayer
    | PreludeNamespace
    | PreludeNest
    | PreludePage
    | PreludePositionFallback
    | PreludeProperty
    | PreludeSassExpr
    | PreludeScrollTimeline
    | PreludeSupports
    | PreludeUnknown
)

# ---------------------------------------------------------------------------
# Rules and blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AtRule:
    """`@name prelude? block?`; `name` excludes the `@` and keeps source casing."""

    name: str
    prelude: AtRulePrelude | None = None
    block: Block | None = None
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class QualifiedRule:
    selector: SelectorList
    block: Block
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Block:
    statements: tuple[Statement, ...] = ()
    span: TextRange = span_field()


@dataclass(frozen=True, slots=True)
class Stylesheet:
    statements: tuple[Statement, ...] = ()
    span: TextRange = span_field()


type Statement = Declaration | QualifiedRule | AtRule | KeyframeBlock


__all__ = [
    "AtRule",
    "AtRulePrelude",
    "Block",
    "ColorProfilePrelude",
    "ContainerPrelude",
    "CustomMedia",
    "CustomMediaValue",
    "DeviceCmyk",
    "DocumentPrelude",
    "DocumentPreludeMatcher",
    "FontFamilyName",
    "ImportLayer",
    "ImportPrelude",
    "ImportSupports",
    "KeyframeBlock",
    "KeyframeSelector",
    "KeyframesName",
    "LayerName",
    "LayerNames",
    "NamespacePrelude",
    "NamespacePreludeUri",
    "PageSelector",
    "PageSelectorList",
    "PreludeCharset",
    "PreludeColorProfile",
    "PreludeContainer",
    "PreludeCounterStyle",
    "PreludeCustomMedia",
    "PreludeDocument",
    "PreludeFontFeatureValues",
    "PreludeFontPaletteValues",
    "PreludeImport",
    "PreludeKeyframes",
    "PreludeLayer",
    "PreludeMedia",
    "PreludeNamespace",
    "PreludeNest",
    "PreludePage",
    "PreludePositionFallback",
    "PreludeProperty",
    "PreludeSassExpr",
    "PreludeScrollTimeline",
    "PreludeSupports",
    "PreludeUnknown",
    "PseudoPage",
    "QualifiedRule",
    "SassExpr",
    "Statement",
    "Stylesheet",
    "UnknownPrelude",
    "UnquotedFontFamilyName",
]
