"""Typed AST over CSS, SCSS and Less at-rules."""

from stylepy.ast.at_rule import (
    AtRule,
    AtRulePrelude,
    Block,
    ColorProfilePrelude,
    ContainerPrelude,
    CustomMedia,
    CustomMediaValue,
    DeviceCmyk,
    DocumentPrelude,
    DocumentPreludeMatcher,
    FontFamilyName,
    ImportLayer,
    ImportPrelude,
    ImportSupports,
    KeyframeBlock,
    KeyframeSelector,
    KeyframesName,
    LayerName,
    LayerNames,
    NamespacePrelude,
    NamespacePreludeUri,
    PageSelector,
    PageSelectorList,
    PreludeCharset,
    PreludeColorProfile,
    PreludeContainer,
    PreludeCounterStyle,
    PreludeCustomMedia,
    PreludeDocument,
    PreludeFontFeatureValues,
    PreludeFontPaletteValues,
    PreludeImport,
    PreludeKeyframes,
    PreludeLayer,
    PreludeMedia,
    PreludeNamespace,
    PreludeNest,
    PreludePage,
    PreludePositionFallback,
    PreludeProperty,
    PreludeSassExpr,
    PreludeScrollTimeline,
    PreludeSupports,
    PreludeUnknown,
    PseudoPage,
    QualifiedRule,
    SassExpr,
    Statement,
    Stylesheet,
    UnknownPrelude,
    UnquotedFontFamilyName,
)
from stylepy.ast.conditions import (
    Comparison,
    MediaAnd,
    MediaCondition,
    MediaConditionInParens,
    MediaConditionKind,
    MediaFeature,
    MediaFeatureBoolean,
    MediaFeaturePlain,
    MediaFeatureRange,
    MediaFeatureRangeInterval,
    MediaInParens,
    MediaNot,
    MediaOr,
    MediaQuery,
    MediaQueryList,
    MediaQueryWithType,
    SupportsAnd,
    SupportsCondition,
    SupportsConditionInParens,
    SupportsConditionKind,
    SupportsDecl,
    SupportsInParens,
    SupportsNot,
    SupportsOr,
    SupportsSelector,
)
from stylepy.ast.model import (
    ComponentValue,
    DashedIdent,
    Declaration,
    Delimiter,
    Dimension,
    Function,
    HexColor,
    Ident,
    InterpolableIdent,
    InterpolatedIdent,
    Interpolation,
    LessEscapedStr,
    LessVariable,
    Number,
    Percentage,
    Ratio,
    SassVariable,
    Selector,
    SelectorList,
    Str,
    Url,
    UrlRaw,
    span_field,
)

__all__ = [
    "AtRule",
    "AtRulePrelude",
    "Block",
    "ColorProfilePrelude",
    "Comparison",
    "ComponentValue",
    "ContainerPrelude",
    "CustomMedia",
    "CustomMediaValue",
    "DashedIdent",
    "Declaration",
    "Delimiter",
    "DeviceCmyk",
    "Dimension",
    "DocumentPrelude",
    "DocumentPreludeMatcher",
    "FontFamilyName",
    "Function",
    "HexColor",
    "Ident",
    "ImportLayer",
    "ImportPrelude",
    "ImportSupports",
    "InterpolableIdent",
    "InterpolatedIdent",
    "Interpolation",
    "KeyframeBlock",
    "KeyframeSelector",
    "KeyframesName",
    "LayerName",
    "LayerNames",
    "LessEscapedStr",
    "LessVariable",
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
    "NamespacePrelude",
    "NamespacePreludeUri",
    "Number",
    "PageSelector",
    "PageSelectorList",
    "Percentage",
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
    "Ratio",
    "SassExpr",
    "SassVariable",
    "Selector",
    "SelectorList",
    "Statement",
    "Str",
    "Stylesheet",
    "SupportsAnd",
    "SupportsCondition",
    "SupportsConditionInParens",
    "SupportsConditionKind",
    "SupportsDecl",
    "SupportsInParens",
    "SupportsNot",
    "SupportsOr",
    "SupportsSelector",
    "UnknownPrelude",
    "UnquotedFontFamilyName",
    "Url",
    "UrlRaw",
    "span_field",
]
