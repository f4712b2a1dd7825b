from dtcg_exporter.domain.styles import (
    AUTO_LINE_HEIGHT,
    BoundLiteral,
    BoundReference,
    BoundValue,
    EffectStyle,
    ShadowEffect,
    TextStyle,
)
from dtcg_exporter.domain.tokens import (
    CIRCULAR_SENTINEL,
    NO_VALUE_SENTINEL,
    UNKNOWN_SENTINEL,
    ConversionIssue,
    DTCGToken,
    ExportConfig,
    ExportResult,
    IssueKind,
    TokenFile,
    TokenFileKind,
    TokenTree,
)
from dtcg_exporter.domain.value_objects import (
    RGBA,
    ColorFormat,
    DimensionUnit,
    DimensionValue,
    EffectType,
    OklchColor,
    ResolvedType,
    TokenType,
    VariableScope,
)
from dtcg_exporter.domain.variables import (
    AliasValue,
    Collection,
    DirectValue,
    Mode,
    Variable,
    VariableMap,
    VariableValue,
    build_variable_map,
)

__all__ = [
    # Styles
    "AUTO_LINE_HEIGHT",
    "BoundLiteral",
    "BoundReference",
    "BoundValue",
    "EffectStyle",
    "ShadowEffect",
    "TextStyle",
    # Tokens
    "CIRCULAR_SENTINEL",
    "NO_VALUE_SENTINEL",
    "UNKNOWN_SENTINEL",
    "ConversionIssue",
    "DTCGToken",
    "ExportConfig",
    "ExportResult",
    "IssueKind",
    "TokenFile",
    "TokenFileKind",
    "TokenTree",
    # Value objects
    "RGBA",
    "ColorFormat",
    "DimensionUnit",
    "DimensionValue",
    "EffectType",
    "OklchColor",
    "ResolvedType",
    "TokenType",
    "VariableScope",
    # Variables
    "AliasValue",
    "Collection",
    "DirectValue",
    "Mode",
    "Variable",
    "VariableMap",
    "VariableValue",
    "build_variable_map",
]
