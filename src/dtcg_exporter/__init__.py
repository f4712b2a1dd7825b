from dtcg_exporter.domain.styles import (
    BoundLiteral,
    BoundReference,
    EffectStyle,
    ShadowEffect,
    TextStyle,
)
from dtcg_exporter.domain.tokens import ExportConfig, ExportResult, TokenFile
from dtcg_exporter.domain.value_objects import (
    RGBA,
    ColorFormat,
    DimensionUnit,
    ResolvedType,
)
from dtcg_exporter.domain.variables import (
    AliasValue,
    Collection,
    DirectValue,
    Mode,
    Variable,
)
from dtcg_exporter.services.conversion import TokenConversionService, export_tokens

__all__ = [
    "AliasValue",
    "BoundLiteral",
    "BoundReference",
    "Collection",
    "ColorFormat",
    "DimensionUnit",
    "DirectValue",
    "EffectStyle",
    "ExportConfig",
    "ExportResult",
    "Mode",
    "RGBA",
    "ResolvedType",
    "ShadowEffect",
    "TextStyle",
    "TokenConversionService",
    "TokenFile",
    "Variable",
    "export_tokens",
]

__version__ = "0.1.0"
