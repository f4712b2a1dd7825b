"""DTCG output models and the export configuration.

Token trees are plain nested dicts so they serialize straight to JSON. A
leaf is a dict carrying ``$value``; anything else is a group.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dtcg_exporter.domain.value_objects import ColorFormat, DimensionUnit, TokenType
from dtcg_exporter.exceptions import DTCGExporterError

TokenTree = dict[str, Any]

CIRCULAR_SENTINEL = "{circular}"
UNKNOWN_SENTINEL = "{unknown}"
NO_VALUE_SENTINEL = "{no-value}"

TYPOGRAPHY_FILENAME = "typography.json"
SHADOW_FILENAME = "shadow.json"


def is_token(node: object) -> bool:
    """Check if a tree node is a token (has ``$value``) rather than a group."""
    return isinstance(node, dict) and "$value" in node


@dataclass(frozen=True, slots=True)
class DTCGToken:
    value: Any
    token_type: TokenType | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        token: dict[str, Any] = {"$value": self.value}
        if self.token_type is not None:
            token["$type"] = self.token_type.value
        if self.description:
            token["$description"] = self.description
        return token


class TokenFileKind(str, Enum):
    VARIABLES = "variables"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"


@dataclass(frozen=True)
class TokenFile:
    """One output artifact: a named DTCG token tree."""

    filename: str
    collection_name: str
    content: TokenTree
    mode_name: str | None = None
    kind: TokenFileKind = TokenFileKind.VARIABLES


@dataclass
class ExportConfig:
    """What to export and how to render values.

    ``modes`` maps a collection id to its selected mode ids. A collection
    without an entry exports every mode; an explicit empty list exports none.
    """

    collections: list[str] = field(default_factory=list)
    modes: dict[str, list[str]] = field(default_factory=dict)
    include_descriptions: bool = True
    default_unit: DimensionUnit = DimensionUnit.PX
    color_format: ColorFormat = ColorFormat.HEX
    resolve_references: bool = False
    selected_text_styles: list[str] = field(default_factory=list)
    selected_effect_styles: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.default_unit, DimensionUnit):
            self.default_unit = DimensionUnit(self.default_unit)
        if not isinstance(self.color_format, ColorFormat):
            self.color_format = ColorFormat(self.color_format)

    @property
    def export_text_styles(self) -> bool:
        return bool(self.selected_text_styles)

    @property
    def export_effect_styles(self) -> bool:
        return bool(self.selected_effect_styles)

    @property
    def has_selection(self) -> bool:
        return bool(
            self.collections
            or self.selected_text_styles
            or self.selected_effect_styles
        )

    def selected_mode_ids(self, collection_id: str, all_mode_ids: list[str]) -> list[str]:
        selected = self.modes.get(collection_id)
        if selected is None:
            return list(all_mode_ids)
        return list(selected)


class IssueKind(str, Enum):
    UNKNOWN_REFERENCE = "unknown_reference"
    CIRCULAR_REFERENCE = "circular_reference"
    MISSING_VALUE = "missing_value"


@dataclass(frozen=True, slots=True)
class ConversionIssue:
    """A reference that could not be resolved and was replaced by a sentinel."""

    kind: IssueKind
    variable_id: str
    mode_id: str
    sentinel: str

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "variable_id": self.variable_id,
            "mode_id": self.mode_id,
            "sentinel": self.sentinel,
        }


@dataclass
class ExportResult:
    files: list[TokenFile] = field(default_factory=list)
    issues: list[ConversionIssue] = field(default_factory=list)
    error: DTCGExporterError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def filenames(self) -> list[str]:
        return [f.filename for f in self.files]

    @classmethod
    def failure(cls, error: DTCGExporterError) -> "ExportResult":
        return cls(error=error)


__all__ = [
    "CIRCULAR_SENTINEL",
    "NO_VALUE_SENTINEL",
    "SHADOW_FILENAME",
    "TYPOGRAPHY_FILENAME",
    "UNKNOWN_SENTINEL",
    "ConversionIssue",
    "DTCGToken",
    "ExportConfig",
    "ExportResult",
    "IssueKind",
    "TokenFile",
    "TokenFileKind",
    "TokenTree",
    "is_token",
]
