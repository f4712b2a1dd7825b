"""Pydantic v2 schemas for extracted documents, export configs and responses.

Field names follow the extraction layer's camelCase JSON; each input schema
converts itself to the matching domain object with ``to_domain()``.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

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
    ConversionIssue,
    ExportConfig,
    ExportResult,
    TokenFile,
)
from dtcg_exporter.domain.value_objects import (
    RGBA,
    ColorFormat,
    DimensionUnit,
    EffectType,
    ResolvedType,
)
from dtcg_exporter.domain.variables import (
    AliasValue,
    Collection,
    DirectValue,
    Mode,
    RawValue,
    Variable,
    VariableValue,
)
from dtcg_exporter.exceptions import InvalidDocumentError


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Variable Schemas
class RGBASchema(CamelModel):
    r: float = Field(..., ge=0, le=1)
    g: float = Field(..., ge=0, le=1)
    b: float = Field(..., ge=0, le=1)
    a: float = Field(default=1.0, ge=0, le=1)

    def to_domain(self) -> RGBA:
        return RGBA(self.r, self.g, self.b, self.a)


class DirectValueSchema(CamelModel):
    type: Literal["DIRECT"]
    value: Any


class AliasValueSchema(CamelModel):
    type: Literal["ALIAS"]
    variable_id: str = Field(..., min_length=1)


VariableValueSchema = Annotated[
    DirectValueSchema | AliasValueSchema, Field(discriminator="type")
]


def _coerce_direct_value(resolved_type: ResolvedType, raw: Any) -> RawValue:
    """Check a literal against the variable's resolved type."""
    if resolved_type == ResolvedType.COLOR:
        if not isinstance(raw, dict):
            raise ValueError(f"color value must be an object, got {raw!r}")
        return RGBASchema.model_validate(raw).to_domain()
    if resolved_type == ResolvedType.FLOAT:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"float value must be a number, got {raw!r}")
        return raw
    if resolved_type == ResolvedType.STRING:
        if not isinstance(raw, str):
            raise ValueError(f"string value must be a string, got {raw!r}")
        return raw
    if not isinstance(raw, bool):
        raise ValueError(f"boolean value must be true or false, got {raw!r}")
    return raw


class VariableSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    resolved_type: ResolvedType
    values_by_mode: dict[str, VariableValueSchema] = Field(default_factory=dict)
    scopes: list[str] = Field(default_factory=list)
    collection_id: str = ""

    def to_domain(self, collection_id: str | None = None) -> Variable:
        values: dict[str, VariableValue] = {}
        for mode_id, value in self.values_by_mode.items():
            if isinstance(value, AliasValueSchema):
                values[mode_id] = AliasValue(value.variable_id)
                continue
            try:
                raw = _coerce_direct_value(self.resolved_type, value.value)
            except (ValueError, ValidationError) as e:
                raise InvalidDocumentError(
                    str(e), location=f"variable {self.name!r} mode {mode_id!r}"
                ) from e
            values[mode_id] = DirectValue(raw)

        return Variable(
            id=self.id,
            name=self.name,
            resolved_type=self.resolved_type,
            collection_id=self.collection_id or collection_id or "",
            values_by_mode=values,
            scopes=frozenset(self.scopes),
            description=self.description,
        )


class ModeSchema(CamelModel):
    mode_id: str = Field(..., min_length=1)
    name: str

    def to_domain(self) -> Mode:
        return Mode(mode_id=self.mode_id, name=self.name)


class CollectionSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str
    modes: list[ModeSchema] = Field(default_factory=list)
    variables: list[VariableSchema] = Field(default_factory=list)

    def to_domain(self) -> Collection:
        return Collection(
            id=self.id,
            name=self.name,
            modes=[mode.to_domain() for mode in self.modes],
            variables=[v.to_domain(collection_id=self.id) for v in self.variables],
        )


# Style Schemas
class BoundReferenceSchema(CamelModel):
    type: Literal["reference"]
    variable_name: str = Field(..., min_length=1)


class BoundLiteralSchema(CamelModel):
    type: Literal["value"]
    value: Any


BoundValueSchema = Annotated[
    BoundReferenceSchema | BoundLiteralSchema, Field(discriminator="type")
]


def _bound(schema: BoundReferenceSchema | BoundLiteralSchema, convert=None) -> BoundValue:
    if isinstance(schema, BoundReferenceSchema):
        return BoundReference(schema.variable_name)
    return BoundLiteral(convert(schema.value) if convert else schema.value)


def _number(value: Any) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDocumentError(f"expected a number, got {value!r}")
    return value


def _line_height(value: Any) -> Any:
    if value == AUTO_LINE_HEIGHT:
        return value
    return _number(value)


def _color(value: Any) -> RGBA:
    try:
        return RGBASchema.model_validate(value).to_domain()
    except ValidationError as e:
        raise InvalidDocumentError(f"invalid color {value!r}") from e


class TextStyleSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    font_family: BoundValueSchema
    font_size: BoundValueSchema
    font_weight: BoundValueSchema
    line_height: BoundValueSchema
    letter_spacing: BoundValueSchema | None = None

    def to_domain(self) -> TextStyle:
        return TextStyle(
            id=self.id,
            name=self.name,
            description=self.description,
            font_family=_bound(self.font_family),
            font_size=_bound(self.font_size, _number),
            font_weight=_bound(self.font_weight, _number),
            line_height=_bound(self.line_height, _line_height),
            letter_spacing=(
                _bound(self.letter_spacing, _number)
                if self.letter_spacing is not None
                else None
            ),
        )


SHADOW_EFFECT_TYPES = frozenset(t.value for t in EffectType if t.is_shadow)


class ShadowEffectSchema(CamelModel):
    type: EffectType
    visible: bool = True
    color: BoundValueSchema
    offset_x: BoundValueSchema
    offset_y: BoundValueSchema
    blur: BoundValueSchema
    spread: BoundValueSchema

    def to_domain(self) -> ShadowEffect:
        return ShadowEffect(
            effect_type=self.type,
            visible=self.visible,
            color=_bound(self.color, _color),
            offset_x=_bound(self.offset_x, _number),
            offset_y=_bound(self.offset_y, _number),
            blur=_bound(self.blur, _number),
            spread=_bound(self.spread, _number),
        )


class EffectStyleSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    effects: list[ShadowEffectSchema] = Field(default_factory=list)

    @field_validator("effects", mode="before")
    @classmethod
    def drop_non_shadow_effects(cls, v: Any) -> Any:
        """Blurs and other effect kinds carry no shadow fields; skip them."""
        if not isinstance(v, list):
            return v
        return [
            effect
            for effect in v
            if not isinstance(effect, dict) or effect.get("type") in SHADOW_EFFECT_TYPES
        ]

    def to_domain(self) -> EffectStyle:
        return EffectStyle(
            id=self.id,
            name=self.name,
            description=self.description,
            effects=[effect.to_domain() for effect in self.effects],
        )


class ExtractedDocumentSchema(CamelModel):
    """Everything the extraction layer delivers for one design file."""

    collections: list[CollectionSchema] = Field(default_factory=list)
    text_styles: list[TextStyleSchema] = Field(default_factory=list)
    effect_styles: list[EffectStyleSchema] = Field(default_factory=list)

    def to_domain(self) -> "ExtractedDocument":
        return ExtractedDocument(
            collections=[c.to_domain() for c in self.collections],
            text_styles=[s.to_domain() for s in self.text_styles],
            effect_styles=[s.to_domain() for s in self.effect_styles],
        )


@dataclass
class ExtractedDocument:
    collections: list[Collection] = field(default_factory=list)
    text_styles: list[TextStyle] = field(default_factory=list)
    effect_styles: list[EffectStyle] = field(default_factory=list)


# Export Config Schemas
class ExportConfigSchema(CamelModel):
    collections: list[str] = Field(default_factory=list)
    modes: dict[str, list[str]] = Field(default_factory=dict)
    include_descriptions: bool = True
    default_unit: DimensionUnit = DimensionUnit.PX
    color_format: ColorFormat = ColorFormat.HEX
    resolve_references: bool = False
    selected_text_styles: list[str] = Field(default_factory=list)
    selected_effect_styles: list[str] = Field(default_factory=list)

    def to_domain(self) -> ExportConfig:
        return ExportConfig(
            collections=list(self.collections),
            modes={k: list(v) for k, v in self.modes.items()},
            include_descriptions=self.include_descriptions,
            default_unit=self.default_unit,
            color_format=self.color_format,
            resolve_references=self.resolve_references,
            selected_text_styles=list(self.selected_text_styles),
            selected_effect_styles=list(self.selected_effect_styles),
        )


class ExportRequest(CamelModel):
    document: ExtractedDocumentSchema
    config: ExportConfigSchema = Field(default_factory=ExportConfigSchema)


# Response Schemas
class TokenFileResponse(CamelModel):
    filename: str
    collection_name: str
    mode_name: str | None = None
    kind: str
    content: dict[str, Any]

    @classmethod
    def from_domain(cls, token_file: TokenFile) -> "TokenFileResponse":
        return cls(
            filename=token_file.filename,
            collection_name=token_file.collection_name,
            mode_name=token_file.mode_name,
            kind=token_file.kind.value,
            content=token_file.content,
        )


class ConversionIssueResponse(CamelModel):
    kind: str
    variable_id: str
    mode_id: str
    sentinel: str

    @classmethod
    def from_domain(cls, issue: ConversionIssue) -> "ConversionIssueResponse":
        return cls(
            kind=issue.kind.value,
            variable_id=issue.variable_id,
            mode_id=issue.mode_id,
            sentinel=issue.sentinel,
        )


class ExportResponse(CamelModel):
    files: list[TokenFileResponse]
    issues: list[ConversionIssueResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: ExportResult) -> "ExportResponse":
        return cls(
            files=[TokenFileResponse.from_domain(f) for f in result.files],
            issues=[ConversionIssueResponse.from_domain(i) for i in result.issues],
        )


class CollectionInfoResponse(CamelModel):
    id: str
    name: str
    modes: list[ModeSchema]
    variable_count: int


class StyleInfoResponse(CamelModel):
    id: str
    name: str
    kind: Literal["text", "effect"]


class HealthResponse(BaseModel):
    """Schema for health check response."""

    status: str
    version: str = "0.1.0"


def parse_document(payload: dict[str, Any]) -> ExtractedDocument:
    """Validate raw JSON and convert it to domain objects.

    Raises:
        InvalidDocumentError: If the payload does not match the schema.
    """
    try:
        schema = ExtractedDocumentSchema.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidDocumentError(first["msg"], location=location) from e
    return schema.to_domain()


def parse_config(payload: dict[str, Any]) -> ExportConfig:
    try:
        schema = ExportConfigSchema.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidDocumentError(first["msg"], location=location) from e
    return schema.to_domain()
