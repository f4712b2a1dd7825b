from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResolvedType(str, Enum):
    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


class VariableScope(str, Enum):
    ALL_SCOPES = "ALL_SCOPES"
    OPACITY = "OPACITY"
    FONT_WEIGHT = "FONT_WEIGHT"
    FONT_FAMILY = "FONT_FAMILY"
    FONT_SIZE = "FONT_SIZE"
    LINE_HEIGHT = "LINE_HEIGHT"
    LETTER_SPACING = "LETTER_SPACING"
    CORNER_RADIUS = "CORNER_RADIUS"
    WIDTH_HEIGHT = "WIDTH_HEIGHT"
    GAP = "GAP"
    STROKE_FLOAT = "STROKE_FLOAT"
    EFFECT_FLOAT = "EFFECT_FLOAT"
    ALL_FILLS = "ALL_FILLS"
    STROKE_COLOR = "STROKE_COLOR"
    EFFECT_COLOR = "EFFECT_COLOR"
    TEXT_CONTENT = "TEXT_CONTENT"


class ColorFormat(str, Enum):
    HEX = "hex"
    OKLCH = "oklch"


class DimensionUnit(str, Enum):
    PX = "px"
    REM = "rem"


class TokenType(str, Enum):
    COLOR = "color"
    DIMENSION = "dimension"
    NUMBER = "number"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"


class EffectType(str, Enum):
    DROP_SHADOW = "DROP_SHADOW"
    INNER_SHADOW = "INNER_SHADOW"
    LAYER_BLUR = "LAYER_BLUR"
    BACKGROUND_BLUR = "BACKGROUND_BLUR"

    @property
    def is_shadow(self) -> bool:
        return self in (EffectType.DROP_SHADOW, EffectType.INNER_SHADOW)


def normalize_number(value: float | int) -> float | int:
    """Emit integral floats as ints and fold negative zero."""
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        return value + 0.0
    return value


@dataclass(frozen=True, slots=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b", "a"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid {channel} channel: {value!r}")
            if not 0 <= value <= 1:
                raise ValueError(
                    f"Channel {channel} out of range [0, 1]: {value}"
                )

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1


@dataclass(frozen=True, slots=True)
class DimensionValue:
    value: float | int
    unit: DimensionUnit | str = DimensionUnit.PX

    def __post_init__(self) -> None:
        if isinstance(self.unit, str) and not isinstance(self.unit, DimensionUnit):
            try:
                object.__setattr__(self, "unit", DimensionUnit(self.unit))
            except ValueError:
                raise ValueError(f"Invalid unit: {self.unit}")

    def to_dict(self) -> dict[str, Any]:
        unit = self.unit.value if isinstance(self.unit, DimensionUnit) else self.unit
        return {"value": normalize_number(self.value), "unit": unit}


@dataclass(frozen=True, slots=True)
class OklchColor:
    lightness: float
    chroma: float
    hue: float
    alpha: float | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "colorSpace": "oklch",
            "components": [
                normalize_number(self.lightness),
                normalize_number(self.chroma),
                normalize_number(self.hue),
            ],
        }
        if self.alpha is not None:
            result["alpha"] = normalize_number(self.alpha)
        return result


__all__ = [
    "ResolvedType",
    "VariableScope",
    "ColorFormat",
    "DimensionUnit",
    "TokenType",
    "EffectType",
    "RGBA",
    "DimensionValue",
    "OklchColor",
    "normalize_number",
]
