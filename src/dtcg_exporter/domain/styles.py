"""Text and effect style domain models.

Style properties may be bound to a variable. The extraction layer has
already looked the variable up, so a bound property carries the variable's
*name* rather than its id.
"""

from dataclasses import dataclass, field
from typing import Any

from dtcg_exporter.domain.value_objects import EffectType

AUTO_LINE_HEIGHT = "AUTO"


@dataclass(frozen=True, slots=True)
class BoundReference:
    """Property driven by a variable, e.g. ``weight/semibold``."""

    variable_name: str


@dataclass(frozen=True, slots=True)
class BoundLiteral:
    """Property authored directly on the style."""

    value: Any


BoundValue = BoundReference | BoundLiteral


@dataclass
class TextStyle:
    id: str
    name: str
    font_family: BoundValue
    font_size: BoundValue
    font_weight: BoundValue
    line_height: BoundValue
    letter_spacing: BoundValue | None = None
    description: str = ""


@dataclass
class ShadowEffect:
    effect_type: EffectType
    color: BoundValue
    offset_x: BoundValue
    offset_y: BoundValue
    blur: BoundValue
    spread: BoundValue
    visible: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.effect_type, EffectType):
            self.effect_type = EffectType(self.effect_type)

    @property
    def is_exportable(self) -> bool:
        return self.visible and self.effect_type.is_shadow

    @property
    def is_inset(self) -> bool:
        return self.effect_type == EffectType.INNER_SHADOW


@dataclass
class EffectStyle:
    id: str
    name: str
    effects: list[ShadowEffect] = field(default_factory=list)
    description: str = ""

    @property
    def shadow_effects(self) -> list[ShadowEffect]:
        return [effect for effect in self.effects if effect.is_exportable]


__all__ = [
    "AUTO_LINE_HEIGHT",
    "BoundLiteral",
    "BoundReference",
    "BoundValue",
    "EffectStyle",
    "ShadowEffect",
    "TextStyle",
]
