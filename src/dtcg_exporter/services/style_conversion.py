"""Text style -> ``typography`` and effect style -> ``shadow`` composite tokens.

Each style property is either bound to a variable, in which case it becomes
a reference to that variable's path, or a literal run through the property's
own converter. No variable values are looked up here.
"""

from collections.abc import Callable, Iterable
from typing import Any

from dtcg_exporter.domain.styles import (
    AUTO_LINE_HEIGHT,
    BoundReference,
    BoundValue,
    EffectStyle,
    ShadowEffect,
    TextStyle,
)
from dtcg_exporter.domain.tokens import DTCGToken, ExportConfig, TokenTree
from dtcg_exporter.domain.value_objects import (
    DimensionValue,
    TokenType,
    normalize_number,
)
from dtcg_exporter.logging_config import get_logger
from dtcg_exporter.services.alias_resolution import path_to_reference
from dtcg_exporter.services.color import convert_color
from dtcg_exporter.services.token_tree import build_tree

logger = get_logger(__name__)


def convert_bound_value(
    bound: BoundValue, converter: Callable[[Any], Any]
) -> Any:
    if isinstance(bound, BoundReference):
        return path_to_reference(bound.variable_name)
    return converter(bound.value)


def _dimension(config: ExportConfig) -> Callable[[Any], dict]:
    def convert(value: Any) -> dict:
        return DimensionValue(value, config.default_unit).to_dict()

    return convert


def _line_height(value: Any) -> Any:
    if value == AUTO_LINE_HEIGHT:
        return "auto"
    return normalize_number(value)


def _passthrough(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return normalize_number(value)
    return value


def _description(style: TextStyle | EffectStyle, config: ExportConfig) -> str | None:
    if config.include_descriptions and style.description:
        return style.description
    return None


def typography_value(style: TextStyle, config: ExportConfig) -> dict[str, Any]:
    dimension = _dimension(config)
    value: dict[str, Any] = {
        "fontFamily": convert_bound_value(style.font_family, _passthrough),
        "fontSize": convert_bound_value(style.font_size, dimension),
        "fontWeight": convert_bound_value(style.font_weight, _passthrough),
        "lineHeight": convert_bound_value(style.line_height, _line_height),
    }

    if style.letter_spacing is not None:
        value["letterSpacing"] = convert_bound_value(style.letter_spacing, dimension)

    return value


def shadow_value(effect: ShadowEffect, config: ExportConfig) -> dict[str, Any]:
    dimension = _dimension(config)
    shadow: dict[str, Any] = {
        "offsetX": convert_bound_value(effect.offset_x, dimension),
        "offsetY": convert_bound_value(effect.offset_y, dimension),
        "blur": convert_bound_value(effect.blur, dimension),
        "spread": convert_bound_value(effect.spread, dimension),
        "color": convert_bound_value(
            effect.color, lambda rgba: convert_color(rgba, config.color_format)
        ),
    }
    if effect.is_inset:
        shadow["inset"] = True
    return shadow


def convert_text_styles(
    text_styles: Iterable[TextStyle], config: ExportConfig
) -> TokenTree:
    """Build the typography tree, one composite token per text style."""
    entries = []
    for style in text_styles:
        token = DTCGToken(
            value=typography_value(style, config),
            token_type=TokenType.TYPOGRAPHY,
            description=_description(style, config),
        )
        entries.append((style.name, token))
    return build_tree(entries)


def convert_effect_styles(
    effect_styles: Iterable[EffectStyle], config: ExportConfig
) -> TokenTree:
    """Build the shadow tree.

    A style with one visible shadow gets a single shadow object; several
    shadows become a list in layer order. Styles without any visible drop
    or inner shadow are left out.
    """
    entries = []
    for style in effect_styles:
        shadows = [shadow_value(effect, config) for effect in style.shadow_effects]
        if not shadows:
            logger.debug("effect_style_skipped", style_id=style.id, name=style.name)
            continue

        token = DTCGToken(
            value=shadows[0] if len(shadows) == 1 else shadows,
            token_type=TokenType.SHADOW,
            description=_description(style, config),
        )
        entries.append((style.name, token))
    return build_tree(entries)


__all__ = [
    "convert_bound_value",
    "convert_effect_styles",
    "convert_text_styles",
    "shadow_value",
    "typography_value",
]
