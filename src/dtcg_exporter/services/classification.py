"""Dimension classification and DTCG ``$type`` inference for variables."""

import re

from dtcg_exporter.domain.value_objects import (
    DimensionUnit,
    DimensionValue,
    ResolvedType,
    TokenType,
    VariableScope,
    normalize_number,
)
from dtcg_exporter.domain.variables import Variable

PLAIN_NUMBER_PATTERN = re.compile(r"opacity|alpha|weight", re.IGNORECASE)
WEIGHT_PATTERN = re.compile(r"weight", re.IGNORECASE)
OPACITY_PATTERN = re.compile(r"opacity|alpha", re.IGNORECASE)
FONT_FAMILY_PATTERN = re.compile(r"font-?family", re.IGNORECASE)


def is_plain_number(variable: Variable) -> bool:
    """Check if a FLOAT variable is unitless (opacity, font weight)."""
    return (
        variable.has_scope(VariableScope.OPACITY)
        or variable.has_scope(VariableScope.FONT_WEIGHT)
        or PLAIN_NUMBER_PATTERN.search(variable.name) is not None
    )


def convert_float(
    value: float | int, variable: Variable, unit: DimensionUnit
) -> dict | float | int:
    """Wrap as a dimension unless the variable is a plain number."""
    if is_plain_number(variable):
        return normalize_number(value)
    return DimensionValue(value, unit).to_dict()


def infer_type(variable: Variable) -> TokenType | None:
    """Map a variable to its DTCG ``$type``.

    Strings other than font families and all booleans stay untyped, DTCG
    has no generic string or boolean type.
    """
    resolved_type = variable.resolved_type

    if resolved_type == ResolvedType.COLOR:
        return TokenType.COLOR

    if resolved_type == ResolvedType.FLOAT:
        if (
            variable.has_scope(VariableScope.FONT_WEIGHT)
            or WEIGHT_PATTERN.search(variable.name)
        ):
            return TokenType.FONT_WEIGHT
        if (
            variable.has_scope(VariableScope.OPACITY)
            or OPACITY_PATTERN.search(variable.name)
        ):
            return TokenType.NUMBER
        return TokenType.DIMENSION

    if resolved_type == ResolvedType.STRING:
        if (
            variable.has_scope(VariableScope.FONT_FAMILY)
            or FONT_FAMILY_PATTERN.search(variable.name)
        ):
            return TokenType.FONT_FAMILY
        return None

    return None


__all__ = [
    "convert_float",
    "infer_type",
    "is_plain_number",
]
