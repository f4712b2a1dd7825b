"""Color conversion from normalized RGBA to DTCG color values.

Pipeline for OKLCH: sRGB -> linear RGB -> XYZ (D65) -> LMS -> OKLab -> OKLCH.
The matrices below must stay byte-for-byte identical to the ones used by
downstream OKLCH consumers.
"""

import math

from dtcg_exporter.domain.value_objects import RGBA, ColorFormat, OklchColor

# Linear sRGB -> CIE XYZ (D65)
RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# CIE XYZ -> LMS cone response
XYZ_TO_LMS = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)

# Non-linear LMS -> OKLab
LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

Vector = tuple[float, float, float]
Matrix = tuple[Vector, Vector, Vector]


def round_half_up(value: float, places: int = 0) -> float:
    """Round like JavaScript's Math.round (ties go towards +infinity)."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def _to_byte(channel: float) -> int:
    return int(round_half_up(channel * 255))


def rgba_to_hex(rgba: RGBA) -> str:
    """Render as ``#rrggbb``, or ``#rrggbbaa`` when not fully opaque."""
    hex_color = f"#{_to_byte(rgba.r):02x}{_to_byte(rgba.g):02x}{_to_byte(rgba.b):02x}"
    if not rgba.is_opaque:
        hex_color += f"{_to_byte(rgba.a):02x}"
    return hex_color


def srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _multiply(matrix: Matrix, vector: Vector) -> Vector:
    x, y, z = vector
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z,
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z,
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z,
    )


def rgba_to_oklab(rgba: RGBA) -> Vector:
    linear = (srgb_to_linear(rgba.r), srgb_to_linear(rgba.g), srgb_to_linear(rgba.b))
    xyz = _multiply(RGB_TO_XYZ, linear)
    lms = _multiply(XYZ_TO_LMS, xyz)
    return _multiply(LMS_TO_OKLAB, (math.cbrt(lms[0]), math.cbrt(lms[1]), math.cbrt(lms[2])))


def rgba_to_oklch(rgba: RGBA) -> OklchColor:
    """Convert to OKLCH with L and C at 3 decimals and H at 1 decimal.

    Hue is meaningless when chroma is ~0 (greys); whatever atan2 yields
    is kept.
    """
    lightness, a, b = rgba_to_oklab(rgba)
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360

    hue = round_half_up(hue, 1)
    if hue >= 360:
        hue -= 360

    return OklchColor(
        lightness=round_half_up(lightness, 3),
        chroma=round_half_up(chroma, 3),
        hue=hue,
        alpha=None if rgba.is_opaque else round_half_up(rgba.a, 3),
    )


def convert_color(rgba: RGBA, color_format: ColorFormat) -> str | dict:
    """Convert to the DTCG ``$value`` for the configured color format."""
    if color_format == ColorFormat.OKLCH:
        return rgba_to_oklch(rgba).to_dict()
    return rgba_to_hex(rgba)


__all__ = [
    "LMS_TO_OKLAB",
    "RGB_TO_XYZ",
    "XYZ_TO_LMS",
    "convert_color",
    "rgba_to_hex",
    "rgba_to_oklab",
    "rgba_to_oklch",
    "round_half_up",
    "srgb_to_linear",
]
