import math

import pytest

from dtcg_exporter.domain.value_objects import RGBA, ColorFormat
from dtcg_exporter.services.color import (
    convert_color,
    rgba_to_hex,
    rgba_to_oklab,
    rgba_to_oklch,
    round_half_up,
    srgb_to_linear,
)


class TestRoundHalfUp:
    def test_ties_round_up(self):
        assert round_half_up(127.5) == 128
        assert round_half_up(0.5) == 1

    def test_rounds_to_places(self):
        assert round_half_up(0.12345, 3) == pytest.approx(0.123)
        # Python's round() would give 2.2 here
        assert round_half_up(2.25, 1) == pytest.approx(2.3)


class TestRgbaToHex:
    def test_opaque_color_has_six_digits(self):
        assert rgba_to_hex(RGBA(0.2, 0.4, 0.6, 1)) == "#336699"

    def test_translucent_color_appends_alpha_byte(self):
        assert rgba_to_hex(RGBA(0.2, 0.4, 0.6, 0.5)) == "#33669980"

    def test_output_is_lowercase_and_zero_padded(self):
        assert rgba_to_hex(RGBA(0, 0, 1, 1)) == "#0000ff"
        assert rgba_to_hex(RGBA(1, 1, 1, 0)) == "#ffffff00"

    def test_channels_round_to_nearest_byte(self):
        # 0.5 * 255 = 127.5 rounds up
        assert rgba_to_hex(RGBA(0.5, 0.5, 0.5, 1)) == "#808080"


class TestSrgbToLinear:
    def test_linear_segment_below_threshold(self):
        assert srgb_to_linear(0.04) == pytest.approx(0.04 / 12.92)

    def test_gamma_segment_above_threshold(self):
        assert srgb_to_linear(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)

    def test_endpoints(self):
        assert srgb_to_linear(0) == 0
        assert srgb_to_linear(1) == pytest.approx(1)


class TestRgbaToOklch:
    def test_white_has_full_lightness_and_no_chroma(self):
        color = rgba_to_oklch(RGBA(1, 1, 1, 1))

        assert color.lightness == pytest.approx(1.0)
        assert color.chroma == pytest.approx(0.0)
        assert 0 <= color.hue < 360
        assert color.alpha is None

    def test_black_is_zero_lightness(self):
        color = rgba_to_oklch(RGBA(0, 0, 0, 1))

        assert color.lightness == 0
        assert color.chroma == 0

    def test_pure_red_matches_reference_values(self):
        color = rgba_to_oklch(RGBA(1, 0, 0, 1))

        assert color.lightness == pytest.approx(0.628, abs=0.002)
        assert color.chroma == pytest.approx(0.258, abs=0.002)
        assert color.hue == pytest.approx(29.2, abs=0.3)

    def test_hue_is_normalized_to_positive_degrees(self):
        # Blue has a negative atan2 angle before normalization
        color = rgba_to_oklch(RGBA(0, 0, 1, 1))

        assert 0 <= color.hue < 360
        assert color.hue == pytest.approx(264.1, abs=0.5)

    def test_precision_is_three_and_one_decimals(self):
        color = rgba_to_oklch(RGBA(0.2, 0.4, 0.6, 1))

        assert color.lightness == round(color.lightness, 3)
        assert color.chroma == round(color.chroma, 3)
        assert color.hue == round(color.hue, 1)

    def test_alpha_included_only_when_translucent(self):
        color = rgba_to_oklch(RGBA(0.2, 0.4, 0.6, 0.3333))

        assert color.alpha == pytest.approx(0.333)

    def test_oklab_chroma_is_hypot_of_a_and_b(self):
        rgba = RGBA(0.9, 0.3, 0.1, 1)
        _, a, b = rgba_to_oklab(rgba)

        assert rgba_to_oklch(rgba).chroma == pytest.approx(
            round_half_up(math.hypot(a, b), 3)
        )


class TestConvertColor:
    def test_hex_format_returns_string(self):
        assert convert_color(RGBA(0.2, 0.4, 0.6, 1), ColorFormat.HEX) == "#336699"

    def test_oklch_format_returns_structured_value(self):
        value = convert_color(RGBA(1, 1, 1, 0.5), ColorFormat.OKLCH)

        assert value["colorSpace"] == "oklch"
        assert len(value["components"]) == 3
        assert value["components"][0] == pytest.approx(1.0)
        assert value["alpha"] == 0.5

    def test_oklch_omits_alpha_for_opaque_colors(self):
        value = convert_color(RGBA(0.2, 0.4, 0.6, 1), ColorFormat.OKLCH)

        assert "alpha" not in value


class TestRgbaValidation:
    def test_rejects_out_of_range_channel(self):
        with pytest.raises(ValueError, match="out of range"):
            RGBA(1.2, 0, 0, 1)

    def test_rejects_non_numeric_channel(self):
        with pytest.raises(ValueError, match="Invalid"):
            RGBA("red", 0, 0, 1)
