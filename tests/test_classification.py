from dtcg_exporter.domain.value_objects import DimensionUnit, ResolvedType, TokenType
from dtcg_exporter.domain.variables import DirectValue, Variable
from dtcg_exporter.services.classification import (
    convert_float,
    infer_type,
    is_plain_number,
)


def make_variable(
    name: str,
    resolved_type: ResolvedType = ResolvedType.FLOAT,
    scopes: frozenset[str] = frozenset(),
) -> Variable:
    return Variable(
        id=f"v-{name}",
        name=name,
        resolved_type=resolved_type,
        collection_id="col",
        values_by_mode={"m": DirectValue(1)},
        scopes=scopes,
    )


class TestIsPlainNumber:
    def test_opacity_scope_is_plain_number(self):
        assert is_plain_number(make_variable("layer/faded", scopes=frozenset({"OPACITY"})))

    def test_font_weight_scope_is_plain_number(self):
        assert is_plain_number(make_variable("type/bold", scopes=frozenset({"FONT_WEIGHT"})))

    def test_name_patterns_are_case_insensitive(self):
        assert is_plain_number(make_variable("Overlay/Opacity"))
        assert is_plain_number(make_variable("scrim/ALPHA"))
        assert is_plain_number(make_variable("font/Weight/regular"))

    def test_other_floats_are_dimensions(self):
        assert not is_plain_number(make_variable("radius/md"))
        assert not is_plain_number(make_variable("space/4", scopes=frozenset({"GAP"})))


class TestConvertFloat:
    def test_dimension_uses_configured_unit(self):
        variable = make_variable("space/4")

        assert convert_float(16, variable, DimensionUnit.PX) == {"value": 16, "unit": "px"}
        assert convert_float(1.5, variable, DimensionUnit.REM) == {"value": 1.5, "unit": "rem"}

    def test_plain_number_is_returned_bare(self):
        assert convert_float(0.4, make_variable("opacity/disabled"), DimensionUnit.PX) == 0.4

    def test_integral_floats_are_emitted_as_ints(self):
        result = convert_float(16.0, make_variable("space/4"), DimensionUnit.PX)

        assert result["value"] == 16
        assert isinstance(result["value"], int)


class TestInferType:
    def test_color(self):
        assert infer_type(make_variable("blue", ResolvedType.COLOR)) == TokenType.COLOR

    def test_float_weight_is_font_weight(self):
        assert infer_type(make_variable("font/weight/bold")) == TokenType.FONT_WEIGHT
        assert (
            infer_type(make_variable("bold", scopes=frozenset({"FONT_WEIGHT"})))
            == TokenType.FONT_WEIGHT
        )

    def test_float_opacity_is_number(self):
        assert infer_type(make_variable("opacity/muted")) == TokenType.NUMBER
        assert (
            infer_type(make_variable("muted", scopes=frozenset({"OPACITY"})))
            == TokenType.NUMBER
        )

    def test_float_alpha_is_number(self):
        assert infer_type(make_variable("scrim/alpha")) == TokenType.NUMBER

    def test_other_float_is_dimension(self):
        assert infer_type(make_variable("radius/lg")) == TokenType.DIMENSION

    def test_font_family_string(self):
        assert (
            infer_type(make_variable("font-family/body", ResolvedType.STRING))
            == TokenType.FONT_FAMILY
        )
        assert (
            infer_type(make_variable("fontFamily/heading", ResolvedType.STRING))
            == TokenType.FONT_FAMILY
        )
        assert (
            infer_type(
                make_variable("brand", ResolvedType.STRING, frozenset({"FONT_FAMILY"}))
            )
            == TokenType.FONT_FAMILY
        )

    def test_generic_string_has_no_type(self):
        assert infer_type(make_variable("copy/cta", ResolvedType.STRING)) is None

    def test_boolean_has_no_type(self):
        assert infer_type(make_variable("feature/enabled", ResolvedType.BOOLEAN)) is None
