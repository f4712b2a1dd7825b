from typing import Any

import pytest

from dtcg_exporter.domain.styles import (
    BoundLiteral,
    BoundReference,
    EffectStyle,
    ShadowEffect,
    TextStyle,
)
from dtcg_exporter.domain.tokens import ExportConfig
from dtcg_exporter.domain.value_objects import RGBA, EffectType, ResolvedType
from dtcg_exporter.domain.variables import (
    AliasValue,
    Collection,
    DirectValue,
    Mode,
    Variable,
)


@pytest.fixture
def primitives() -> Collection:
    return Collection(
        id="col-primitives",
        name="Primitives",
        modes=[Mode("m-default", "Default")],
        variables=[
            Variable(
                id="v-blue-500",
                name="blue/500",
                resolved_type=ResolvedType.COLOR,
                collection_id="col-primitives",
                values_by_mode={"m-default": DirectValue(RGBA(0.2, 0.4, 0.6, 1))},
                description="Brand blue",
            ),
            Variable(
                id="v-space-4",
                name="space/4",
                resolved_type=ResolvedType.FLOAT,
                collection_id="col-primitives",
                values_by_mode={"m-default": DirectValue(16.0)},
            ),
        ],
    )


@pytest.fixture
def semantic() -> Collection:
    return Collection(
        id="col-semantic",
        name="Semantic Colors",
        modes=[Mode("m-light", "Light"), Mode("m-dark", "Dark")],
        variables=[
            Variable(
                id="v-primary",
                name="color/primary",
                resolved_type=ResolvedType.COLOR,
                collection_id="col-semantic",
                values_by_mode={
                    "m-light": AliasValue("v-blue-500"),
                    "m-dark": DirectValue(RGBA(1, 1, 1, 0.5)),
                },
                description="Primary action color",
            ),
            Variable(
                id="v-opacity-muted",
                name="opacity/muted",
                resolved_type=ResolvedType.FLOAT,
                collection_id="col-semantic",
                values_by_mode={
                    "m-light": DirectValue(0.5),
                    "m-dark": DirectValue(0.7),
                },
            ),
        ],
    )


@pytest.fixture
def collections(primitives: Collection, semantic: Collection) -> list[Collection]:
    return [primitives, semantic]


@pytest.fixture
def config() -> ExportConfig:
    return ExportConfig(collections=["col-semantic"])


@pytest.fixture
def heading_style() -> TextStyle:
    return TextStyle(
        id="ts-heading",
        name="Heading/Large",
        description="Page titles",
        font_family=BoundLiteral("Inter"),
        font_size=BoundLiteral(32),
        font_weight=BoundReference("weight/semibold"),
        line_height=BoundLiteral(1.25),
        letter_spacing=BoundLiteral(0),
    )


@pytest.fixture
def elevation_style() -> EffectStyle:
    return EffectStyle(
        id="es-elevation",
        name="Elevation/2",
        effects=[
            ShadowEffect(
                effect_type=EffectType.DROP_SHADOW,
                color=BoundLiteral(RGBA(0, 0, 0, 0.2)),
                offset_x=BoundLiteral(0),
                offset_y=BoundLiteral(2),
                blur=BoundLiteral(4),
                spread=BoundLiteral(0),
            ),
            ShadowEffect(
                effect_type=EffectType.INNER_SHADOW,
                color=BoundReference("shadow/inner"),
                offset_x=BoundLiteral(0),
                offset_y=BoundLiteral(1),
                blur=BoundLiteral(2),
                spread=BoundLiteral(0),
            ),
        ],
    )


@pytest.fixture
def document_payload() -> dict[str, Any]:
    """Extracted document in the extraction layer's JSON shape."""
    return {
        "collections": [
            {
                "id": "col-primitives",
                "name": "Primitives",
                "modes": [{"modeId": "m-default", "name": "Default"}],
                "variables": [
                    {
                        "id": "v-blue-500",
                        "name": "blue/500",
                        "description": "Brand blue",
                        "resolvedType": "COLOR",
                        "scopes": ["ALL_FILLS"],
                        "collectionId": "col-primitives",
                        "valuesByMode": {
                            "m-default": {
                                "type": "DIRECT",
                                "value": {"r": 0.2, "g": 0.4, "b": 0.6, "a": 1},
                            }
                        },
                    },
                    {
                        "id": "v-font-weight-bold",
                        "name": "font/weight/bold",
                        "description": "",
                        "resolvedType": "FLOAT",
                        "scopes": ["FONT_WEIGHT"],
                        "collectionId": "col-primitives",
                        "valuesByMode": {
                            "m-default": {"type": "DIRECT", "value": 700}
                        },
                    },
                ],
            },
            {
                "id": "col-semantic",
                "name": "Semantic Colors",
                "modes": [
                    {"modeId": "m-light", "name": "Light"},
                    {"modeId": "m-dark", "name": "Dark"},
                ],
                "variables": [
                    {
                        "id": "v-primary",
                        "name": "color/primary",
                        "description": "Primary action color",
                        "resolvedType": "COLOR",
                        "scopes": [],
                        "collectionId": "col-semantic",
                        "valuesByMode": {
                            "m-light": {"type": "ALIAS", "variableId": "v-blue-500"},
                            "m-dark": {
                                "type": "DIRECT",
                                "value": {"r": 1, "g": 1, "b": 1, "a": 0.5},
                            },
                        },
                    },
                    {
                        "id": "v-dense",
                        "name": "layout/dense",
                        "description": "",
                        "resolvedType": "BOOLEAN",
                        "scopes": [],
                        "collectionId": "col-semantic",
                        "valuesByMode": {
                            "m-light": {"type": "DIRECT", "value": True},
                            "m-dark": {"type": "DIRECT", "value": False},
                        },
                    },
                ],
            },
        ],
        "textStyles": [
            {
                "id": "ts-heading",
                "name": "Heading/Large",
                "description": "Page titles",
                "fontFamily": {"type": "value", "value": "Inter"},
                "fontSize": {"type": "value", "value": 32},
                "fontWeight": {"type": "reference", "variableName": "font/weight/bold"},
                "lineHeight": {"type": "value", "value": "AUTO"},
                "letterSpacing": {"type": "value", "value": 0},
                "paragraphSpacing": 0,
                "textCase": "UPPER",
                "textDecoration": "NONE",
            }
        ],
        "effectStyles": [
            {
                "id": "es-card",
                "name": "Shadow/Card",
                "description": "",
                "effects": [
                    {
                        "type": "DROP_SHADOW",
                        "visible": True,
                        "color": {
                            "type": "value",
                            "value": {"r": 0, "g": 0, "b": 0, "a": 0.25},
                        },
                        "offsetX": {"type": "value", "value": 0},
                        "offsetY": {"type": "value", "value": 4},
                        "blur": {"type": "value", "value": 8},
                        "spread": {"type": "value", "value": 0},
                    }
                ],
            }
        ],
    }
