from dtcg_exporter.services.alias_resolution import AliasResolver, path_to_reference
from dtcg_exporter.services.classification import (
    convert_float,
    infer_type,
    is_plain_number,
)
from dtcg_exporter.services.color import (
    convert_color,
    rgba_to_hex,
    rgba_to_oklch,
)
from dtcg_exporter.services.conversion import (
    CollectionSummary,
    TokenConversionService,
    export_tokens,
)
from dtcg_exporter.services.filenames import generate_filename, slugify
from dtcg_exporter.services.style_conversion import (
    convert_effect_styles,
    convert_text_styles,
)
from dtcg_exporter.services.token_tree import build_tree, insert_token

__all__ = [
    "AliasResolver",
    "CollectionSummary",
    "TokenConversionService",
    "build_tree",
    "convert_color",
    "convert_effect_styles",
    "convert_float",
    "convert_text_styles",
    "export_tokens",
    "generate_filename",
    "infer_type",
    "insert_token",
    "is_plain_number",
    "path_to_reference",
    "rgba_to_hex",
    "rgba_to_oklch",
    "slugify",
]
