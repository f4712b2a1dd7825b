"""Token conversion service: extracted variables and styles -> DTCG files.

The service is the public entry point of the conversion engine. Every call
is a pure function of its inputs: it builds a fresh variable lookup table
from *all* collections (aliases may cross collections), converts only the
selected collections, modes and styles, and reports failures as values on
the returned ExportResult instead of raising.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from dtcg_exporter.domain.styles import EffectStyle, TextStyle
from dtcg_exporter.domain.tokens import (
    SHADOW_FILENAME,
    TYPOGRAPHY_FILENAME,
    ConversionIssue,
    DTCGToken,
    ExportConfig,
    ExportResult,
    TokenFile,
    TokenFileKind,
    TokenTree,
)
from dtcg_exporter.domain.variables import (
    Collection,
    Mode,
    VariableMap,
    build_variable_map,
)
from dtcg_exporter.exceptions import EmptySelectionError, ExportFailedError
from dtcg_exporter.logging_config import LogContext, get_logger
from dtcg_exporter.services.alias_resolution import AliasResolver
from dtcg_exporter.services.classification import infer_type
from dtcg_exporter.services.filenames import generate_filename
from dtcg_exporter.services.style_conversion import (
    convert_effect_styles,
    convert_text_styles,
)
from dtcg_exporter.services.token_tree import build_tree, count_tokens

logger = get_logger(__name__)


@dataclass
class CollectionSummary:
    id: str
    name: str
    modes: list[Mode] = field(default_factory=list)
    variable_count: int = 0


class TokenConversionService:
    def export(
        self,
        collections: Sequence[Collection],
        config: ExportConfig,
        text_styles: Sequence[TextStyle] = (),
        effect_styles: Sequence[EffectStyle] = (),
    ) -> ExportResult:
        """Convert the selected collections and styles to token files.

        ``collections`` must contain every extracted collection, selected or
        not, so that aliases into unselected collections still resolve.
        """
        if not config.has_selection:
            logger.warning("export_empty_selection")
            return ExportResult.failure(EmptySelectionError())

        logger.info(
            "export_started",
            collections=len(config.collections),
            text_styles=len(config.selected_text_styles),
            effect_styles=len(config.selected_effect_styles),
            resolve_references=config.resolve_references,
            color_format=config.color_format.value,
        )

        issues: list[ConversionIssue] = []
        try:
            files = self._convert(collections, config, text_styles, effect_styles, issues)
        except Exception as exc:
            logger.exception("export_failed", error=str(exc))
            return ExportResult(issues=issues, error=ExportFailedError(str(exc)))

        if not files:
            logger.warning("export_produced_no_files")
            return ExportResult(
                issues=issues,
                error=EmptySelectionError("Selection produced no token files"),
            )

        logger.info("export_completed", files=len(files), issues=len(issues))
        return ExportResult(files=files, issues=issues)

    def convert_collections(
        self,
        collections: Iterable[Collection],
        config: ExportConfig,
        variable_map: VariableMap,
        issues: list[ConversionIssue] | None = None,
    ) -> list[TokenFile]:
        """One token file per collection x selected mode, in input order."""
        resolver = AliasResolver(variable_map, config, issues)
        files: list[TokenFile] = []

        for collection in collections:
            selected_mode_ids = config.selected_mode_ids(
                collection.id, collection.mode_ids
            )
            for mode in collection.modes:
                if mode.mode_id not in selected_mode_ids:
                    continue

                with LogContext(collection=collection.name, mode=mode.name):
                    tree = self.build_collection_tree(
                        collection, mode.mode_id, resolver, config
                    )
                    logger.debug("collection_mode_converted", tokens=count_tokens(tree))

                files.append(
                    TokenFile(
                        filename=generate_filename(collection.name, mode.name),
                        collection_name=collection.name,
                        mode_name=mode.name,
                        content=tree,
                    )
                )

        return files

    def build_collection_tree(
        self,
        collection: Collection,
        mode_id: str,
        resolver: AliasResolver,
        config: ExportConfig,
    ) -> TokenTree:
        entries = []
        for variable in collection.variables:
            value = variable.value_for_mode(mode_id)
            if value is None:
                continue

            token = DTCGToken(
                value=resolver.convert_value(variable, value, mode_id),
                token_type=infer_type(variable),
                description=variable.description if config.include_descriptions else None,
            )
            entries.append((variable.name, token))
        return build_tree(entries)

    def summarize_collections(
        self, collections: Iterable[Collection]
    ) -> list[CollectionSummary]:
        return [
            CollectionSummary(
                id=collection.id,
                name=collection.name,
                modes=list(collection.modes),
                variable_count=collection.variable_count,
            )
            for collection in collections
        ]

    def _convert(
        self,
        collections: Sequence[Collection],
        config: ExportConfig,
        text_styles: Sequence[TextStyle],
        effect_styles: Sequence[EffectStyle],
        issues: list[ConversionIssue],
    ) -> list[TokenFile]:
        variable_map = build_variable_map(collections)
        selected_ids = set(config.collections)
        selected = [c for c in collections if c.id in selected_ids]

        files = self.convert_collections(selected, config, variable_map, issues)

        if config.export_text_styles:
            text_ids = set(config.selected_text_styles)
            tree = convert_text_styles(
                [s for s in text_styles if s.id in text_ids], config
            )
            if tree:
                files.append(
                    TokenFile(
                        filename=TYPOGRAPHY_FILENAME,
                        collection_name=TokenFileKind.TYPOGRAPHY.value,
                        content=tree,
                        kind=TokenFileKind.TYPOGRAPHY,
                    )
                )

        if config.export_effect_styles:
            effect_ids = set(config.selected_effect_styles)
            tree = convert_effect_styles(
                [s for s in effect_styles if s.id in effect_ids], config
            )
            if tree:
                files.append(
                    TokenFile(
                        filename=SHADOW_FILENAME,
                        collection_name=TokenFileKind.SHADOW.value,
                        content=tree,
                        kind=TokenFileKind.SHADOW,
                    )
                )

        return files


def export_tokens(
    collections: Sequence[Collection],
    config: ExportConfig,
    text_styles: Sequence[TextStyle] = (),
    effect_styles: Sequence[EffectStyle] = (),
) -> ExportResult:
    """Convenience wrapper around TokenConversionService.export."""
    return TokenConversionService().export(
        collections, config, text_styles, effect_styles
    )


__all__ = [
    "CollectionSummary",
    "TokenConversionService",
    "export_tokens",
]
