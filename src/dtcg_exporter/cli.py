"""Command-line interface for the DTCG token exporter."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dtcg_exporter import __version__
from dtcg_exporter.api.schemas import ExtractedDocument, parse_config, parse_document
from dtcg_exporter.config import get_settings
from dtcg_exporter.domain.tokens import ExportConfig, ExportResult
from dtcg_exporter.domain.value_objects import ColorFormat, DimensionUnit
from dtcg_exporter.exceptions import DocumentNotFoundError, DTCGExporterError, InvalidDocumentError
from dtcg_exporter.logging_config import configure_logging
from dtcg_exporter.services.conversion import TokenConversionService


def load_json(path: Path) -> Any:
    """Read a JSON file.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        InvalidDocumentError: If the file is not valid JSON.
    """
    if not path.exists():
        raise DocumentNotFoundError(str(path))
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidDocumentError(f"{path} is not valid JSON: {e.msg}") from e


def load_document(path: Path) -> ExtractedDocument:
    return parse_document(load_json(path))


def _parse_mode_selection(values: list[str]) -> dict[str, list[str]]:
    """Parse ``COLLECTION_ID=MODE_ID`` pairs into a selection mapping."""
    modes: dict[str, list[str]] = {}
    for item in values:
        collection_id, sep, mode_id = item.partition("=")
        if not sep or not collection_id or not mode_id:
            raise InvalidDocumentError(
                f"mode selection must look like COLLECTION_ID=MODE_ID, got {item!r}"
            )
        modes.setdefault(collection_id, []).append(mode_id)
    return modes


def build_export_config(
    args: argparse.Namespace, document: ExtractedDocument
) -> ExportConfig:
    """Build the export config from a config file or from flags.

    Without any explicit selection every collection and style is exported.
    """
    if args.config:
        return parse_config(load_json(Path(args.config)))

    settings = get_settings()
    collections = list(args.collection or [])
    text_styles = list(args.text_style or [])
    effect_styles = list(args.effect_style or [])

    if args.all_text_styles:
        text_styles = [s.id for s in document.text_styles]
    if args.all_effect_styles:
        effect_styles = [s.id for s in document.effect_styles]

    if not (collections or text_styles or effect_styles):
        collections = [c.id for c in document.collections]
        text_styles = [s.id for s in document.text_styles]
        effect_styles = [s.id for s in document.effect_styles]

    resolve_references = settings.resolve_references
    if args.resolve_references is not None:
        resolve_references = args.resolve_references

    return ExportConfig(
        collections=collections,
        modes=_parse_mode_selection(args.mode or []),
        include_descriptions=settings.include_descriptions and not args.no_descriptions,
        default_unit=DimensionUnit(args.unit or settings.default_unit),
        color_format=ColorFormat(args.color_format or settings.color_format),
        resolve_references=resolve_references,
        selected_text_styles=text_styles,
        selected_effect_styles=effect_styles,
    )


def write_token_files(
    result: ExportResult, output_dir: Path, indent: int = 2
) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for token_file in result.files:
        path = output_dir / token_file.filename
        path.write_text(
            json.dumps(token_file.content, indent=indent, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        written.append(path)
    return written


def cmd_collections(args: argparse.Namespace) -> int:
    """List the variable collections in a document."""
    document = load_document(Path(args.document))
    summaries = TokenConversionService().summarize_collections(document.collections)

    if not summaries:
        print("No variable collections found")
        return 0

    for summary in summaries:
        mode_names = ", ".join(f"{m.name} ({m.mode_id})" for m in summary.modes)
        print(f"{summary.id}  {summary.name}  [{summary.variable_count} variables]")
        print(f"    modes: {mode_names}")
    return 0


def cmd_styles(args: argparse.Namespace) -> int:
    """List the text and effect styles in a document."""
    document = load_document(Path(args.document))

    print(f"Text styles: {len(document.text_styles)}")
    for style in document.text_styles:
        print(f"  - {style.id}  {style.name}")

    print(f"Effect styles: {len(document.effect_styles)}")
    for style in document.effect_styles:
        shadows = len(style.shadow_effects)
        print(f"  - {style.id}  {style.name}  [{shadows} shadows]")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Convert a document to DTCG token files."""
    settings = get_settings()
    document = load_document(Path(args.document))
    config = build_export_config(args, document)

    result = TokenConversionService().export(
        document.collections,
        config,
        text_styles=document.text_styles,
        effect_styles=document.effect_styles,
    )

    for issue in result.issues:
        print(
            f"Warning: {issue.kind.value} for {issue.variable_id} "
            f"in mode {issue.mode_id} -> {issue.sentinel}",
            file=sys.stderr,
        )

    if result.error is not None:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    if args.stdout:
        bundle = {f.filename: f.content for f in result.files}
        print(json.dumps(bundle, indent=settings.json_indent, ensure_ascii=False))
        return 0

    output_dir = Path(args.output_dir) if args.output_dir else settings.output_dir
    written = write_token_files(result, output_dir, indent=settings.json_indent)
    print(f"Wrote {len(written)} token files to {output_dir}")
    for path in written:
        print(f"  - {path.name}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dtcg_exporter.api.app:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
    )
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"DTCG Token Exporter v{__version__}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dtcg",
        description="DTCG Token Exporter - convert design variables and styles to W3C design tokens",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log debug events to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # collections command
    collections_parser = subparsers.add_parser(
        "collections", help="List variable collections in a document"
    )
    collections_parser.add_argument("document", help="Extracted document JSON file")
    collections_parser.set_defaults(func=cmd_collections)

    # styles command
    styles_parser = subparsers.add_parser(
        "styles", help="List text and effect styles in a document"
    )
    styles_parser.add_argument("document", help="Extracted document JSON file")
    styles_parser.set_defaults(func=cmd_styles)

    # export command
    export_parser = subparsers.add_parser(
        "export", help="Convert a document to DTCG token files"
    )
    export_parser.add_argument("document", help="Extracted document JSON file")
    export_parser.add_argument(
        "--config", "-c", help="Export config JSON file (overrides selection flags)"
    )
    export_parser.add_argument(
        "--collection", action="append", help="Collection ID to export (repeatable)"
    )
    export_parser.add_argument(
        "--mode",
        action="append",
        help="COLLECTION_ID=MODE_ID to export (repeatable, default: all modes)",
    )
    export_parser.add_argument(
        "--text-style", action="append", help="Text style ID to export (repeatable)"
    )
    export_parser.add_argument(
        "--all-text-styles", action="store_true", help="Export every text style"
    )
    export_parser.add_argument(
        "--effect-style", action="append", help="Effect style ID to export (repeatable)"
    )
    export_parser.add_argument(
        "--all-effect-styles", action="store_true", help="Export every effect style"
    )
    export_parser.add_argument(
        "--color-format",
        choices=[f.value for f in ColorFormat],
        default=None,
        help="Color output format (default: hex)",
    )
    export_parser.add_argument(
        "--unit",
        choices=[u.value for u in DimensionUnit],
        default=None,
        help="Unit for dimension values (default: px)",
    )
    references_group = export_parser.add_mutually_exclusive_group()
    references_group.add_argument(
        "--resolve-references",
        dest="resolve_references",
        action="store_true",
        default=None,
        help="Flatten aliases to their resolved values",
    )
    references_group.add_argument(
        "--keep-references",
        dest="resolve_references",
        action="store_false",
        help="Keep aliases as {path} references",
    )
    export_parser.add_argument(
        "--no-descriptions", action="store_true", help="Omit $description fields"
    )
    export_parser.add_argument(
        "--output-dir", "-o", default=None, help="Directory to write token files into"
    )
    export_parser.add_argument(
        "--stdout", action="store_true", help="Print all files as one JSON object"
    )
    export_parser.set_defaults(func=cmd_export)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Port")
    serve_parser.set_defaults(func=cmd_serve)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings(), level="DEBUG" if args.verbose else None)

    try:
        result: int = args.func(args)
    except DTCGExporterError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
