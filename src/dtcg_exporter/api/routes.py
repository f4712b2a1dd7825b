"""API routes for the DTCG exporter."""

from typing import Annotated

from fastapi import APIRouter, Depends

from dtcg_exporter.api.schemas import (
    CollectionInfoResponse,
    ExportRequest,
    ExportResponse,
    ExtractedDocumentSchema,
    HealthResponse,
    ModeSchema,
    StyleInfoResponse,
)
from dtcg_exporter.config import get_settings
from dtcg_exporter.logging_config import get_logger
from dtcg_exporter.services.conversion import TokenConversionService

logger = get_logger(__name__)

health_router = APIRouter(tags=["health"])
export_router = APIRouter(tags=["export"])


def get_conversion_service() -> TokenConversionService:
    return TokenConversionService()


@health_router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=get_settings().app_version)


@export_router.post("/collections", response_model=list[CollectionInfoResponse])
def list_collections(
    payload: ExtractedDocumentSchema,
    service: Annotated[TokenConversionService, Depends(get_conversion_service)],
) -> list[CollectionInfoResponse]:
    """Summarize the collections of an extracted document."""
    document = payload.to_domain()
    return [
        CollectionInfoResponse(
            id=summary.id,
            name=summary.name,
            modes=[ModeSchema(mode_id=m.mode_id, name=m.name) for m in summary.modes],
            variable_count=summary.variable_count,
        )
        for summary in service.summarize_collections(document.collections)
    ]


@export_router.post("/styles", response_model=list[StyleInfoResponse])
def list_styles(payload: ExtractedDocumentSchema) -> list[StyleInfoResponse]:
    """List the text and effect styles of an extracted document."""
    document = payload.to_domain()
    styles = [
        StyleInfoResponse(id=style.id, name=style.name, kind="text")
        for style in document.text_styles
    ]
    styles.extend(
        StyleInfoResponse(id=style.id, name=style.name, kind="effect")
        for style in document.effect_styles
    )
    return styles


@export_router.post("/export", response_model=ExportResponse)
def export_tokens(
    payload: ExportRequest,
    service: Annotated[TokenConversionService, Depends(get_conversion_service)],
) -> ExportResponse:
    """Convert an extracted document to DTCG token files."""
    document = payload.document.to_domain()
    config = payload.config.to_domain()

    result = service.export(
        document.collections,
        config,
        text_styles=document.text_styles,
        effect_styles=document.effect_styles,
    )
    if result.error is not None:
        raise result.error

    return ExportResponse.from_domain(result)
