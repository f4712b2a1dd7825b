"""Exception hierarchy for the DTCG exporter.

All exporter exceptions inherit from DTCGExporterError. The conversion
engine never raises them past its entry point: they are returned as values
on ExportResult and raised only by the HTTP and CLI shells.

Unresolvable, circular and missing-value references are not exceptions at
all; they are replaced by sentinel values and reported as ConversionIssue.
"""

from typing import Any


class DTCGExporterError(Exception):
    """Base exception for all DTCG exporter errors.

    Includes an error_code for API responses and extra context.
    """

    error_code: str = "DTCG_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Export Errors
# =============================================================================


class ExportError(DTCGExporterError):
    """Base exception for export failures."""

    error_code = "EXPORT_ERROR"
    status_code = 400


class EmptySelectionError(ExportError):
    """Raised when an export selects nothing or produces no token files."""

    error_code = "EMPTY_SELECTION"

    def __init__(self, message: str = "No collections or styles selected") -> None:
        super().__init__(message)


class ExportFailedError(ExportError):
    """Raised when conversion fails unexpectedly."""

    error_code = "EXPORT_FAILED"
    status_code = 500

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Export failed: {reason}",
            context={"reason": reason},
        )


# =============================================================================
# Document Errors
# =============================================================================


class DocumentError(DTCGExporterError):
    """Base exception for extracted-document errors."""

    error_code = "DOCUMENT_ERROR"
    status_code = 400


class DocumentNotFoundError(DocumentError):
    """Raised when a document file cannot be found."""

    error_code = "DOCUMENT_NOT_FOUND"
    status_code = 404

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Document not found: {path}",
            context={"path": path},
        )


class InvalidDocumentError(DocumentError):
    """Raised when an extracted document cannot be parsed."""

    error_code = "INVALID_DOCUMENT"
    status_code = 422

    def __init__(self, reason: str, *, location: str | None = None) -> None:
        context: dict[str, Any] = {"reason": reason}
        if location:
            context["location"] = location
        super().__init__(f"Invalid document: {reason}", context=context)
