"""
Custom exceptions for pdfstitch.

Load, copy and serialize failures are raised by the backend and caught by
the append step. Merge operations surface them as a single
:class:`PdfMergeError` whose message always starts with
:data:`MERGE_ERROR_PREFIX`.
"""

from __future__ import annotations

MERGE_ERROR_PREFIX = "Failed to merge PDFs"
UNKNOWN_MERGE_ERROR = "Unknown error during PDF merge"


class PdfStitchError(Exception):
    """Base exception for all pdfstitch errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pdfstitch error occurred."


class PdfLoadError(PdfStitchError):
    """Raised when a source buffer cannot be parsed as a PDF."""

    @property
    def default_message(self) -> str:
        return "Unable to load PDF data."


class PdfCopyError(PdfStitchError):
    """Raised when pages cannot be copied into a target document."""

    @property
    def default_message(self) -> str:
        return "Unable to copy pages into the target document."


class PdfSerializeError(PdfStitchError):
    """Raised when a document cannot be written to bytes."""

    @property
    def default_message(self) -> str:
        return "Unable to serialize PDF document."


class OutsideBaseDirectoryError(PdfStitchError):
    """Raised when a path escapes the configured base directory."""

    @property
    def default_message(self) -> str:
        return "Path is outside the configured base directory."


class PdfMergeError(PdfStitchError):
    """Raised when a merge fails for any reason.

    ``cause`` holds the underlying exception, if there was one.
    """

    def __init__(self, message: str = "", cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    @classmethod
    def wrap(cls, error: BaseException | None) -> "PdfMergeError":
        detail = str(error) if error is not None else ""
        if not detail:
            detail = UNKNOWN_MERGE_ERROR
        return cls(f"{MERGE_ERROR_PREFIX}: {detail}", cause=error)

    @property
    def default_message(self) -> str:
        return f"{MERGE_ERROR_PREFIX}: {UNKNOWN_MERGE_ERROR}"


__all__ = [
    "MERGE_ERROR_PREFIX",
    "UNKNOWN_MERGE_ERROR",
    "PdfStitchError",
    "PdfLoadError",
    "PdfCopyError",
    "PdfSerializeError",
    "OutsideBaseDirectoryError",
    "PdfMergeError",
]
