"""Backend abstractions for pdfstitch."""

from .base import PageHandle, PDFBackend, SourceDocument, TargetDocument
from .pypdf_backend import PypdfBackend, PypdfSourceDocument, PypdfTargetDocument


def default_backend() -> PDFBackend:
    return PypdfBackend()


__all__ = [
    "PageHandle",
    "PDFBackend",
    "SourceDocument",
    "TargetDocument",
    "PypdfBackend",
    "PypdfSourceDocument",
    "PypdfTargetDocument",
    "default_backend",
]
