"""In-memory merge functionality for :mod:`pdfstitch`."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .appender import append_pdf_pages
from .backends import PDFBackend, default_backend
from .exceptions import PdfMergeError
from .types import AppendResult
from .utils import BufferLike, ensure_bytes

LOGGER = logging.getLogger("pdfstitch.merge")


def _as_sequence(sources: Iterable[BufferLike]) -> list[BufferLike]:
    if sources is None or isinstance(sources, (bytes, bytearray, memoryview, str)):
        raise TypeError("sources must be an iterable of PDF buffers")
    return list(sources)


def merge_pdfs(
    sources: Iterable[BufferLike],
    *,
    backend: Optional[PDFBackend] = None,
) -> bytes:
    """Merge *sources* into a single PDF and return its bytes.

    Pages appear in the order the sources are given. An empty iterable
    produces a valid document without pages.

    Args:
        sources: PDF buffers to merge.
        backend: PDF backend to use; defaults to :class:`PypdfBackend`.

    Raises:
        PdfMergeError: On the first source that cannot be appended, or if
            the merged document cannot be serialized. Remaining sources are
            not processed and no partial output is produced.
    """

    merged, _ = merge_pdfs_with_count(sources, backend=backend)
    return merged


def merge_pdfs_with_count(
    sources: Iterable[BufferLike],
    *,
    backend: Optional[PDFBackend] = None,
) -> tuple[bytes, int]:
    """Like :func:`merge_pdfs`, but also return the merged page count."""

    backend = backend or default_backend()
    try:
        buffers = _as_sequence(sources)
    except TypeError as exc:
        raise PdfMergeError.wrap(exc) from exc

    target = backend.create()
    total_pages = 0

    for position, buffer in enumerate(buffers, start=1):
        LOGGER.debug("Appending source %d of %d", position, len(buffers))
        result = append_pdf_pages(buffer, target, backend=backend)
        if not result.success:
            LOGGER.error("Source %d of %d could not be appended: %s", position, len(buffers), result.error)
            raise PdfMergeError.wrap(result.error) from result.error
        total_pages += result.pages_added

    try:
        merged = target.save()
    except Exception as exc:
        raise PdfMergeError.wrap(exc) from exc

    LOGGER.info("Merged %d PDF buffer(s) into %d page(s)", len(buffers), total_pages)
    return merged, total_pages


def merge_pdf_buffers(*sources: BufferLike, backend: Optional[PDFBackend] = None) -> bytes:
    """Variadic form of :func:`merge_pdfs`: ``merge_pdf_buffers(a, b, c)``."""

    return merge_pdfs(sources, backend=backend)


def append_pdfs(
    source: BufferLike,
    target: BufferLike,
    *,
    backend: Optional[PDFBackend] = None,
) -> AppendResult:
    """Append the pages of *source* to the PDF in *target*.

    Returns an :class:`AppendResult` holding the new document bytes. On
    failure the original *target* bytes are returned with ``success=False``.
    """

    backend = backend or default_backend()
    try:
        target_bytes = ensure_bytes(target)
    except TypeError as exc:
        return AppendResult(buffer=b"", success=False, error=exc)

    try:
        document = backend.open_target(target_bytes)
        result = append_pdf_pages(source, document, backend=backend)
        if not result.success:
            return AppendResult(buffer=target_bytes, success=False, error=result.error)
        buffer = document.save()
    except Exception as exc:
        LOGGER.error("Failed to append PDF: %s", exc)
        return AppendResult(buffer=target_bytes, success=False, error=exc)

    LOGGER.info("Appended %d page(s) to target PDF", result.pages_added)
    return AppendResult(buffer=buffer, success=True, pages_added=result.pages_added)


__all__ = ["merge_pdfs", "merge_pdfs_with_count", "merge_pdf_buffers", "append_pdfs"]
