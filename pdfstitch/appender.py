"""Append the pages of one PDF buffer to a target document."""

from __future__ import annotations

import logging
from typing import Optional

from .backends import PDFBackend, TargetDocument, default_backend
from .types import OperationResult
from .utils import BufferLike, ensure_bytes

LOGGER = logging.getLogger("pdfstitch.append")


def append_pdf_pages(
    source: BufferLike,
    target: TargetDocument,
    *,
    backend: Optional[PDFBackend] = None,
) -> OperationResult:
    """Append every page of *source* to *target*, in source order.

    The result reports failures instead of raising so the caller can decide
    whether to abort. A source without pages succeeds with ``pages_added=0``
    and leaves *target* untouched.
    """

    backend = backend or default_backend()
    try:
        document = backend.load(ensure_bytes(source))
        indices = document.get_page_indices()
        if not indices:
            LOGGER.debug("Source PDF has no pages; nothing to append")
            return OperationResult(success=True, pages_added=0)

        handles = target.copy_pages(document, indices)
        for handle in handles:
            LOGGER.debug("Adding page %s to target document", handle.index)
            target.add_page(handle)
    except Exception as exc:
        LOGGER.debug("Failed to append PDF pages: %s", exc)
        return OperationResult(success=False, pages_added=0, error=exc)

    return OperationResult(success=True, pages_added=len(handles))


__all__ = ["append_pdf_pages"]
