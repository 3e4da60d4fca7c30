"""pypdf backend implementation for pdfstitch."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import PdfCopyError, PdfLoadError, PdfSerializeError
from .base import PageHandle, PDFBackend, SourceDocument

LOGGER = logging.getLogger("pdfstitch.backends")


@dataclass
class PypdfSourceDocument(SourceDocument):
    reader: PdfReader

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]


class PypdfTargetDocument:
    """Target document backed by a :class:`pypdf.PdfWriter`."""

    def __init__(self, writer: PdfWriter | None = None) -> None:
        self.writer = writer if writer is not None else PdfWriter()

    @property
    def page_count(self) -> int:
        return len(self.writer.pages)

    def get_page_indices(self) -> list[int]:
        return list(range(self.page_count))

    def copy_pages(self, source: SourceDocument, indices: Sequence[int]) -> list[PageHandle]:
        if not isinstance(source, PypdfSourceDocument):
            raise PdfCopyError(
                f"Cannot copy pages from {type(source).__name__} into a pypdf document"
            )
        handles: list[PageHandle] = []
        for index in indices:
            try:
                page = source.get_page(index)
            except IndexError as exc:
                raise PdfCopyError(
                    f"Page index {index} is out of range for a {source.page_count}-page document"
                ) from exc
            except Exception as exc:  # pragma: no cover - dependency exceptions vary
                raise PdfCopyError(f"Unable to copy page {index}: {exc}") from exc
            handles.append(PageHandle(owner=self, index=index, page=page))
        return handles

    def add_page(self, handle: PageHandle) -> None:
        if handle.owner is not self:
            raise PdfCopyError("Page handle belongs to a different document")
        try:
            self.writer.add_page(handle.page)
        except Exception as exc:
            raise PdfCopyError(f"Unable to add page {handle.index}: {exc}") from exc

    def save(self) -> bytes:
        buffer = io.BytesIO()
        try:
            self.writer.write(buffer)
        except Exception as exc:
            LOGGER.error("Failed to serialize PDF: %s", exc)
            raise PdfSerializeError(f"Unable to serialize PDF: {exc}") from exc
        return buffer.getvalue()


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def _read(self, data: bytes) -> PdfReader:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise PdfLoadError(f"Corrupted or invalid PDF data. Error: {exc}") from exc
        except Exception as exc:
            raise PdfLoadError(f"Unexpected error reading PDF data. Error: {exc}") from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF with an empty password")
            try:
                if reader.decrypt("") == 0:
                    raise PdfLoadError("PDF is encrypted and cannot be opened without a password.")
            except PdfLoadError:
                raise
            except Exception as exc:  # pragma: no cover - decrypt errors vary
                raise PdfLoadError(f"Unable to decrypt encrypted PDF. Error: {exc}") from exc
        return reader

    def load(self, data: bytes) -> PypdfSourceDocument:
        reader = self._read(data)
        # pypdf resolves the page tree lazily; count now so a broken tree is a load error.
        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise PdfLoadError(f"Unable to read page tree. Error: {exc}") from exc
        LOGGER.debug("Loaded PDF with %d page(s) from %d bytes", num_pages, len(data))
        return PypdfSourceDocument(page_count=num_pages, reader=reader)

    def create(self) -> PypdfTargetDocument:
        return PypdfTargetDocument()

    def open_target(self, data: bytes) -> PypdfTargetDocument:
        reader = self._read(data)
        try:
            writer = PdfWriter(clone_from=reader)
        except Exception as exc:
            raise PdfLoadError(f"Unable to open target PDF. Error: {exc}") from exc
        return PypdfTargetDocument(writer)
