"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class PageHandle:
    """Opaque reference to a page copied into ``owner``.

    A handle may only be added to the document that produced it.
    """

    owner: object
    index: int
    page: object


@dataclass
class SourceDocument:
    """A loaded, read-only PDF document."""

    page_count: int

    def get_page_indices(self) -> list[int]:
        return list(range(self.page_count))


class TargetDocument(Protocol):
    """Mutable, append-only document that accumulates pages."""

    @property
    def page_count(self) -> int:
        """Number of pages currently in the document."""

    def get_page_indices(self) -> list[int]:
        """Return the indices of the pages currently in the document."""

    def copy_pages(self, source: SourceDocument, indices: Sequence[int]) -> list[PageHandle]:
        """Return handles bound to this document for *indices* of *source*."""

    def add_page(self, handle: PageHandle) -> None:
        """Append the page behind *handle* to this document."""

    def save(self) -> bytes:
        """Serialize the document to PDF bytes."""


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, data: bytes) -> SourceDocument:
        """Parse *data* and return a source document."""

    def create(self) -> TargetDocument:
        """Return a new, empty target document."""

    def open_target(self, data: bytes) -> TargetDocument:
        """Parse *data* into a target document that pages can be added to."""
