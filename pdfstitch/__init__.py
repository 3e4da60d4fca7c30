"""
pdfstitch - Merge and append PDF documents in memory or on disk.

All PDF parsing and serialization is delegated to a backend (``pypdf`` by
default); this package orchestrates which pages go where and how failures
are reported.

Quick Start:
    >>> from pdfstitch import merge_pdfs
    >>> merged = merge_pdfs([first_bytes, second_bytes])

In-memory operations:
    - merge_pdfs: Merge a sequence of PDF buffers, failing fast
    - merge_pdf_buffers: Variadic form of merge_pdfs
    - merge_pdfs_with_count: merge_pdfs that also reports the page count
    - append_pdfs: Append one PDF buffer onto another
    - append_pdf_pages: Append a buffer's pages to an open target document

Disk operations (take an explicit StitchConfig):
    - merge_pdfs_from_disk: Strict merge of files
    - merge_pdfs_best_effort: Merge files, skipping unreadable ones
    - save_pdf / ensure_directory_exists

For CLI usage, use the 'pdfstitch' command after installation.
"""

from pdfstitch.appender import append_pdf_pages
from pdfstitch.merger import append_pdfs, merge_pdf_buffers, merge_pdfs, merge_pdfs_with_count

from pdfstitch.config import StitchConfig, configure, resolve_path
from pdfstitch.disk import (
    ensure_directory_exists,
    merge_files,
    merge_pdfs_best_effort,
    merge_pdfs_from_disk,
    save_pdf,
)

from pdfstitch.types import (
    AppendResult,
    DirectoryResult,
    MergeMode,
    MergeSummary,
    OperationResult,
    SaveResult,
)

from pdfstitch.exceptions import (
    MERGE_ERROR_PREFIX,
    OutsideBaseDirectoryError,
    PdfCopyError,
    PdfLoadError,
    PdfMergeError,
    PdfSerializeError,
    PdfStitchError,
)

__version__ = "1.0.0"

__all__ = [
    # In-memory operations
    "merge_pdfs",
    "merge_pdf_buffers",
    "merge_pdfs_with_count",
    "append_pdfs",
    "append_pdf_pages",
    # Disk operations
    "merge_pdfs_from_disk",
    "merge_pdfs_best_effort",
    "merge_files",
    "save_pdf",
    "ensure_directory_exists",
    # Configuration
    "StitchConfig",
    "configure",
    "resolve_path",
    # Data types
    "OperationResult",
    "AppendResult",
    "DirectoryResult",
    "SaveResult",
    "MergeMode",
    "MergeSummary",
    # Exceptions
    "MERGE_ERROR_PREFIX",
    "PdfStitchError",
    "PdfLoadError",
    "PdfCopyError",
    "PdfSerializeError",
    "PdfMergeError",
    "OutsideBaseDirectoryError",
    "__version__",
]
