"""
Result types returned by pdfstitch operations.

Append and disk operations report failures through these dataclasses
instead of raising, so callers can decide whether to abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of appending one source document to a target.

    Attributes:
        success: Whether all pages were appended
        pages_added: Number of pages copied from the source (0 on failure)
        error: The exception that caused the failure, if any
    """
    success: bool
    pages_added: int = 0
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class AppendResult:
    """Outcome of appending a source buffer onto a target buffer."""

    buffer: bytes
    success: bool
    pages_added: int = 0
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class DirectoryResult:
    success: bool
    path: Path
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class SaveResult:
    """
    Outcome of writing a PDF to disk.

    Attributes:
        success: Whether the file was written
        path: The resolved output path
        error: The exception that caused the failure, if any
    """
    success: bool
    path: Path
    error: Optional[BaseException] = None

    @property
    def message(self) -> str:
        if self.success:
            return f"PDF successfully saved to {self.path}"
        return f"Failed to save PDF to {self.path}: {self.error}"


class MergeMode(str, Enum):
    """How a disk merge treats inputs that cannot be read or parsed."""

    STRICT = "strict"
    BEST_EFFORT = "best_effort"


@dataclass
class MergeSummary:
    """
    Result of a disk merge.

    Attributes:
        success: Whether an output file was written
        path: The resolved output path
        mode: The merge mode that produced this summary
        merged: Input files whose pages made it into the output
        skipped: Input files left out of the output (best-effort only)
        warnings: One human-readable message per skipped file
        total_pages: Page count of the written document
        error: The exception that caused the failure, if any
    """
    success: bool
    path: Path
    mode: MergeMode = MergeMode.STRICT
    merged: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    total_pages: int = 0
    error: Optional[BaseException] = None


__all__ = [
    "OperationResult",
    "AppendResult",
    "DirectoryResult",
    "SaveResult",
    "MergeMode",
    "MergeSummary",
]
