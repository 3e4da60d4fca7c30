"""Disk-facing wrappers around the in-memory merge.

Every function takes an explicit :class:`StitchConfig`; relative paths are
resolved against its ``base_dir`` and outputs are checked against its
base-directory policy. Failures are reported in the returned result objects.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .appender import append_pdf_pages
from .backends import PDFBackend, TargetDocument, default_backend
from .config import StitchConfig, check_within_base_dir, resolve_path
from .exceptions import PdfMergeError, PdfStitchError
from .merger import merge_pdfs_with_count
from .types import DirectoryResult, MergeMode, MergeSummary, SaveResult
from .utils import BufferLike, PathLike, ensure_bytes, ensure_iterable

LOGGER = logging.getLogger("pdfstitch.disk")


def ensure_directory_exists(
    dir_path: PathLike,
    config: Optional[StitchConfig] = None,
) -> DirectoryResult:
    """Create *dir_path* (and its parents) unless it already exists."""

    config = config or StitchConfig()
    path = resolve_path(dir_path, config)

    if path.is_dir():
        return DirectoryResult(success=True, path=path)

    if not config.create_dirs_if_missing:
        LOGGER.error("Directory %s is missing and creation is disabled", path)
        return DirectoryResult(
            success=False,
            path=path,
            error=PdfStitchError("Directory creation disabled in configuration"),
        )

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        # Another process may have created it in the meantime.
        if path.is_dir():
            return DirectoryResult(success=True, path=path)
        LOGGER.error("Failed to create directory %s: %s", path, exc)
        return DirectoryResult(success=False, path=path, error=exc)

    LOGGER.debug("Created directory %s", path)
    return DirectoryResult(success=True, path=path)


def save_pdf(
    buffer: BufferLike,
    output_path: PathLike,
    config: Optional[StitchConfig] = None,
) -> SaveResult:
    """Write *buffer* to *output_path*, creating parent directories as needed."""

    config = config or StitchConfig()
    resolved = resolve_path(output_path, config)
    try:
        check_within_base_dir(resolved, config)
        data = ensure_bytes(buffer)
    except (PdfStitchError, TypeError) as exc:
        return SaveResult(success=False, path=resolved, error=exc)

    directory = ensure_directory_exists(resolved.parent, config)
    if not directory.success:
        return SaveResult(success=False, path=resolved, error=directory.error)

    try:
        resolved.write_bytes(data)
    except OSError as exc:
        LOGGER.error("Failed to write PDF to %s: %s", resolved, exc)
        return SaveResult(success=False, path=resolved, error=exc)

    LOGGER.info("Saved %d bytes to %s", len(data), resolved)
    return SaveResult(success=True, path=resolved)


def _resolve_inputs(paths: Iterable[PathLike], config: StitchConfig) -> list[Path]:
    return [resolve_path(path, config) for path in ensure_iterable(paths)]


def _failed(output: Path, mode: MergeMode, error: BaseException) -> MergeSummary:
    return MergeSummary(success=False, path=output, mode=mode, error=error)


def _write_merged(
    merged: bytes,
    output: Path,
    config: StitchConfig,
    summary: MergeSummary,
) -> MergeSummary:
    saved = save_pdf(merged, output, config)
    summary.success = saved.success
    summary.error = saved.error
    return summary


def merge_pdfs_from_disk(
    pdf_paths: Iterable[PathLike],
    output_path: PathLike,
    config: Optional[StitchConfig] = None,
    *,
    backend: Optional[PDFBackend] = None,
) -> MergeSummary:
    """Merge the PDFs at *pdf_paths* into *output_path*, failing fast.

    Every input is read before merging; the first unreadable or unparseable
    input aborts the merge and nothing is written.
    """

    config = config or StitchConfig()
    backend = backend or default_backend()
    output = resolve_path(output_path, config)

    try:
        check_within_base_dir(output, config)
        inputs = _resolve_inputs(pdf_paths, config)
    except (PdfStitchError, TypeError) as exc:
        return _failed(output, MergeMode.STRICT, PdfMergeError.wrap(exc))

    buffers: list[bytes] = []
    for pdf_path in inputs:
        LOGGER.debug("Reading input PDF %s", pdf_path)
        try:
            buffers.append(pdf_path.read_bytes())
        except OSError as exc:
            LOGGER.error("Failed to read %s: %s", pdf_path, exc)
            return _failed(output, MergeMode.STRICT, PdfMergeError.wrap(exc))

    try:
        merged, total_pages = merge_pdfs_with_count(buffers, backend=backend)
    except PdfMergeError as exc:
        return _failed(output, MergeMode.STRICT, exc)

    summary = MergeSummary(
        success=False,
        path=output,
        mode=MergeMode.STRICT,
        merged=list(inputs),
        total_pages=total_pages,
    )
    summary = _write_merged(merged, output, config, summary)
    if summary.success:
        LOGGER.info("Merged %d PDF(s) into %s", len(inputs), output)
    return summary


def _rebuild_target(buffers: list[bytes], backend: PDFBackend) -> TargetDocument:
    target = backend.create()
    for buffer in buffers:
        result = append_pdf_pages(buffer, target, backend=backend)
        if not result.success:
            raise PdfMergeError.wrap(result.error) from result.error
    return target


def merge_pdfs_best_effort(
    pdf_paths: Iterable[PathLike],
    output_path: PathLike,
    config: Optional[StitchConfig] = None,
    *,
    backend: Optional[PDFBackend] = None,
) -> MergeSummary:
    """Merge whichever of *pdf_paths* can be read into *output_path*.

    Inputs that are missing, unreadable, unparseable or fail to append are
    skipped and listed in ``warnings``. When an append fails part way, the
    target is rebuilt from the inputs accepted so far, so no skipped input
    contributes pages. The merge fails only when inputs were given but none
    of them could be used, or when the output cannot be written.
    """

    config = config or StitchConfig()
    backend = backend or default_backend()
    output = resolve_path(output_path, config)

    try:
        check_within_base_dir(output, config)
        inputs = _resolve_inputs(pdf_paths, config)
    except (PdfStitchError, TypeError) as exc:
        return _failed(output, MergeMode.BEST_EFFORT, PdfMergeError.wrap(exc))

    summary = MergeSummary(success=False, path=output, mode=MergeMode.BEST_EFFORT)
    accepted: list[bytes] = []
    target = backend.create()
    for pdf_path in inputs:
        LOGGER.debug("Reading input PDF %s", pdf_path)
        try:
            data = pdf_path.read_bytes()
        except FileNotFoundError:
            warning = f"Skipped {pdf_path}: file not found"
        except OSError as exc:
            warning = f"Skipped {pdf_path}: {exc}"
        else:
            result = append_pdf_pages(data, target, backend=backend)
            if result.success:
                accepted.append(data)
                summary.merged.append(pdf_path)
                summary.total_pages += result.pages_added
                continue
            warning = f"Skipped {pdf_path}: {result.error}"
            if target.page_count != summary.total_pages:
                LOGGER.debug("Rebuilding target after partial append of %s", pdf_path)
                try:
                    target = _rebuild_target(accepted, backend)
                except PdfMergeError as exc:
                    summary.error = exc
                    return summary

        LOGGER.warning("%s", warning)
        summary.skipped.append(pdf_path)
        summary.warnings.append(warning)

    if inputs and not accepted:
        summary.error = PdfMergeError.wrap(
            PdfStitchError(f"none of the {len(inputs)} input PDF(s) could be read")
        )
        return summary

    try:
        merged = target.save()
    except Exception as exc:
        summary.error = PdfMergeError.wrap(exc)
        return summary

    summary = _write_merged(merged, output, config, summary)
    if summary.success:
        LOGGER.info(
            "Merged %d PDF(s) into %s, skipped %d",
            len(summary.merged),
            output,
            len(summary.skipped),
        )
    return summary


def merge_files(
    pdf_paths: Iterable[PathLike],
    output_path: PathLike,
    config: Optional[StitchConfig] = None,
    *,
    mode: MergeMode = MergeMode.STRICT,
    backend: Optional[PDFBackend] = None,
) -> MergeSummary:
    """Merge files from disk using the strict or best-effort *mode*."""

    mode = MergeMode(mode)
    if mode is MergeMode.BEST_EFFORT:
        return merge_pdfs_best_effort(pdf_paths, output_path, config, backend=backend)
    return merge_pdfs_from_disk(pdf_paths, output_path, config, backend=backend)


__all__ = [
    "ensure_directory_exists",
    "save_pdf",
    "merge_pdfs_from_disk",
    "merge_pdfs_best_effort",
    "merge_files",
]
