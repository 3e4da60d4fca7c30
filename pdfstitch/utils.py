"""Utility helpers shared by pdfstitch modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]
BufferLike = Union[bytes, bytearray, memoryview]


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path* with ``~`` expanded."""

    return Path(path).expanduser()


def ensure_iterable(paths: Iterable[PathLike]) -> list[Path]:
    """Validate and convert an iterable of paths to :class:`Path` objects."""

    if paths is None or isinstance(paths, (str, bytes)):
        raise TypeError("paths must be an iterable of file paths")
    return [ensure_path(path) for path in paths]


def ensure_bytes(data: BufferLike) -> bytes:
    """Return *data* as immutable :class:`bytes`."""

    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a bytes-like PDF buffer, got {type(data).__name__}")


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 B")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


__all__ = [
    "PathLike",
    "BufferLike",
    "get_logger",
    "ensure_path",
    "ensure_iterable",
    "ensure_bytes",
    "format_file_size",
]
