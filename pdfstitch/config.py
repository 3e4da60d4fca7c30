"""Configuration values for disk-facing pdfstitch operations."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .exceptions import OutsideBaseDirectoryError
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdfstitch.config")


def _cwd() -> Path:
    return Path.cwd()


@dataclass(frozen=True)
class StitchConfig:
    """
    Settings shared by path resolution and disk writes.

    A config is an immutable value. Every disk operation receives one
    explicitly, so concurrent callers can use different settings.

    Attributes:
        base_dir: Directory that relative paths resolve against
        allow_outside_base_dir: Whether outputs may be written outside base_dir
        create_dirs_if_missing: Whether missing output directories are created
    """
    base_dir: Path = field(default_factory=_cwd)
    allow_outside_base_dir: bool = False
    create_dirs_if_missing: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_dir", ensure_path(self.base_dir).resolve())

    @property
    def default_output_dir(self) -> Path:
        return self.base_dir / "output"

    @property
    def pdf_dir(self) -> Path:
        return self.base_dir / "output" / "pdfs"


def configure(config: Optional[StitchConfig] = None, **changes: Any) -> StitchConfig:
    """Return a new config with *changes* applied on top of *config*.

    Unknown option names raise :class:`TypeError`. ``None`` values are
    ignored so CLI options that were not supplied keep their defaults.
    """

    base = config if config is not None else StitchConfig()
    updates = {key: value for key, value in changes.items() if value is not None}
    known = {item.name for item in dataclasses.fields(StitchConfig)}
    unknown = sorted(set(updates) - known)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(unknown)}")
    if updates:
        LOGGER.debug("Applying configuration changes: %s", updates)
    return dataclasses.replace(base, **updates)


def resolve_path(path: PathLike, config: StitchConfig) -> Path:
    """Resolve *path* against ``config.base_dir`` unless it is absolute."""

    candidate = ensure_path(path)
    if not candidate.is_absolute():
        candidate = config.base_dir / candidate
    return candidate.resolve()


def is_within_base_dir(path: PathLike, config: StitchConfig) -> bool:
    resolved = resolve_path(path, config)
    try:
        resolved.relative_to(config.base_dir)
    except ValueError:
        return False
    return True


def check_within_base_dir(path: PathLike, config: StitchConfig) -> Path:
    """Return the resolved *path*, enforcing the base-directory policy.

    Raises:
        OutsideBaseDirectoryError: If the path lies outside ``base_dir`` and
            the config does not allow that.
    """

    resolved = resolve_path(path, config)
    if not config.allow_outside_base_dir and not is_within_base_dir(resolved, config):
        LOGGER.error("Refusing path %s outside base directory %s", resolved, config.base_dir)
        raise OutsideBaseDirectoryError(
            f"Path {resolved} is outside the base directory {config.base_dir}"
        )
    return resolved


__all__ = [
    "StitchConfig",
    "configure",
    "resolve_path",
    "is_within_base_dir",
    "check_within_base_dir",
]
