"""Utility helpers for :mod:`htmltopdfx`."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional, Sequence

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .exceptions import HtmlToPdfError
from .types import PathLike, PdfInfo

_LOGGER = logging.getLogger("htmltopdfx")


def resolve_path(path: PathLike) -> Path:
    """Resolve *path* into an absolute :class:`~pathlib.Path`."""

    resolved = Path(path).expanduser().resolve()
    _LOGGER.debug("Resolved path '%s' to '%s'", path, resolved)
    return resolved


def ensure_parent_dir(path: Path) -> None:
    """Create parent directory for *path* if it does not exist."""

    path.parent.mkdir(parents=True, exist_ok=True)


def which(executables: Sequence[str]) -> Optional[str]:
    """Return the first executable from *executables* found on ``PATH``."""

    for candidate in executables:
        found = shutil.which(candidate)
        if found:
            _LOGGER.debug("Detected external tool: %s -> %s", candidate, found)
            return found
    return None


def get_pdf_info(pdf_path: PathLike) -> PdfInfo:
    """Return page count, size and title of a generated PDF."""

    path = Path(pdf_path)
    try:
        reader = PdfReader(str(path))
    except (OSError, PdfReadError) as exc:
        raise HtmlToPdfError(f"Unable to read PDF file: {path}. Error: {exc}") from exc

    metadata = reader.metadata
    return PdfInfo(
        num_pages=len(reader.pages),
        file_size=path.stat().st_size,
        title=metadata.title if metadata else None,
    )


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
