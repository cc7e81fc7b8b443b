"""Per-conversion temporary file tracking and cleanup."""

from __future__ import annotations

import contextlib
import logging
import uuid
from pathlib import Path
from typing import Iterator, List

from .types import PathLike

_LOGGER = logging.getLogger("htmltopdfx.workspace")


class WorkEnvironment:
    """Temporary artifacts created while running a single conversion.

    Instances are never shared between conversions; every file recorded here
    is removed by :meth:`cleanup`.
    """

    def __init__(self, temp_folder: PathLike, inline_via_stdin: bool = False) -> None:
        self.temp_folder = Path(temp_folder)
        self.inline_via_stdin = inline_via_stdin
        self.temp_files: List[Path] = []
        self.stdin_payloads: List[str] = []

    def unique_path(self, extension: str) -> Path:
        """Return a fresh path inside the temp folder with *extension*."""

        return self.temp_folder / f"{uuid.uuid4().hex}{extension}"

    def create_temp_file(self, contents: str, extension: str) -> Path:
        """Write *contents* to a new tracked temp file and return its path."""

        path = self.unique_path(extension)
        self.temp_folder.mkdir(parents=True, exist_ok=True)
        self.track(path)
        path.write_text(contents, encoding="utf-8")
        _LOGGER.debug("Created temporary file %s (%d chars)", path, len(contents))
        return path

    def track(self, path: PathLike) -> Path:
        """Register *path* for removal during cleanup."""

        tracked = Path(path)
        self.temp_files.append(tracked)
        return tracked

    def cleanup(self) -> None:
        """Delete every tracked file that still exists."""

        for path in self.temp_files:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                _LOGGER.warning("Failed to remove temporary file %s: %s", path, exc)
            else:
                _LOGGER.debug("Removed temporary file %s", path)
        self.temp_files.clear()
        self.stdin_payloads.clear()


@contextlib.contextmanager
def work_environment(
    temp_folder: PathLike, inline_via_stdin: bool = False
) -> Iterator[WorkEnvironment]:
    """Yield a :class:`WorkEnvironment` that is cleaned up on every exit path."""

    work_env = WorkEnvironment(temp_folder, inline_via_stdin=inline_via_stdin)
    work_env.temp_folder.mkdir(parents=True, exist_ok=True)
    try:
        yield work_env
    finally:
        work_env.cleanup()
