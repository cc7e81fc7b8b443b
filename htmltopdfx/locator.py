"""Discovery of the wkhtmltopdf executable."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .utils import which

_LOGGER = logging.getLogger("htmltopdfx.locator")

EXECUTABLE_NAME = "wkhtmltopdf.exe" if sys.platform.startswith("win") else "wkhtmltopdf"

_POSIX_FOLDERS = (
    "/usr/local/bin",
    "/usr/bin",
    "/opt/homebrew/bin",
    "/opt/wkhtmltopdf/bin",
)


def _standard_locations() -> List[Path]:
    if not sys.platform.startswith("win"):
        return [Path(folder) / EXECUTABLE_NAME for folder in _POSIX_FOLDERS]

    locations: List[Path] = []
    for variable in ("ProgramFiles", "ProgramFiles(x86)"):
        program_files = os.environ.get(variable)
        if program_files:
            locations.append(Path(program_files) / "wkhtmltopdf" / EXECUTABLE_NAME)
            locations.append(Path(program_files) / "wkhtmltopdf" / "bin" / EXECUTABLE_NAME)
    locations.append(Path(r"C:\Program Files\wkhtmltopdf\bin") / EXECUTABLE_NAME)
    return locations


def candidate_paths(install_folder: Optional[str] = None) -> List[Path]:
    """Return the absolute locations checked, in search order."""

    candidates: List[Path] = []
    if install_folder:
        candidates.append(Path(install_folder) / EXECUTABLE_NAME)
    candidates.extend(_standard_locations())
    return candidates


def locate_executable(install_folder: Optional[str] = None) -> str:
    """Return the wkhtmltopdf executable to run.

    *install_folder* is checked first, then the platform's standard install
    locations, then ``PATH``. When nothing is found the bare executable name
    is returned and left for the operating system to resolve.
    """

    for candidate in candidate_paths(install_folder):
        if candidate.is_file():
            _LOGGER.debug("Using wkhtmltopdf at %s", candidate)
            return str(candidate)

    found = which((EXECUTABLE_NAME,))
    if found:
        return found

    _LOGGER.debug("wkhtmltopdf not found in standard locations, relying on PATH")
    return EXECUTABLE_NAME
