"""
Type definitions and dataclasses for htmltopdfx.

This module defines the output targets, the conversion environment and the
result structures used throughout the library.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, Callable, Optional, Union

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .document import PdfDocument

PathLike = Union[str, os.PathLike]
OutputCallback = Callable[["PdfDocument", bytes], None]

DEFAULT_TIMEOUT = 60.0


@dataclass
class PdfOutput:
    """
    Where the generated PDF is delivered.

    Any combination of targets may be requested at once.

    Attributes:
        output_file_path: Path the PDF is written to and kept at
        output_stream: Binary stream the PDF bytes are copied to
        output_callback: Called with the document and the PDF bytes
    """

    output_file_path: Optional[PathLike] = None
    output_stream: Optional[IO[bytes]] = None
    output_callback: Optional[OutputCallback] = None

    def is_empty(self) -> bool:
        return (
            self.output_file_path is None
            and self.output_stream is None
            and self.output_callback is None
        )


@dataclass
class PdfConvertEnvironment:
    """
    Conversion environment. Unset fields are resolved per conversion.

    Attributes:
        temp_folder_path: Folder for temporary files (default system temp dir)
        wkhtmltopdf_path: Executable to run (default: located automatically)
        install_folder: Folder searched first when locating the executable
        timeout: Seconds to wait for wkhtmltopdf (default 60)
        inline_via_stdin: Feed the first inline page through standard input
    """

    temp_folder_path: Optional[str] = None
    wkhtmltopdf_path: Optional[str] = None
    install_folder: Optional[str] = None
    timeout: Optional[float] = None
    inline_via_stdin: bool = False


@dataclass
class ConversionResult:
    """
    Result of a conversion.

    Attributes:
        output_path: Kept output file, ``None`` when the output was temporary
        exit_code: Exit code reported by wkhtmltopdf
        stdout: Captured standard output
        stderr: Captured standard error
        command_line: Command line that was executed
    """

    output_path: Optional[Path]
    exit_code: int
    stdout: str
    stderr: str
    command_line: str

    @property
    def has_warnings(self) -> bool:
        return self.exit_code != 0

    def __str__(self) -> str:
        """String representation of the result."""
        return (
            f"ConversionResult(output={self.output_path}, exit_code={self.exit_code}, "
            f"warnings={self.has_warnings})"
        )


@dataclass
class PdfInfo:
    """
    Summary of a generated PDF.

    Attributes:
        num_pages: Number of pages
        file_size: File size in bytes
        title: Title metadata, if any
    """

    num_pages: int
    file_size: int
    title: Optional[str] = None
