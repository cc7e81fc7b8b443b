"""
Custom exceptions for htmltopdfx.

This module defines all custom exceptions raised by the conversion pipeline.
"""

from __future__ import annotations

from typing import Optional


class HtmlToPdfError(Exception):
    """Base exception for all htmltopdfx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown HTML to PDF conversion error occurred."


class ValidationError(HtmlToPdfError):
    """Raised when a document or output definition is incomplete."""

    @property
    def default_message(self) -> str:
        return "Invalid conversion request."


class ExecutableNotFoundError(HtmlToPdfError):
    """Raised when the configured wkhtmltopdf executable does not exist."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(
            message
            or f"File '{path}' not found. Check if wkhtmltopdf application is installed."
        )

    @property
    def default_message(self) -> str:
        return "wkhtmltopdf executable not found."


class ConversionFailedError(HtmlToPdfError):
    """Raised when wkhtmltopdf exits with an error and produced no output."""

    def __init__(
        self,
        stderr: str = "",
        command_line: str = "",
        exit_code: Optional[int] = None,
    ) -> None:
        self.stderr = stderr
        self.command_line = command_line
        self.exit_code = exit_code
        super().__init__(
            "Html to PDF conversion failed. Wkhtmltopdf output: \n"
            f"{stderr}\nCommand line: {command_line}"
        )

    @property
    def default_message(self) -> str:
        return "Html to PDF conversion failed."


class ConversionTimeoutError(HtmlToPdfError):
    """Raised when wkhtmltopdf does not finish within the configured timeout."""

    def __init__(self, timeout: Optional[float] = None, command_line: str = "") -> None:
        self.timeout = timeout
        self.command_line = command_line
        super().__init__()

    @property
    def default_message(self) -> str:
        if self.timeout is None:
            return "HTML to PDF conversion process has not finished in the given period."
        return (
            "HTML to PDF conversion process has not finished in the given period "
            f"({self.timeout:g} seconds)."
        )
