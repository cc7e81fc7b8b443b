"""
htmltopdfx - Convert HTML pages into a single PDF with wkhtmltopdf.

Pages may be URLs, local files or inline HTML markup; inline markup is written
to temporary files that are removed once the conversion finishes.

Quick Start:
    >>> from htmltopdfx import PdfDocument, PdfPage, convert
    >>> document = PdfDocument(pages=[PdfPage(html="<h1>Hello</h1>")])
    >>> result = convert(document, output="hello.pdf")

Main API:
    - convert: Run one conversion
    - PdfDocument, PdfPage, PdfCover, PdfToc: Document model
    - PdfOutput: File, stream and callback output targets
    - PdfConvertEnvironment: Temp folder, executable and timeout

Exceptions:
    - HtmlToPdfError: Base exception
    - ValidationError: Incomplete document or output definition
    - ExecutableNotFoundError: wkhtmltopdf executable missing
    - ConversionFailedError: wkhtmltopdf failed without producing a PDF
    - ConversionTimeoutError: wkhtmltopdf did not finish in time

For CLI usage, use the 'htmltopdfx' command after installation.
"""

# Conversion
from htmltopdfx.converter import convert, resolve_environment, validate_document
from htmltopdfx.locator import locate_executable

# Document model
from htmltopdfx.document import (
    ErrorHandler,
    HeaderFooterOptions,
    PageOptions,
    PaperKind,
    PdfCover,
    PdfDocument,
    PdfPage,
    PdfToc,
)

# Data types
from htmltopdfx.types import ConversionResult, PdfConvertEnvironment, PdfInfo, PdfOutput

# Exceptions
from htmltopdfx.exceptions import (
    ConversionFailedError,
    ConversionTimeoutError,
    ExecutableNotFoundError,
    HtmlToPdfError,
    ValidationError,
)

__version__ = "1.0.0"
__author__ = "htmltopdfx Contributors"
__license__ = "MIT"

__all__ = [
    # Conversion
    "convert",
    "resolve_environment",
    "validate_document",
    "locate_executable",
    # Document model
    "ErrorHandler",
    "HeaderFooterOptions",
    "PageOptions",
    "PaperKind",
    "PdfCover",
    "PdfDocument",
    "PdfPage",
    "PdfToc",
    # Data types
    "ConversionResult",
    "PdfConvertEnvironment",
    "PdfInfo",
    "PdfOutput",
    # Exceptions
    "HtmlToPdfError",
    "ValidationError",
    "ExecutableNotFoundError",
    "ConversionFailedError",
    "ConversionTimeoutError",
    # Version info
    "__version__",
]
