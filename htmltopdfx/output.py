"""Delivery of a generated PDF to the requested output targets."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .document import PdfDocument
from .types import PdfOutput

_LOGGER = logging.getLogger("htmltopdfx.output")

CHUNK_SIZE = 32 * 1024


def dispatch_output(document: PdfDocument, output: PdfOutput, pdf_path: Path) -> None:
    """Deliver *pdf_path* to the stream and callback targets of *output*.

    A file target needs no work here: wkhtmltopdf already wrote to that path.
    Read and write errors propagate to the caller.
    """

    if output.output_stream is not None:
        with pdf_path.open("rb") as source:
            shutil.copyfileobj(source, output.output_stream, CHUNK_SIZE)
        _LOGGER.debug("Copied %s to output stream", pdf_path)

    if output.output_callback is not None:
        data = pdf_path.read_bytes()
        output.output_callback(document, data)
        _LOGGER.debug("Passed %d bytes to output callback", len(data))
