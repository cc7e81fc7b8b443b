"""HTML to PDF conversion entry point."""

from __future__ import annotations

import dataclasses
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .arguments import build_arguments
from .document import PdfCover, PdfDocument, PdfPage, PdfToc
from .exceptions import ExecutableNotFoundError, ValidationError
from .locator import locate_executable
from .output import dispatch_output
from .process import run_process
from .types import DEFAULT_TIMEOUT, ConversionResult, PathLike, PdfConvertEnvironment, PdfOutput
from .utils import ensure_parent_dir, resolve_path
from .workspace import work_environment

_LOGGER = logging.getLogger("htmltopdfx")


def validate_document(document: PdfDocument) -> None:
    """Raise :class:`ValidationError` unless *document* can be converted."""

    if document is None or not document.pages:
        raise ValidationError("You must supply at least one page")

    for unit in document.pages:
        if not isinstance(unit, (PdfPage, PdfCover, PdfToc)):
            raise ValidationError(f"Unsupported content unit: {type(unit).__name__}")
        if isinstance(unit, PdfPage) and not unit.html:
            raise ValidationError("You must supply a HTML string or a URL for all pages")
        if isinstance(unit, PdfCover) and not unit.html:
            raise ValidationError("You must supply a HTML string or a URL for all cover pages")


def resolve_environment(environment: Optional[PdfConvertEnvironment] = None) -> PdfConvertEnvironment:
    """Return a copy of *environment* with every unset field defaulted."""

    environment = environment or PdfConvertEnvironment()
    return dataclasses.replace(
        environment,
        temp_folder_path=environment.temp_folder_path or tempfile.gettempdir(),
        wkhtmltopdf_path=(
            environment.wkhtmltopdf_path or locate_executable(environment.install_folder)
        ),
        timeout=DEFAULT_TIMEOUT if environment.timeout is None else environment.timeout,
    )


def _coerce_output(output: Union[PdfOutput, PathLike, None]) -> PdfOutput:
    if output is None:
        raise ValidationError("You must supply an output file, stream or callback")
    if not isinstance(output, PdfOutput):
        output = PdfOutput(output_file_path=output)
    if output.is_empty():
        raise ValidationError("You must supply an output file, stream or callback")
    return output


def _check_executable(executable: str) -> None:
    has_separator = os.sep in executable or bool(os.altsep and os.altsep in executable)
    if has_separator and not Path(executable).exists():
        raise ExecutableNotFoundError(executable)


def convert(
    document: PdfDocument,
    environment: Optional[PdfConvertEnvironment] = None,
    output: Union[PdfOutput, PathLike, None] = None,
) -> ConversionResult:
    """Convert *document* into a single PDF.

    Args:
        document: Pages, cover pages and tables of contents to render.
        environment: Temp folder, executable and timeout; unset fields are
            defaulted and the caller's instance is left untouched.
        output: Output targets, or a path as a shortcut for a file target.

    Returns:
        A :class:`ConversionResult`; ``output_path`` is ``None`` when the PDF
        was only delivered to a stream or callback.

    Raises:
        ValidationError: Document or output definition is incomplete.
        ExecutableNotFoundError: The wkhtmltopdf executable does not exist.
        ConversionFailedError: wkhtmltopdf failed without producing a PDF.
        ConversionTimeoutError: wkhtmltopdf did not finish in time.
    """

    validate_document(document)
    pdf_output = _coerce_output(output)
    env = resolve_environment(environment)
    _check_executable(env.wkhtmltopdf_path)

    with work_environment(env.temp_folder_path, inline_via_stdin=env.inline_via_stdin) as work_env:
        if pdf_output.output_file_path is not None:
            output_path = resolve_path(pdf_output.output_file_path)
            ensure_parent_dir(output_path)
            kept_path: Optional[Path] = output_path
        else:
            output_path = work_env.track(work_env.unique_path(".pdf"))
            kept_path = None

        arguments = build_arguments(document, work_env, output_path)
        _LOGGER.info("Converting %d content unit(s) to %s", len(document.pages), output_path)
        outcome = run_process(
            env.wkhtmltopdf_path,
            arguments,
            env.timeout,
            output_path,
            stdin_payloads=work_env.stdin_payloads,
        )
        dispatch_output(document, pdf_output, output_path)

    _LOGGER.info("Conversion finished with exit code %s", outcome.exit_code)
    return ConversionResult(
        output_path=kept_path,
        exit_code=outcome.exit_code,
        stdout=outcome.stdout,
        stderr=outcome.stderr,
        command_line=outcome.command_line,
    )
