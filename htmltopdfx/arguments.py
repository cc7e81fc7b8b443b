"""Serialisation of the document model into wkhtmltopdf command line tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from .content import resolve_content
from .document import (
    ContentUnit,
    HeaderFooterOptions,
    PdfCover,
    PdfDocument,
    PdfPage,
    PdfToc,
)
from .exceptions import ValidationError
from .types import PathLike
from .workspace import WorkEnvironment

_LOGGER = logging.getLogger("htmltopdfx.arguments")


class ValueKind(str, Enum):
    """How an option value is rendered on the command line."""

    VALUE = "value"
    SWITCH = "switch"
    LIST = "list"
    MAPPING = "mapping"
    RESOURCE = "resource"


@dataclass(frozen=True)
class OptionSpec:
    """Binding of a model attribute to its command line flag(s).

    For ``SWITCH`` options *flag* is emitted for ``True`` and *false_flag*
    for ``False``; an empty name means nothing is emitted for that value.
    ``RESOURCE`` options are resolved through the content resolver and use
    *extension* for temporary files.
    """

    attribute: str
    flag: str
    kind: ValueKind = ValueKind.VALUE
    false_flag: str = ""
    extension: str = ""


def _value(attribute: str, flag: str) -> OptionSpec:
    return OptionSpec(attribute, flag)


def _switch(attribute: str, flag: str, false_flag: str) -> OptionSpec:
    return OptionSpec(attribute, flag, ValueKind.SWITCH, false_flag=false_flag)


def _list(attribute: str, flag: str) -> OptionSpec:
    return OptionSpec(attribute, flag, ValueKind.LIST)


def _mapping(attribute: str, flag: str) -> OptionSpec:
    return OptionSpec(attribute, flag, ValueKind.MAPPING)


def _resource(attribute: str, flag: str, extension: str) -> OptionSpec:
    return OptionSpec(attribute, flag, ValueKind.RESOURCE, extension=extension)


DOCUMENT_OPTIONS: Tuple[OptionSpec, ...] = (
    _switch("collate", "collate", "no-collate"),
    _value("cookie_jar", "cookie-jar"),
    _value("copies", "copies"),
    _value("dpi", "dpi"),
    _switch("grayscale", "grayscale", ""),
    _value("image_dpi", "image-dpi"),
    _value("image_quality", "image-quality"),
    _switch("low_quality", "lowquality", ""),
    _value("margin_bottom", "margin-bottom"),
    _value("margin_left", "margin-left"),
    _value("margin_right", "margin-right"),
    _value("margin_top", "margin-top"),
    _value("page_height", "page-height"),
    _value("page_size", "page-size"),
    _value("page_width", "page-width"),
)

# Emitted after the orientation token.
DOCUMENT_TRAILING_OPTIONS: Tuple[OptionSpec, ...] = (
    _switch("pdf_compression", "", "no-pdf-compression"),
    _value("title", "title"),
    _switch("outline", "outline", "no-outline"),
    _value("outline_depth", "outline-depth"),
)

PAGE_OPTIONS: Tuple[OptionSpec, ...] = (
    _list("allow", "allow"),
    _switch("background", "background", "no-background"),
    _list("bypass_proxy_for", "bypass-proxy-for"),
    _value("cache_dir", "cache-dir"),
    _value("checkbox_checked_svg", "checkbox-checked-svg"),
    _value("checkbox_svg", "checkbox-svg"),
    _mapping("cookies", "cookie"),
    _mapping("custom_headers", "custom-header"),
    _switch("custom_header_propagation", "custom-header-propagation", "no-custom-header-propagation"),
    _switch("debug_javascript", "debug-javascript", "no-debug-javascript"),
    _switch("default_header", "default-header", ""),
    _value("encoding", "encoding"),
    _switch("enable_external_links", "enable-external-links", "disable-external-links"),
    _switch("enable_forms", "enable-forms", "disable-forms"),
    _switch("images", "images", "no-images"),
    _switch("enable_internal_links", "enable-internal-links", "disable-internal-links"),
    _switch("enable_javascript", "enable-javascript", "disable-javascript"),
    _value("javascript_delay", "javascript-delay"),
    _value("load_error_handling", "load-error-handling"),
    _value("load_media_error_handling", "load-media-error-handling"),
    _switch("enable_local_file_access", "enable-local-file-access", "disable-local-file-access"),
    _value("minimum_font_size", "minimum-font-size"),
    _switch("include_in_outline", "include-in-outline", "exclude-from-outline"),
    _value("page_offset", "page-offset"),
    _value("password", "password"),
    _switch("enable_plugins", "enable-plugins", "disable-plugins"),
    _mapping("post", "post"),
    _mapping("post_file", "post-file"),
    _switch("print_media_type", "print-media-type", "no-print-media-type"),
    _value("proxy", "proxy"),
    _value("radiobutton_checked_svg", "radiobutton-checked-svg"),
    _value("radiobutton_svg", "radiobutton-svg"),
    _switch("resolve_relative_links", "resolve-relative-links", "keep-relative-links"),
    _list("run_script", "run-script"),
    _switch("enable_smart_shrinking", "enable-smart-shrinking", "disable-smart-shrinking"),
    _switch("stop_slow_scripts", "stop-slow-scripts", "no-stop-slow-scripts"),
    _switch("enable_toc_back_links", "enable-toc-back-links", "disable-toc-back-links"),
    _resource("user_style_sheet", "user-style-sheet", ".css"),
    _value("username", "username"),
    _value("viewport_size", "viewport-size"),
    _value("window_status", "window-status"),
    _value("zoom", "zoom"),
)

TOC_OPTIONS: Tuple[OptionSpec, ...] = (
    _switch("dotted_lines", "", "disable-dotted-lines"),
    _value("header_text", "toc-header-text"),
    _value("level_indentation", "toc-level-indentation"),
    _switch("links", "", "disable-toc-links"),
    _value("text_size_shrink", "toc-text-size-shrink"),
    _resource("xsl_style_sheet", "xsl-style-sheet", ".xslt"),
)


def header_footer_options(prefix: str) -> Tuple[OptionSpec, ...]:
    """Option table for a header (``prefix="header"``) or footer block."""

    return (
        _value("center", f"{prefix}-center"),
        _value("font_name", f"{prefix}-font-name"),
        _value("font_size", f"{prefix}-font-size"),
        _resource("html", f"{prefix}-html", ".html"),
        _value("left", f"{prefix}-left"),
        _switch("line", f"{prefix}-line", f"no-{prefix}-line"),
        _value("right", f"{prefix}-right"),
        _value("spacing", f"{prefix}-spacing"),
        _mapping("replace", "replace"),
    )


HEADER_OPTIONS = header_footer_options("header")
FOOTER_OPTIONS = header_footer_options("footer")


def format_value(value: Any) -> str:
    """Render a scalar option value as a single command line token."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def serialize_options(
    source: Any,
    specs: Sequence[OptionSpec],
    work_env: WorkEnvironment,
) -> List[str]:
    """Serialise the attributes of *source* described by *specs*."""

    tokens: List[str] = []
    for spec in specs:
        value = getattr(source, spec.attribute)
        if value is None:
            continue

        if spec.kind is ValueKind.SWITCH:
            flag = spec.flag if value else spec.false_flag
            if flag:
                tokens.append(f"--{flag}")
        elif spec.kind is ValueKind.LIST:
            for item in value:
                tokens.extend((f"--{spec.flag}", format_value(item)))
        elif spec.kind is ValueKind.MAPPING:
            for key, item in value.items():
                tokens.extend((f"--{spec.flag}", format_value(key), format_value(item)))
        elif spec.kind is ValueKind.RESOURCE:
            resolved = resolve_content(value, work_env, spec.extension)
            if resolved is not None:
                tokens.extend((f"--{spec.flag}", resolved))
        else:
            tokens.extend((f"--{spec.flag}", format_value(value)))
    return tokens


def orientation_arguments(landscape: Optional[bool]) -> List[str]:
    if landscape is None:
        return []
    return ["--orientation", "Landscape" if landscape else "Portrait"]


def _content_arguments(unit: PdfPage | PdfCover, work_env: WorkEnvironment) -> List[str]:
    resolved = resolve_content(
        unit.html,
        work_env,
        ".html",
        force_inline=unit.force_html_as_content,
        allow_stdin=True,
    )
    return [resolved] if resolved is not None else []


def _page_arguments(page: PdfPage, work_env: WorkEnvironment) -> List[str]:
    tokens = _content_arguments(page, work_env)
    if page.options is not None:
        tokens += serialize_options(page.options, PAGE_OPTIONS, work_env)
    tokens += _header_footer_arguments(page.header, page.footer, work_env)
    return tokens


def _cover_arguments(cover: PdfCover, work_env: WorkEnvironment) -> List[str]:
    tokens = ["cover"] + _content_arguments(cover, work_env)
    if cover.options is not None:
        tokens += serialize_options(cover.options, PAGE_OPTIONS, work_env)
    return tokens


def _toc_arguments(toc: PdfToc, work_env: WorkEnvironment) -> List[str]:
    tokens = ["toc"] + serialize_options(toc, TOC_OPTIONS, work_env)
    tokens += _header_footer_arguments(toc.header, toc.footer, work_env)
    return tokens


def _header_footer_arguments(
    header: HeaderFooterOptions,
    footer: HeaderFooterOptions,
    work_env: WorkEnvironment,
) -> List[str]:
    tokens: List[str] = []
    if header is not None:
        tokens += serialize_options(header, HEADER_OPTIONS, work_env)
    if footer is not None:
        tokens += serialize_options(footer, FOOTER_OPTIONS, work_env)
    return tokens


def serialize_unit(unit: ContentUnit, work_env: WorkEnvironment) -> List[str]:
    """Serialise one content unit, dispatching on its variant."""

    if isinstance(unit, PdfPage):
        return _page_arguments(unit, work_env)
    if isinstance(unit, PdfCover):
        return _cover_arguments(unit, work_env)
    if isinstance(unit, PdfToc):
        return _toc_arguments(unit, work_env)
    raise ValidationError(f"Unsupported content unit: {type(unit).__name__}")


def build_arguments(
    document: PdfDocument,
    work_env: WorkEnvironment,
    output_path: PathLike,
) -> List[str]:
    """Return the full wkhtmltopdf argument list for *document*.

    Document options come first, then the default page options, then each
    content unit in order. The destination path is the last token.
    """

    tokens = serialize_options(document, DOCUMENT_OPTIONS, work_env)
    tokens += orientation_arguments(document.landscape)
    tokens += serialize_options(document, DOCUMENT_TRAILING_OPTIONS, work_env)

    if document.options is not None:
        tokens += serialize_options(document.options, PAGE_OPTIONS, work_env)

    for unit in document.pages:
        tokens += serialize_unit(unit, work_env)

    tokens.append(str(output_path))
    _LOGGER.debug("Serialised %d arguments for %d content unit(s)", len(tokens), len(document.pages))
    return tokens
