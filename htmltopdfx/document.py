"""
Document model for htmltopdfx.

A :class:`PdfDocument` describes one conversion job: document-wide options,
default page options and an ordered list of content units. Every option is
optional; ``None`` leaves the wkhtmltopdf default in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class PaperKind(str, Enum):
    """Paper sizes understood by wkhtmltopdf (Qt ``QPrinter::PaperSize``)."""

    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"
    A7 = "A7"
    A8 = "A8"
    A9 = "A9"
    B0 = "B0"
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    B4 = "B4"
    B5 = "B5"
    B6 = "B6"
    B7 = "B7"
    B8 = "B8"
    B9 = "B9"
    B10 = "B10"
    C5E = "C5E"
    COMM10E = "Comm10E"
    DLE = "DLE"
    EXECUTIVE = "Executive"
    FOLIO = "Folio"
    LEDGER = "Ledger"
    LEGAL = "Legal"
    LETTER = "Letter"
    TABLOID = "Tabloid"
    CUSTOM = "Custom"


class ErrorHandler(str, Enum):
    """How wkhtmltopdf treats pages or media that fail to load."""

    ABORT = "abort"
    IGNORE = "ignore"
    SKIP = "skip"


@dataclass
class PageOptions:
    """
    Per-page rendering options.

    Attributes:
        allow: Files or folders local pages may load
        background: Print the background (default TRUE)
        bypass_proxy_for: Hosts that skip the proxy
        cache_dir: Web cache directory
        cookies: Additional cookies, values url encoded
        custom_headers: Additional HTTP headers
        encoding: Default text encoding of the input
        images: Load and print images (default TRUE)
        enable_javascript: Allow pages to run javascript (default TRUE)
        javascript_delay: Milliseconds to wait for javascript to finish
        load_error_handling: Policy for pages that fail to load
        load_media_error_handling: Policy for media that fail to load
        post: Additional form fields to post
        post_file: Additional files to post
        proxy: Proxy to use
        run_script: Javascript snippets run after the page has loaded
        user_style_sheet: Style sheet (URL, path or inline CSS) for every page
        zoom: Zoom factor (default 1)
    """

    allow: List[str] = field(default_factory=list)
    background: Optional[bool] = None
    bypass_proxy_for: List[str] = field(default_factory=list)
    cache_dir: Optional[str] = None
    checkbox_checked_svg: Optional[str] = None
    checkbox_svg: Optional[str] = None
    cookies: Dict[str, str] = field(default_factory=dict)
    custom_headers: Dict[str, str] = field(default_factory=dict)
    custom_header_propagation: Optional[bool] = None
    debug_javascript: Optional[bool] = None
    default_header: Optional[bool] = None
    encoding: Optional[str] = None
    enable_external_links: Optional[bool] = None
    enable_forms: Optional[bool] = None
    images: Optional[bool] = None
    enable_internal_links: Optional[bool] = None
    enable_javascript: Optional[bool] = None
    javascript_delay: Optional[int] = None
    load_error_handling: Optional[ErrorHandler] = None
    load_media_error_handling: Optional[ErrorHandler] = None
    enable_local_file_access: Optional[bool] = None
    minimum_font_size: Optional[int] = None
    include_in_outline: Optional[bool] = None
    page_offset: Optional[int] = None
    password: Optional[str] = None
    enable_plugins: Optional[bool] = None
    post: Dict[str, str] = field(default_factory=dict)
    post_file: Dict[str, str] = field(default_factory=dict)
    print_media_type: Optional[bool] = None
    proxy: Optional[str] = None
    radiobutton_checked_svg: Optional[str] = None
    radiobutton_svg: Optional[str] = None
    resolve_relative_links: Optional[bool] = None
    run_script: List[str] = field(default_factory=list)
    enable_smart_shrinking: Optional[bool] = None
    stop_slow_scripts: Optional[bool] = None
    enable_toc_back_links: Optional[bool] = None
    user_style_sheet: Optional[str] = None
    username: Optional[str] = None
    viewport_size: Optional[str] = None
    window_status: Optional[str] = None
    zoom: Optional[float] = None


@dataclass
class HeaderFooterOptions:
    """
    Header or footer definition.

    Text fields may contain the tool's substitution variables (``[page]``,
    ``[topage]``, ...); ``replace`` adds custom ``[name]`` substitutions.
    """

    center: Optional[str] = None
    font_name: Optional[str] = None
    font_size: Optional[int] = None
    html: Optional[str] = None
    left: Optional[str] = None
    line: Optional[bool] = None
    right: Optional[str] = None
    spacing: Optional[float] = None
    replace: Dict[str, str] = field(default_factory=dict)


@dataclass
class PdfPage:
    """An ordinary page: URL, file path or inline HTML."""

    html: Optional[str] = None
    force_html_as_content: bool = False
    options: PageOptions = field(default_factory=PageOptions)
    header: HeaderFooterOptions = field(default_factory=HeaderFooterOptions)
    footer: HeaderFooterOptions = field(default_factory=HeaderFooterOptions)


@dataclass
class PdfCover:
    """A cover page, rendered without header or footer."""

    html: Optional[str] = None
    force_html_as_content: bool = False
    options: PageOptions = field(default_factory=PageOptions)


@dataclass
class PdfToc:
    """An auto-generated table of contents."""

    dotted_lines: Optional[bool] = None
    header_text: Optional[str] = None
    level_indentation: Optional[str] = None
    links: Optional[bool] = None
    text_size_shrink: Optional[float] = None
    xsl_style_sheet: Optional[str] = None
    header: HeaderFooterOptions = field(default_factory=HeaderFooterOptions)
    footer: HeaderFooterOptions = field(default_factory=HeaderFooterOptions)


ContentUnit = Union[PdfPage, PdfCover, PdfToc]


@dataclass
class PdfDocument:
    """
    Conversion job definition.

    Attributes:
        collate: Collate when printing multiple copies (default TRUE)
        cookie_jar: Cookie jar file to read and write
        copies: Number of copies (default 1)
        dpi: Explicit dpi (default 96)
        grayscale: Generate the PDF in grayscale
        image_dpi: Downscale embedded images to this dpi (default 600)
        image_quality: JPEG quality of embedded images (default 94)
        low_quality: Generate a lower quality PDF
        margin_*: Page margins (default unit mm)
        landscape: ``True`` for landscape, ``False`` for portrait
        page_size: Paper size (default A4)
        pdf_compression: Lossless compression of PDF objects (default TRUE)
        title: Title of the generated PDF
        outline: Put an outline into the PDF (default TRUE)
        outline_depth: Depth of the outline (default 4)
        options: Default page options applied to every page
        pages: Content units in output order
    """

    collate: Optional[bool] = None
    cookie_jar: Optional[str] = None
    copies: Optional[int] = None
    dpi: Optional[int] = None
    grayscale: Optional[bool] = None
    image_dpi: Optional[int] = None
    image_quality: Optional[int] = None
    low_quality: Optional[bool] = None
    margin_bottom: Optional[float] = None
    margin_left: Optional[float] = None
    margin_right: Optional[float] = None
    margin_top: Optional[float] = None
    landscape: Optional[bool] = None
    page_height: Optional[float] = None
    page_size: Optional[PaperKind] = None
    page_width: Optional[float] = None
    pdf_compression: Optional[bool] = None
    title: Optional[str] = None
    outline: Optional[bool] = None
    outline_depth: Optional[int] = None
    options: PageOptions = field(default_factory=PageOptions)
    pages: List[ContentUnit] = field(default_factory=list)
