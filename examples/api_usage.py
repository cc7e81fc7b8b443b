"""
htmltopdfx - Library API Usage Examples

This script demonstrates how to use the htmltopdfx library programmatically.
wkhtmltopdf must be installed (or WKHTMLTOPDF_PATH must point at its folder).
"""

import io
import logging
import os

from htmltopdfx import (
    HeaderFooterOptions,
    HtmlToPdfError,
    PageOptions,
    PaperKind,
    PdfConvertEnvironment,
    PdfCover,
    PdfDocument,
    PdfOutput,
    PdfPage,
    PdfToc,
    __version__,
    convert,
)


def example_1_single_url(environment):
    """Example 1: Convert a URL to a file"""
    print("\n=== Example 1: Single URL ===")

    document = PdfDocument(pages=[PdfPage(html="https://example.com")])
    result = convert(document, environment, "example.pdf")
    print(f"Created: {result.output_path}")


def example_2_inline_html(environment):
    """Example 2: Inline HTML with header and footer"""
    print("\n=== Example 2: Inline HTML ===")

    document = PdfDocument(
        title="Inline report",
        page_size=PaperKind.A4,
        margin_top=20,
        margin_bottom=20,
        pages=[
            PdfPage(
                html="<html><body><h1>Hello</h1><p>Generated from a string.</p></body></html>",
                header=HeaderFooterOptions(center="Inline report", line=True),
                footer=HeaderFooterOptions(right="[page]/[topage]"),
            )
        ],
    )
    result = convert(document, environment, "inline.pdf")
    print(f"Created: {result.output_path}")


def example_3_book(environment):
    """Example 3: Cover, table of contents and several chapters"""
    print("\n=== Example 3: Cover, TOC and Chapters ===")

    chapters = [
        f"<html><body><h1>Chapter {number}</h1><p>Body of chapter {number}.</p></body></html>"
        for number in range(1, 4)
    ]
    document = PdfDocument(
        title="Book",
        outline=True,
        options=PageOptions(print_media_type=True),
        pages=[PdfCover(html="<html><body><h1>The Book</h1></body></html>"), PdfToc(header_text="Contents")]
        + [PdfPage(html=chapter) for chapter in chapters],
    )
    result = convert(document, environment, "book.pdf")
    print(f"Created: {result.output_path}")


def example_4_stream_and_callback(environment):
    """Example 4: Receive the PDF in memory"""
    print("\n=== Example 4: Stream and Callback ===")

    buffer = io.BytesIO()

    def on_pdf(document, data):
        print(f"Callback received {len(data)} bytes for {len(document.pages)} page(s)")

    document = PdfDocument(pages=[PdfPage(html="<p>In memory</p>")])
    convert(document, environment, PdfOutput(output_stream=buffer, output_callback=on_pdf))
    print(f"Stream holds {len(buffer.getvalue())} bytes")


def main():
    """Run all examples"""
    print(f"htmltopdfx - Library API Examples (v{__version__})")
    print("=" * 50)

    logging.basicConfig(level=logging.INFO)
    environment = PdfConvertEnvironment(install_folder=os.environ.get("WKHTMLTOPDF_PATH"))

    try:
        example_1_single_url(environment)
        example_2_inline_html(environment)
        example_3_book(environment)
        example_4_stream_and_callback(environment)
    except HtmlToPdfError as e:
        print(f"Error: {e}")

    print("\n" + "=" * 50)
    print("Examples completed!")


if __name__ == "__main__":
    main()
