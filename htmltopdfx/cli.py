"""
Command-line interface for htmltopdfx.
"""

import os
import sys

import click
from rich.console import Console
from rich.table import Table

from htmltopdfx.converter import convert
from htmltopdfx.document import HeaderFooterOptions, PaperKind, PdfCover, PdfDocument, PdfPage, PdfToc
from htmltopdfx.exceptions import HtmlToPdfError
from htmltopdfx.locator import candidate_paths, locate_executable
from htmltopdfx.types import PdfConvertEnvironment
from htmltopdfx.utils import format_file_size, get_pdf_info

console = Console()


def _read_source(source):
    """Turn a command line source into page content."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    if os.path.exists(source):
        return os.path.abspath(source)
    return source


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    htmltopdfx - Convert HTML pages, URLs and files into a single PDF.
    """
    pass


@cli.command(name="convert")
@click.argument('sources', nargs=-1, required=True)
@click.option('--output', '-o', required=True, type=click.Path(dir_okay=False), help='Output PDF file')
@click.option('--cover', help='Cover page (URL, file or HTML)')
@click.option('--toc', is_flag=True, default=False, help='Insert a table of contents after the cover')
@click.option('--title', help='Title of the generated PDF')
@click.option(
    '--page-size',
    type=click.Choice([kind.value for kind in PaperKind], case_sensitive=False),
    help='Paper size (default A4)'
)
@click.option('--landscape/--portrait', default=None, help='Page orientation')
@click.option('--margin-top', type=float, help='Top margin in mm')
@click.option('--margin-bottom', type=float, help='Bottom margin in mm')
@click.option('--margin-left', type=float, help='Left margin in mm')
@click.option('--margin-right', type=float, help='Right margin in mm')
@click.option('--grayscale', is_flag=True, default=False, help='Generate the PDF in grayscale')
@click.option('--header-center', help='Centered header text')
@click.option('--footer-center', help='Centered footer text, e.g. "[page]/[topage]"')
@click.option('--footer-right', help='Right aligned footer text')
@click.option('--force-html', is_flag=True, default=False, help='Treat every source as HTML markup')
@click.option('--timeout', type=float, help='Seconds to wait for wkhtmltopdf (default 60)')
@click.option('--temp-dir', type=click.Path(file_okay=False), help='Folder for temporary files')
@click.option('--wkhtmltopdf', 'wkhtmltopdf_path', help='wkhtmltopdf executable to run')
@click.option(
    '--wkhtmltopdf-folder',
    envvar='WKHTMLTOPDF_PATH',
    help='Folder containing wkhtmltopdf (env: WKHTMLTOPDF_PATH)'
)
def convert_command(sources, output, cover, toc, title, page_size, landscape, margin_top,
                    margin_bottom, margin_left, margin_right, grayscale, header_center,
                    footer_center, footer_right, force_html, timeout, temp_dir,
                    wkhtmltopdf_path, wkhtmltopdf_folder):
    """
    Convert one or more SOURCES into a single PDF.

    Each source is a URL, a file, inline HTML, or '-' to read HTML from stdin.

    Examples:

        htmltopdfx convert https://example.com -o example.pdf

        htmltopdfx convert cover.html chapter1.html --toc -o book.pdf

        echo "<h1>Hi</h1>" | htmltopdfx convert - -o hi.pdf
    """
    try:
        header = HeaderFooterOptions(center=header_center)
        footer = HeaderFooterOptions(center=footer_center, right=footer_right)

        pages = []
        if cover:
            pages.append(PdfCover(html=_read_source(cover), force_html_as_content=force_html))
        if toc:
            pages.append(PdfToc())
        for source in sources:
            pages.append(PdfPage(
                html=_read_source(source),
                force_html_as_content=force_html,
                header=header,
                footer=footer,
            ))

        document = PdfDocument(
            title=title,
            page_size=PaperKind(page_size) if page_size else None,
            landscape=landscape,
            margin_top=margin_top,
            margin_bottom=margin_bottom,
            margin_left=margin_left,
            margin_right=margin_right,
            grayscale=grayscale or None,
            pages=pages,
        )
        environment = PdfConvertEnvironment(
            temp_folder_path=temp_dir,
            wkhtmltopdf_path=wkhtmltopdf_path,
            install_folder=wkhtmltopdf_folder,
            timeout=timeout,
        )

        console.print(f"\n[bold cyan]Converting {len(pages)} section(s)...[/bold cyan]")
        with console.status("Running wkhtmltopdf"):
            result = convert(document, environment, output)

        info = get_pdf_info(result.output_path)

        table = Table(title="PDF Information", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("File", os.path.abspath(output))
        table.add_row("Pages", str(info.num_pages))
        table.add_row("Size", format_file_size(info.file_size))
        if info.title:
            table.add_row("Title", info.title)
        console.print(table)

        if result.has_warnings:
            console.print(
                f"[bold yellow]! wkhtmltopdf reported warnings (exit code {result.exit_code})[/bold yellow]"
            )
            if result.stderr:
                console.print(f"[dim]{result.stderr}[/dim]")

        console.print(f"\n[bold green]✓ Successfully created {os.path.basename(output)}[/bold green]\n")

    except HtmlToPdfError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)
    except OSError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="locate")
@click.option(
    '--wkhtmltopdf-folder',
    envvar='WKHTMLTOPDF_PATH',
    help='Folder containing wkhtmltopdf (env: WKHTMLTOPDF_PATH)'
)
def locate_command(wkhtmltopdf_folder):
    """
    Show which wkhtmltopdf executable would be used.
    """
    table = Table(title="Search Order")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Location", style="green")
    table.add_column("Found", style="magenta")

    for idx, candidate in enumerate(candidate_paths(wkhtmltopdf_folder), 1):
        table.add_row(str(idx), str(candidate), "Yes" if candidate.is_file() else "No")

    console.print()
    console.print(table)
    console.print(f"\n[bold]Executable:[/bold] {locate_executable(wkhtmltopdf_folder)}\n")


if __name__ == '__main__':
    cli()
