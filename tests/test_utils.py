"""
Test cases for utility helpers.
"""

import unittest
from pathlib import Path

import pytest

from htmltopdfx.exceptions import HtmlToPdfError
from htmltopdfx.utils import ensure_parent_dir, format_file_size, get_pdf_info, resolve_path


class TestFormatFileSize(unittest.TestCase):
    """Test cases for format_file_size."""

    def test_bytes(self):
        self.assertEqual(format_file_size(500), "500.0 B")

    def test_kilobytes(self):
        self.assertEqual(format_file_size(1536), "1.5 KB")

    def test_megabytes(self):
        self.assertEqual(format_file_size(5 * 1024 * 1024), "5.0 MB")


def test_get_pdf_info_reads_pages_and_title(pdf_factory) -> None:
    path = pdf_factory("info.pdf", pages=3, title="Quarterly")

    info = get_pdf_info(path)

    assert info.num_pages == 3
    assert info.title == "Quarterly"
    assert info.file_size == path.stat().st_size


def test_get_pdf_info_without_title(pdf_factory) -> None:
    info = get_pdf_info(pdf_factory("plain.pdf"))

    assert info.num_pages == 1
    assert info.title is None


def test_get_pdf_info_rejects_non_pdf(tmp_path: Path) -> None:
    path = tmp_path / "broken.pdf"
    path.write_text("not a pdf", encoding="utf-8")

    with pytest.raises(HtmlToPdfError):
        get_pdf_info(path)


def test_get_pdf_info_missing_file(tmp_path: Path) -> None:
    with pytest.raises(HtmlToPdfError, match="Unable to read PDF file"):
        get_pdf_info(tmp_path / "missing.pdf")


def test_resolve_path_and_parent_dir(tmp_path: Path) -> None:
    target = resolve_path(tmp_path / "a" / ".." / "b" / "out.pdf")

    ensure_parent_dir(target)

    assert target == (tmp_path / "b" / "out.pdf").resolve()
    assert target.parent.is_dir()
