from __future__ import annotations

import json
import stat
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


STUB_SOURCE = '''
import json
import os
import sys
import time

from pypdf import PdfWriter


def looks_like_page(arg):
    return arg == "-" or arg.startswith("http") or arg.endswith(".html")


def main():
    args = sys.argv[1:]
    mode = os.environ.get("HTMLTOPDFX_STUB_MODE", "ok")
    stdin_data = sys.stdin.read() if "-" in args else ""

    files = {}
    for arg in args[:-1]:
        if os.path.isfile(arg):
            with open(arg, encoding="utf-8", errors="replace") as handle:
                files[arg] = handle.read()

    record = os.environ.get("HTMLTOPDFX_STUB_RECORD")
    if record:
        with open(record, "w", encoding="utf-8") as handle:
            json.dump({"args": args, "stdin": stdin_data, "files": files}, handle)

    sys.stdout.write("Loading pages (1/6)\\n")
    sys.stdout.flush()

    if mode == "hang":
        time.sleep(60)
        return 0
    if mode == "fail":
        sys.stderr.write("Error: Failed loading page\\n")
        return 1

    writer = PdfWriter()
    for _ in range(max(1, sum(1 for arg in args[:-1] if looks_like_page(arg)))):
        writer.add_blank_page(width=200, height=200)
    if "--title" in args:
        writer.add_metadata({"/Title": args[args.index("--title") + 1]})
    with open(args[-1], "wb") as handle:
        writer.write(handle)

    if mode == "warn":
        sys.stderr.write("Warning: Failed to load image\\n")
        return 2
    return 0


sys.exit(main())
'''


@dataclass
class StubTool:
    """A fake wkhtmltopdf executable driven by environment variables."""

    executable: Path
    record_path: Path

    def recorded(self) -> Dict[str, Any]:
        return json.loads(self.record_path.read_text(encoding="utf-8"))


@pytest.fixture()
def stub_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StubTool:
    if sys.platform.startswith("win"):
        pytest.skip("stub executable relies on a POSIX shell")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "stub_wkhtmltopdf.py"
    script.write_text(STUB_SOURCE, encoding="utf-8")

    executable = bin_dir / "wkhtmltopdf"
    executable.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n', encoding="utf-8")
    executable.chmod(executable.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    record_path = tmp_path / "record.json"
    monkeypatch.setenv("HTMLTOPDFX_STUB_RECORD", str(record_path))
    monkeypatch.setenv("HTMLTOPDFX_STUB_MODE", "ok")
    return StubTool(executable=executable, record_path=record_path)


@pytest.fixture()
def work_dir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[[str, int, str | None], Path]:
    def _create(filename: str, pages: int = 1, title: str | None = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=72, height=72)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create
