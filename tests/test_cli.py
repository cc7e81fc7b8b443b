from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from pypdf import PdfReader

import htmltopdfx.cli as cli_module
from htmltopdfx.cli import cli


def test_convert_command_creates_pdf(stub_tool, work_dir: Path, tmp_path: Path) -> None:
    page = tmp_path / "page.html"
    page.write_text("<h1>From file</h1>", encoding="utf-8")
    output = tmp_path / "result.pdf"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert",
            "https://example.com",
            str(page),
            "--output", str(output),
            "--title", "CLI Report",
            "--landscape",
            "--page-size", "Letter",
            "--temp-dir", str(work_dir),
            "--wkhtmltopdf", str(stub_tool.executable),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Successfully created" in result.output
    assert len(PdfReader(str(output)).pages) == 2

    args = stub_tool.recorded()["args"]
    assert args[args.index("--page-size") + 1] == "Letter"
    assert args[args.index("--orientation") + 1] == "Landscape"
    assert str(page) in args


def test_convert_command_reads_stdin(stub_tool, work_dir: Path, tmp_path: Path) -> None:
    output = tmp_path / "stdin.pdf"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert", "-",
            "-o", str(output),
            "--cover", "<h1>Cover</h1>",
            "--toc",
            "--temp-dir", str(work_dir),
            "--wkhtmltopdf", str(stub_tool.executable),
        ],
        input="<h1>Piped</h1>",
    )

    assert result.exit_code == 0, result.output
    recorded = stub_tool.recorded()
    assert recorded["args"][0] == "cover"
    assert "toc" in recorded["args"]
    assert sorted(recorded["files"].values()) == ["<h1>Cover</h1>", "<h1>Piped</h1>"]
    assert list(work_dir.iterdir()) == []


def test_convert_command_reports_failure(stub_tool, work_dir: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HTMLTOPDFX_STUB_MODE", "fail")
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert", "https://example.com",
            "-o", str(tmp_path / "never.pdf"),
            "--temp-dir", str(work_dir),
            "--wkhtmltopdf", str(stub_tool.executable),
        ],
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (tmp_path / "never.pdf").exists()


def test_convert_command_missing_executable(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert", "https://example.com",
            "-o", str(tmp_path / "out.pdf"),
            "--wkhtmltopdf", str(tmp_path / "nowhere" / "wkhtmltopdf"),
        ],
    )

    assert result.exit_code == 1
    assert "Error" in result.output


def test_convert_command_uses_env_folder(stub_tool, work_dir: Path, tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "convert", "https://example.com",
            "-o", str(tmp_path / "env.pdf"),
            "--temp-dir", str(work_dir),
        ],
        env={"WKHTMLTOPDF_PATH": str(stub_tool.executable.parent)},
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "env.pdf").exists()


def test_locate_command_lists_search_order(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(cli_module, "locate_executable", lambda folder=None: "/found/wkhtmltopdf")
    runner = CliRunner()

    result = runner.invoke(cli, ["locate", "--wkhtmltopdf-folder", str(tmp_path)])

    assert result.exit_code == 0
    assert "Search Order" in result.output
    assert "/found/wkhtmltopdf" in result.output


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
