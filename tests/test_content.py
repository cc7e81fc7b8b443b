from __future__ import annotations

from pathlib import Path

import pytest

from htmltopdfx.content import STDIN_TOKEN, is_file_path, is_url, resolve_content
from htmltopdfx.workspace import WorkEnvironment


@pytest.mark.parametrize(
    "value",
    [
        "http://example.com",
        "https://www.example.com/report?id=5&lang=en",
        "https://example.org/path/to/page.html",
    ],
)
def test_is_url_accepts_http_urls(value: str) -> None:
    assert is_url(value)


@pytest.mark.parametrize(
    "value",
    [
        "<html><body>https://example.com</body></html>",
        "ftp://example.com/file",
        "example.com",
    ],
)
def test_is_url_rejects_markup_and_other_schemes(value: str) -> None:
    assert not is_url(value)


@pytest.mark.parametrize(
    "value",
    [
        r"C:\reports\page.html",
        r"\\server\share\page.html",
        "/var/www/page.html",
        "/home/user/My Documents/page.html",
    ],
)
def test_is_file_path_accepts_absolute_paths(value: str) -> None:
    assert is_file_path(value)


@pytest.mark.parametrize(
    "value",
    [
        "page.html",
        "<p>/not/a/path</p>",
        "relative/page.html",
        "/* reset */ body { margin: 0 }",
        "/path/{ color: red; }",
    ],
)
def test_is_file_path_rejects_relative_paths_and_markup(value: str) -> None:
    assert not is_file_path(value)


def test_url_passes_through(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)

    assert resolve_content("https://example.com/a", work_env, ".html") == "https://example.com/a"
    assert work_env.temp_files == []


def test_inline_html_written_to_temp_file(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)
    html = "<html><body><h1>Hello</h1></body></html>"

    token = resolve_content(html, work_env, ".html")

    path = Path(token)
    assert path.parent == work_dir
    assert path.suffix == ".html"
    assert path.read_text(encoding="utf-8") == html
    assert work_env.temp_files == [path]


def test_force_inline_writes_url_as_markup(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)

    token = resolve_content("https://example.com", work_env, ".html", force_inline=True)

    assert token != "https://example.com"
    assert Path(token).read_text(encoding="utf-8") == "https://example.com"


@pytest.mark.parametrize("value", [None, ""])
def test_empty_content_resolves_to_none(work_dir: Path, value) -> None:
    work_env = WorkEnvironment(work_dir)

    assert resolve_content(value, work_env, ".html") is None
    assert work_env.temp_files == []


def test_temp_file_names_are_unique(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)

    first = resolve_content("<p>same</p>", work_env, ".html")
    second = resolve_content("<p>same</p>", work_env, ".html")

    assert first != second
    assert len(work_env.temp_files) == 2


def test_first_inline_value_routed_through_stdin(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir, inline_via_stdin=True)

    first = resolve_content("<p>one</p>", work_env, ".html", allow_stdin=True)
    second = resolve_content("<p>two</p>", work_env, ".html", allow_stdin=True)

    assert first == STDIN_TOKEN
    assert work_env.stdin_payloads == ["<p>one</p>"]
    assert Path(second).read_text(encoding="utf-8") == "<p>two</p>"


def test_stdin_routing_requires_caller_permission(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir, inline_via_stdin=True)

    token = resolve_content("p { margin: 0; }", work_env, ".css")

    assert token.endswith(".css")
    assert work_env.stdin_payloads == []


def test_inline_css_starting_with_slash_written_to_temp_file(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)
    css = "/* reset */ body { margin: 0 }"

    token = resolve_content(css, work_env, ".css")

    assert token != css
    assert Path(token).read_text(encoding="utf-8") == css


def test_url_without_dotted_host_is_inline_content(work_dir: Path) -> None:
    work_env = WorkEnvironment(work_dir)

    assert not is_url("http://localhost:8080/page")
    token = resolve_content("http://localhost:8080/page", work_env, ".html")

    assert Path(token).suffix == ".html"
    assert len(work_env.temp_files) == 1
