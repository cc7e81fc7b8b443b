"""Classification of content fields into URLs, local paths or inline markup."""

from __future__ import annotations

import logging
import re
from typing import Optional

from .workspace import WorkEnvironment

_LOGGER = logging.getLogger("htmltopdfx.content")

STDIN_TOKEN = "-"

# Hosts must contain a dot, so http://localhost URLs count as inline content.
_URL_RE = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z]{0,6}\b"
    r"([-a-zA-Z0-9@:%_+.~#?&/=]*)"
)
_WINDOWS_SEGMENT = r'[^\\/:*?"<>|\r\n]+'
_WINDOWS_PATH_RE = re.compile(
    rf"(?:[a-zA-Z]:|\\\\{_WINDOWS_SEGMENT}\\{_WINDOWS_SEGMENT})"
    rf"\\(?:{_WINDOWS_SEGMENT}\\)*{_WINDOWS_SEGMENT}"
)
_POSIX_SEGMENT = r"[^/\s*{};<>\"'|]+(?: [^/\s*{};<>\"'|]+)*"
_POSIX_PATH_RE = re.compile(rf"/(?:{_POSIX_SEGMENT}/)*{_POSIX_SEGMENT}")


def is_url(value: str) -> bool:
    """Return ``True`` when *value* is an absolute http(s) URL."""

    return _URL_RE.fullmatch(value) is not None


def is_file_path(value: str) -> bool:
    """Return ``True`` when *value* looks like an absolute local file path."""

    return (
        _WINDOWS_PATH_RE.fullmatch(value) is not None
        or _POSIX_PATH_RE.fullmatch(value) is not None
    )


def is_url_or_file_path(value: str) -> bool:
    return is_url(value) or is_file_path(value)


def resolve_content(
    value: Optional[str],
    work_env: WorkEnvironment,
    extension: str,
    force_inline: bool = False,
    allow_stdin: bool = False,
) -> Optional[str]:
    """Return the command line token for a content field.

    URLs and absolute paths are passed through unchanged. Anything else is
    treated as literal content and written to a temporary file inside the
    work environment, unless *allow_stdin* is set and the work environment
    routes inline content through standard input, in which case ``-`` is
    returned for the first such value.

    Returns ``None`` for empty content so the caller can omit the option.
    """

    if not value:
        return None

    if not force_inline and is_url_or_file_path(value):
        _LOGGER.debug("Passing content through unchanged: %s", value)
        return value

    if allow_stdin and work_env.inline_via_stdin and not work_env.stdin_payloads:
        work_env.stdin_payloads.append(value)
        _LOGGER.debug("Routing inline content through standard input")
        return STDIN_TOKEN

    return str(work_env.create_temp_file(value, extension))
