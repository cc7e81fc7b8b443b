"""Execution of the wkhtmltopdf process."""

from __future__ import annotations

import contextlib
import logging
import subprocess
import threading
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, List, Optional, Sequence

from .exceptions import ConversionFailedError, ConversionTimeoutError, ExecutableNotFoundError
from .types import PathLike

_LOGGER = logging.getLogger("htmltopdfx.process")

# Seconds to wait for the reader threads once the process has been reaped.
_JOIN_GRACE = 1.0


class ProcessState(str, Enum):
    """Lifecycle of a :class:`WkhtmltopdfProcess`."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED_EXIT_CODE = "failed_exit_code"
    TIMED_OUT = "timed_out"
    INTERRUPTED = "interrupted"


@dataclass
class ProcessOutcome:
    """Exit status and captured output of a finished process."""

    exit_code: int
    stdout: str
    stderr: str
    command_line: str


def format_command_line(command: Sequence[str]) -> str:
    """Render *command* as a single, quoted command line string."""

    return subprocess.list2cmdline([str(part) for part in command])


class _StreamDrain:
    """Reads a pipe to EOF on a background thread."""

    def __init__(self, stream: IO[bytes], name: str) -> None:
        self.lines: List[str] = []
        self.done = threading.Event()
        self._stream = stream
        self._thread = threading.Thread(
            target=self._run, name=f"htmltopdfx-{name}", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        try:
            for raw in iter(self._stream.readline, b""):
                self.lines.append(raw.decode("utf-8", errors="replace").rstrip("\r\n"))
        except (OSError, ValueError) as exc:
            _LOGGER.debug("Stopped reading %s: %s", self._thread.name, exc)
        finally:
            self.done.set()

    def close(self) -> None:
        """Join the reader and close the pipe once it has reached EOF."""

        self._thread.join(_JOIN_GRACE)
        if self.done.is_set():
            with contextlib.suppress(OSError):
                self._stream.close()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class _StdinFeeder:
    """Writes the standard input payloads on a background thread.

    Completion is awaited under the same deadline as the exit wait; the pipe
    is closed once every payload has been written or the reader has gone.
    """

    def __init__(self, stream: IO[bytes], payloads: Sequence[str]) -> None:
        self.done = threading.Event()
        self._stream = stream
        self._payloads = list(payloads)
        self._thread = threading.Thread(
            target=self._run, name="htmltopdfx-stdin", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        try:
            for payload in self._payloads:
                self._stream.write(payload.encode("utf-8"))
                self._stream.write(b"\n")
        except (OSError, ValueError) as exc:
            _LOGGER.debug("wkhtmltopdf closed standard input early: %s", exc)
        finally:
            with contextlib.suppress(OSError, ValueError):
                self._stream.close()
            self.done.set()

    def join(self) -> None:
        self._thread.join(_JOIN_GRACE)


class WkhtmltopdfProcess:
    """One run of the external executable.

    The state moves from ``NOT_STARTED`` to ``RUNNING`` and then to exactly
    one of ``SUCCEEDED``, ``FAILED_EXIT_CODE`` or ``TIMED_OUT``; it becomes
    ``INTERRUPTED`` when the caller's thread is interrupted while waiting.
    Standard input is fed and standard output and standard error are drained
    concurrently; the input feed, the exit wait and both drains share a
    single deadline.
    """

    def __init__(
        self,
        executable: str,
        arguments: Sequence[str],
        timeout: Optional[float],
        output_path: PathLike,
        stdin_payloads: Sequence[str] = (),
    ) -> None:
        self.executable = executable
        self.arguments = list(arguments)
        self.timeout = timeout
        self.output_path = Path(output_path)
        self.stdin_payloads = list(stdin_payloads)
        self.state = ProcessState.NOT_STARTED
        self.process: Optional[subprocess.Popen] = None
        self.command_line = format_command_line([executable, *self.arguments])

    def run(self) -> ProcessOutcome:
        """Run the process to completion or until the timeout expires.

        Raises:
            ConversionTimeoutError: The process, its input feed or its output
                streams did not finish in time; the process has been killed.
            ConversionFailedError: Non-zero exit code and no output file.
        """
        if self.state is not ProcessState.NOT_STARTED:
            raise RuntimeError(f"Process already started (state: {self.state.value})")

        _LOGGER.debug("Converting to PDF: %s", self.command_line)
        try:
            self.process = subprocess.Popen(
                [self.executable, *self.arguments],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise ExecutableNotFoundError(self.executable) from exc
        self.state = ProcessState.RUNNING

        deadline = None if self.timeout is None else time.monotonic() + self.timeout
        stdout = _StreamDrain(self.process.stdout, "stdout")
        stderr = _StreamDrain(self.process.stderr, "stderr")
        feeder = _StdinFeeder(self.process.stdin, self.stdin_payloads)

        try:
            try:
                finished = self._wait(deadline, feeder, stdout, stderr)
            except BaseException:
                self._kill()
                self.state = ProcessState.INTERRUPTED
                raise

            if not finished:
                self._kill()
                self.state = ProcessState.TIMED_OUT
                _LOGGER.debug("Timed out after %s seconds: %s", self.timeout, self.command_line)
                raise ConversionTimeoutError(self.timeout, self.command_line)
        finally:
            feeder.join()
            stdout.close()
            stderr.close()

        outcome = ProcessOutcome(
            exit_code=self.process.returncode,
            stdout=stdout.text,
            stderr=stderr.text,
            command_line=self.command_line,
        )
        _LOGGER.debug(
            "Command finished with exit code %s\nstdout: %s\nstderr: %s",
            outcome.exit_code,
            outcome.stdout,
            outcome.stderr,
        )

        if outcome.exit_code != 0:
            if not self.output_path.exists():
                self.state = ProcessState.FAILED_EXIT_CODE
                raise ConversionFailedError(outcome.stderr, self.command_line, outcome.exit_code)
            _LOGGER.warning(
                "wkhtmltopdf exited with code %s but produced %s: %s",
                outcome.exit_code,
                self.output_path,
                outcome.stderr,
            )

        self.state = ProcessState.SUCCEEDED
        return outcome

    def _wait(
        self,
        deadline: Optional[float],
        feeder: _StdinFeeder,
        stdout: _StreamDrain,
        stderr: _StreamDrain,
    ) -> bool:
        def remaining() -> Optional[float]:
            if deadline is None:
                return None
            return max(0.0, deadline - time.monotonic())

        if not feeder.done.wait(remaining()):
            return False
        try:
            self.process.wait(timeout=remaining())
        except subprocess.TimeoutExpired:
            return False
        return stdout.done.wait(remaining()) and stderr.done.wait(remaining())

    def _kill(self) -> None:
        if self.process is None:
            return
        if self.process.poll() is None:
            _LOGGER.debug("Killing wkhtmltopdf process %s", self.process.pid)
            self.process.kill()
        self.process.wait()

    @property
    def terminated(self) -> bool:
        """``True`` once the process has exited or been killed."""

        return self.process is not None and self.process.poll() is not None


def run_process(
    executable: str,
    arguments: Sequence[str],
    timeout: Optional[float],
    output_path: PathLike,
    stdin_payloads: Sequence[str] = (),
) -> ProcessOutcome:
    """Run wkhtmltopdf once and return its outcome."""

    return WkhtmltopdfProcess(
        executable,
        arguments,
        timeout,
        output_path,
        stdin_payloads=stdin_payloads,
    ).run()
