"""Bridge to the CI host: log lines, step outputs, job summary, exit status.

The batch engine and the runner only talk to the ``Reporter`` protocol, so
they can be exercised without a real Actions runner.

Usage:
    reporter = GitHubActionsReporter.from_settings(Settings().runner)
    reporter.info("Validating 2 VAT number(s)...")
    reporter.set_output("valid-count", "2")
    sys.exit(reporter.exit_code)
"""

from __future__ import annotations

import logging
import sys
import uuid
from pathlib import Path
from typing import Protocol, TextIO

from vatcheck.config import RunnerSettings

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Everything the run needs from its host."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def set_output(self, name: str, value: str) -> None: ...

    def write_summary(self, markdown: str) -> None: ...


# ── Workflow command encoding ────────────────────────────────────────


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str, **properties: str) -> str:
    """Render ``::command key=value,...::message``."""
    props = ",".join(f"{key}={escape_property(val)}" for key, val in properties.items())
    head = f"{command} {props}" if props else command
    return f"::{head}::{escape_data(message)}"


def format_output_entry(name: str, value: str, delimiter: str) -> str:
    """Render one multi-line entry of the GITHUB_OUTPUT file."""
    if delimiter in name or delimiter in value:
        msg = f"Unexpected input: delimiter {delimiter} found in output {name}"
        raise ValueError(msg)
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


# ── GitHub Actions ───────────────────────────────────────────────────


class GitHubActionsReporter:
    """Reporter speaking the GitHub Actions workflow command protocol."""

    def __init__(
        self,
        output_path: str | None = None,
        summary_path: str | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._output_path = Path(output_path) if output_path else None
        self._summary_path = Path(summary_path) if summary_path else None
        self._stream = stream or sys.stdout
        self._failed = False

    @classmethod
    def from_settings(cls, runner: RunnerSettings) -> GitHubActionsReporter:
        return cls(output_path=runner.github_output, summary_path=runner.github_step_summary)

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def exit_code(self) -> int:
        return 1 if self._failed else 0

    def _emit(self, line: str) -> None:
        # Undecodable input (surrogate escapes) must not break the log
        encoding = getattr(self._stream, "encoding", None) or "utf-8"
        line = line.encode(encoding, "backslashreplace").decode(encoding)
        self._stream.write(line + "\n")
        self._stream.flush()

    def info(self, message: str) -> None:
        self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(format_command("warning", message))

    def fail(self, message: str) -> None:
        """Report an error and mark the step as failed."""
        self._failed = True
        self._emit(format_command("error", message))

    def mask_secret(self, secret: str) -> None:
        """Ask the runner to redact ``secret`` from every later log line."""
        if secret:
            self._emit(format_command("add-mask", secret))

    def set_output(self, name: str, value: str) -> None:
        if self._output_path is None:
            # Runner without GITHUB_OUTPUT: legacy stdout command.
            self._emit(format_command("set-output", value, name=name))
            return
        entry = format_output_entry(name, value, f"ghadelimiter_{uuid.uuid4()}")
        with open(self._output_path, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(entry)

    def write_summary(self, markdown: str) -> None:
        if self._summary_path is None:
            logger.warning("GITHUB_STEP_SUMMARY not set, skipping job summary")
            return
        with open(self._summary_path, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(markdown if markdown.endswith("\n") else markdown + "\n")
