"""Shared fixtures: an in-memory Reporter standing in for the Actions runner."""

from __future__ import annotations

import pytest


class RecordingReporter:
    """Reporter that keeps everything it is told in lists and dicts."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.failures: list[str] = []
        self.outputs: dict[str, str] = {}
        self.summaries: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def fail(self, message: str) -> None:
        self.failures.append(message)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def write_summary(self, markdown: str) -> None:
        self.summaries.append(markdown)

    @property
    def failed(self) -> bool:
        return bool(self.failures)


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()
