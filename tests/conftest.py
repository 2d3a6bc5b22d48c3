"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest

from nsdebug.config import ENV_COLOR, ENV_LEVEL, ENV_PATTERN
from nsdebug.formatters.base import Formatter
from nsdebug.models.request import LogRequest


class RecordingFormatter(Formatter):
    """Keeps every request it is handed instead of rendering it."""

    def __init__(self) -> None:
        self.requests: list[LogRequest] = []

    def log(self, request: LogRequest) -> None:
        self.requests.append(request)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Start every test without any DEBUG* variables set."""
    for name in (ENV_PATTERN, ENV_LEVEL, ENV_COLOR):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def buffer() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def recorder() -> RecordingFormatter:
    return RecordingFormatter()
