"""Exception types raised by nsdebug."""

from __future__ import annotations

from typing import Any


class NsDebugError(ValueError):
    """Base for all nsdebug errors."""


class InvalidNamespaceError(NsDebugError):
    def __init__(self) -> None:
        super().__init__("Invalid namespace: it must not be empty")


class InvalidLevelError(NsDebugError):
    def __init__(self, value: Any):
        super().__init__(f"Invalid log level: {value!r}")
        self.value = value


class PatternError(NsDebugError):
    def __init__(self, pattern: str, detail: str):
        super().__init__(f"Invalid namespace pattern {pattern!r}: {detail}")
        self.pattern = pattern
        self.detail = detail
