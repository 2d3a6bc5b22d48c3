"""Abstract base class for record formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nsdebug.models.request import LogRequest


class Formatter(ABC):
    """Renders one LogRequest to its sink.

    Loggers only call ``log``, so any object with a compatible method works;
    subclassing is optional.
    """

    @abstractmethod
    def log(self, request: LogRequest) -> None:
        """Write exactly one record to ``request.sink``, without a trailing newline."""
        ...
