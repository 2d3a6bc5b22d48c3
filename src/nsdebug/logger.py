"""Namespaced, level-filtered loggers.

A Logger is bound to a namespace and configured from the environment when it
is built:

    DEBUG        namespace pattern, ``*`` wildcard (default ``*``)
    DEBUG_LEVEL  DEBUG, INFO, WARN or ERROR (default WARN)
    DEBUG_COLOR  any value enables colored output

Example:

    log = Logger("app:db")
    log.warn("pool exhausted")

    pool = log.child("pool")           # namespace "app:db:pool"
    quiet = Logger("app", with_sink(None))
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import timedelta
from typing import Any, Callable

from nsdebug.colors import Colorizer, make_colorizer, plain
from nsdebug.config import DebugSettings
from nsdebug.errors import InvalidNamespaceError
from nsdebug.formatters.base import Formatter
from nsdebug.formatters.text import TextFormatter
from nsdebug.matching import matches
from nsdebug.models.enums import LogLevel
from nsdebug.models.request import LogRequest
from nsdebug.sinks import DiscardSink

logger = logging.getLogger(__name__)

Option = Callable[["Logger"], None]


def with_sink(sink: Any) -> Option:
    """Send records to ``sink`` instead of standard output.

    A ``None`` sink installs a DiscardSink, silencing the logger without
    disabling it.
    """

    def apply(target: Logger) -> None:
        target._sink = DiscardSink() if sink is None else sink

    return apply


def with_formatter(formatter: Formatter) -> Option:
    """Render records with ``formatter`` instead of the default TextFormatter."""

    def apply(target: Logger) -> None:
        target._formatter = formatter

    return apply


class Logger:
    """Emits messages under a namespace when the environment admits them.

    Environment variables are read once, when the logger is built; children
    read them again. A single instance is not safe for concurrent emission
    from several threads.
    """

    def __init__(self, namespace: str, *options: Option):
        if not namespace:
            raise InvalidNamespaceError()

        settings = DebugSettings.from_env()

        self._namespace = namespace
        self._threshold: LogLevel = settings.level
        self._colorize: Colorizer = make_colorizer(namespace) if settings.color else plain
        self._enabled = matches(namespace, settings.pattern)
        self._sink: Any = sys.stdout
        self._formatter: Formatter = TextFormatter()
        self._last_call: float | None = None

        for option in options:
            option(self)

        logger.debug(
            "Logger %s built (enabled=%s, threshold=%s, pattern=%r)",
            namespace,
            self._enabled,
            self._threshold,
            settings.pattern,
        )

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def threshold(self) -> LogLevel:
        return self._threshold

    @property
    def sink(self) -> Any:
        return self._sink

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def child(self, subname: str) -> Logger:
        """Build a logger for ``<namespace>:<subname>``.

        The child shares this logger's sink and formatter but re-reads the
        environment for its enabled flag, threshold and color.

        Raises:
            InvalidNamespaceError: If subname is empty
        """
        if not subname:
            raise InvalidNamespaceError()
        return Logger(
            f"{self._namespace}:{subname}",
            with_sink(self._sink),
            with_formatter(self._formatter),
        )

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return True if a message at ``level`` would be dispatched."""
        return self._enabled and self._threshold <= level

    def emit(self, level: LogLevel, message: str) -> None:
        """Dispatch a message to the formatter if the namespace and level admit it.

        The delay reported for the first emission is always zero; afterwards it
        is the time since the previous dispatch returned.
        """
        if not self.is_enabled_for(level):
            return

        now = time.monotonic()
        if self._last_call is None:
            self._last_call = now

        self._formatter.log(
            LogRequest(
                level=level,
                namespace=self._namespace,
                message=message,
                sink=self._sink,
                delay=timedelta(seconds=now - self._last_call),
                colorize=self._colorize,
            )
        )
        self._last_call = time.monotonic()

    def debug(self, message: str) -> None:
        self.emit(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.emit(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self.emit(LogLevel.WARN, message)

    warning = warn

    def error(self, message: str) -> None:
        self.emit(LogLevel.ERROR, message)

    def __repr__(self) -> str:
        return (
            f"Logger(namespace={self._namespace!r}, enabled={self._enabled}, "
            f"threshold={self._threshold})"
        )


def new(namespace: str, *options: Option) -> Logger:
    """Build a Logger; equivalent to ``Logger(namespace, *options)``."""
    return Logger(namespace, *options)
