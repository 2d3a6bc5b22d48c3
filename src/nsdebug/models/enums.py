"""Severity levels for nsdebug loggers."""

from enum import IntEnum

from nsdebug.errors import InvalidLevelError


class LogLevel(IntEnum):
    """Message severity, ordered so that a threshold admits itself and everything above."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name


def level_name(level: int) -> str:
    """Return the canonical uppercase name of a level.

    Args:
        level: A LogLevel or its ordinal

    Returns:
        str: One of DEBUG, INFO, WARN, ERROR

    Raises:
        InvalidLevelError: If the ordinal is outside the four known levels
    """
    try:
        return LogLevel(level).name
    except ValueError:
        raise InvalidLevelError(level) from None


def parse_level(text: str) -> LogLevel:
    """Parse a canonical level name.

    Only the exact uppercase spellings are accepted; ``"debug"`` is rejected.

    Args:
        text: Level name (e.g. from the DEBUG_LEVEL environment variable)

    Returns:
        LogLevel: The matching level

    Raises:
        InvalidLevelError: If the text is not a canonical level name
    """
    if isinstance(text, str) and text in LogLevel.__members__:
        return LogLevel[text]
    raise InvalidLevelError(text)
