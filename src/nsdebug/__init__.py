"""nsdebug: namespaced, level-filtered debug logging driven by environment variables."""

from nsdebug.colors import color_for
from nsdebug.errors import InvalidLevelError, InvalidNamespaceError, NsDebugError, PatternError
from nsdebug.formatters import Formatter, TextFormatter
from nsdebug.logger import Logger, new, with_formatter, with_sink
from nsdebug.matching import matches
from nsdebug.models import LogLevel, LogRequest, level_name, parse_level
from nsdebug.utils.logging import install_null_handler

__version__ = "0.1.0"

install_null_handler()

__all__ = [
    "Formatter",
    "InvalidLevelError",
    "InvalidNamespaceError",
    "LogLevel",
    "LogRequest",
    "Logger",
    "NsDebugError",
    "PatternError",
    "TextFormatter",
    "color_for",
    "level_name",
    "matches",
    "new",
    "parse_level",
    "with_formatter",
    "with_sink",
]
