"""Value types shared across nsdebug."""

from nsdebug.models.enums import LogLevel, level_name, parse_level
from nsdebug.models.request import LogRequest

__all__ = ["LogLevel", "LogRequest", "level_name", "parse_level"]
