"""Record formatters."""

from nsdebug.formatters.base import Formatter
from nsdebug.formatters.text import TextFormatter

__all__ = ["Formatter", "TextFormatter"]
