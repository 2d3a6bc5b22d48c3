"""Default single-line text formatter."""

from __future__ import annotations

import logging

from nsdebug.formatters.base import Formatter
from nsdebug.models.enums import level_name
from nsdebug.models.request import LogRequest
from nsdebug.sinks import write_text

logger = logging.getLogger(__name__)


class TextFormatter(Formatter):
    """Writes ``<namespace> [<LEVEL>] <message> <ms>ms``.

    The namespace and the delay tail go through the request's colorize
    function; the level and message are never colored.
    """

    def render(self, request: LogRequest) -> str:
        return " ".join(
            [
                request.colorize(request.namespace),
                f"[{level_name(request.level)}]",
                request.message,
                request.colorize(request.delay_ms, "ms"),
            ]
        )

    def log(self, request: LogRequest) -> None:
        try:
            write_text(request.sink, self.render(request))
        except (OSError, ValueError) as e:
            logger.debug("Dropped record for %s: %s", request.namespace, e)
