"""Diagnostics about nsdebug itself, kept apart from the records it emits.

Modules log to ``logging.getLogger(__name__)`` under the ``nsdebug``
hierarchy. Importing the package attaches a NullHandler there, so a host
program sees nothing unless it configures logging or calls
``enable_diagnostics``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

ROOT_LOGGER = "nsdebug"
DIAGNOSTICS_FORMAT = "nsdebug %(levelname)s %(name)s: %(message)s"

_DIAGNOSTICS_HANDLER = "nsdebug-diagnostics"


def install_null_handler() -> logging.Logger:
    """Make the nsdebug logger silent by default; safe to call more than once."""
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    return root


def enable_diagnostics(level: int = logging.DEBUG, stream: IO[str] | None = None) -> logging.Handler:
    """Print nsdebug's own diagnostics, replacing any earlier diagnostics handler.

    Args:
        level: Minimum level to show (default DEBUG)
        stream: Destination (default: sys.stderr at call time)

    Returns:
        The installed handler
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if handler.get_name() == _DIAGNOSTICS_HANDLER:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.set_name(_DIAGNOSTICS_HANDLER)
    handler.setFormatter(logging.Formatter(DIAGNOSTICS_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return handler
