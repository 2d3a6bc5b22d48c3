"""Utility functions for nsdebug."""

from nsdebug.utils.logging import enable_diagnostics, install_null_handler

__all__ = ["enable_diagnostics", "install_null_handler"]
