"""Command line interface for nsdebug."""
