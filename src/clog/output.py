"""Unconditional terminal output.

These bypass profiles, the registry, and every ClogConfig toggle: they always
write one line to stdout. Use them for user-facing text that must show
regardless of level or sink settings.
"""

from .formatter import decorate, sprintf
from .sinks import write_line


def print_with_decorations(msg, *decorations):
    """Print msg wrapped in the given decorations."""
    write_line(decorate(str(msg), decorations))


def println(msg):
    """Print msg as-is."""
    write_line(str(msg))


def printf(fmt, *args):
    """Print a printf-style formatted line."""
    write_line(sprintf(fmt, args))
