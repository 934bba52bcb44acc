"""
Line composition for the terminal sink.

Pure functions; the only outside state read is the wall clock in timestamp().
render_line() composes in this order:

    1. "[name] "   prepended (when a name is given)
    2. timestamp   prepended (when enabled)
    3. decorations wrapped around the whole line, closed with RESET

so the result reads ``<decos><ts> [name] message<reset>``.
"""

import time
from typing import Iterable, Optional

from .decoration import RESET

DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def decorate(message: str, decorations: Iterable[str]) -> str:
    """Wrap message in the given escape codes followed by RESET.

    With no decorations the message is returned unchanged (no stray reset).
    """
    codes = "".join(decorations)
    if not codes:
        return message
    return f"{codes}{message}{RESET}"


def timestamp(fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Current local time rendered with a strftime pattern."""
    return time.strftime(fmt, time.localtime())


def with_timestamp(message: str, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    return f"{timestamp(fmt)} {message}"


def prefix_name(message: str, name: str) -> str:
    return f"[{name}] {message}"


def sprintf(format_string: str, args: tuple = ()) -> str:
    """Apply printf-style ``%`` formatting, with or without args.

    ``%%`` always collapses to ``%``, so a literal percent sign needs
    doubling even when no args are passed.
    """
    return format_string % args


def render_line(message: str, name: Optional[str] = None,
                use_timestamp: bool = False,
                timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
                use_decoration: bool = False,
                decorations: Iterable[str] = ()) -> str:
    """Compose a terminal line from a raw message.

    Args:
        message: The already-formatted message text
        name: Profile name to prepend, or None to skip the prefix
        use_timestamp: Prepend the current time
        timestamp_format: strftime pattern for the timestamp
        use_decoration: Wrap the line with decorations
        decorations: Escape codes, emitted in order

    Returns:
        The line, without a trailing newline
    """
    line = message
    if name:
        line = prefix_name(line, name)
    if use_timestamp:
        line = with_timestamp(line, timestamp_format)
    if use_decoration:
        line = decorate(line, decorations)
    return line
