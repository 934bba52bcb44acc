"""Exception taxonomy for clog.

Validation errors (decoration codes, duplicate names, unknown levels) are
raised to the immediate caller. A registry miss raises UnknownLoggerName and
the embedding application decides whether that ends the process.
SyslogUnavailable never leaves the package: profile construction catches it
and degrades to terminal-only output.
"""

from typing import Any, Dict, Optional


class ClogError(Exception):
    """Base exception for all clog errors."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDecorationCode(ClogError, ValueError):
    """Raised when a custom decoration is not an ANSI SGR/cursor code."""

    def __init__(self, code: str):
        super().__init__(
            f"clog: invalid sgr code {code!r} provided",
            details={"code": code},
        )
        self.code = code


class DuplicateLoggerName(ClogError, ValueError):
    """Raised when registering a profile name that is already taken."""

    def __init__(self, name: str):
        super().__init__(
            f"clog: a logger with the name {name!r} already exists",
            details={"name": name},
        )
        self.name = name


class UnknownLoggerName(ClogError, LookupError):
    """Raised when looking up a profile name that was never registered."""

    def __init__(self, name: str):
        super().__init__(
            f"clog: no logger with name {name!r}",
            details={"name": name},
        )
        self.name = name


class UnknownLevel(ClogError, ValueError):
    """Raised when a level does not map to a known syslog priority."""

    def __init__(self, level: Any):
        super().__init__(
            f"clog: unknown level {level!r}",
            details={"level": level},
        )
        self.level = level


class SyslogUnavailable(ClogError, OSError):
    """Raised when the local system log service cannot be reached."""

    def __init__(self, address: Any, reason: str = ""):
        suffix = f": {reason}" if reason else ""
        super().__init__(
            f"clog: syslog unavailable at {address!r}{suffix}",
            details={"address": address, "reason": reason},
        )
        self.address = address
