"""
Severity levels and their syslog priorities.

Levels are ordered; a profile prints to the terminal when its level is at or
above the configured minimum:

    ←── quieter ──────────────────────────── louder ──→
    CRITICAL  ERROR  WARNING  NOTICE  INFO  DEBUG
       5        4       3       2      1     0

Each level maps to the syslog priority name understood by
logging.handlers.SysLogHandler.encodePriority().
"""

from enum import IntEnum

from .errors import UnknownLevel


class Level(IntEnum):
    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


SYSLOG_PRIORITIES = {
    Level.DEBUG: 'debug',
    Level.INFO: 'info',
    Level.NOTICE: 'notice',
    Level.WARNING: 'warning',
    Level.ERROR: 'err',
    Level.CRITICAL: 'crit',
}

_ALIASES = {
    'WARN': Level.WARNING,
    'ERR': Level.ERROR,
    'CRIT': Level.CRITICAL,
    'FATAL': Level.CRITICAL,
}


def parse_level(value) -> Level:
    """Coerce a Level, int, or level name into a Level.

    Names are case-insensitive and accept the usual short aliases
    (warn, err, crit, fatal). Digit strings are treated as ints.

    Raises:
        UnknownLevel: if value does not name a known level.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, bool):
        raise UnknownLevel(value)
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise UnknownLevel(value) from None
    if isinstance(value, str):
        key = value.strip().upper()
        if key.lstrip('-').isdigit():
            return parse_level(int(key))
        if key in Level.__members__:
            return Level[key]
        if key in _ALIASES:
            return _ALIASES[key]
    raise UnknownLevel(value)


def syslog_priority(level) -> str:
    """Return the syslog priority name for a level."""
    return SYSLOG_PRIORITIES[parse_level(level)]
