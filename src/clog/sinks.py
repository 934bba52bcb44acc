"""
Delivery sinks: the local system log and the terminal.

The system-log side is built on logging.handlers.SysLogHandler, one handler
per profile with the priority pinned at open time. Delivery problems are
reported on the ``clog`` diagnostic logger and never raised to the caller.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Tuple, Union

from .diagnostics import logger as diag
from .errors import SyslogUnavailable
from .levels import syslog_priority

Address = Union[str, Tuple[str, int]]

# Tried in order when no address is configured
LOCAL_SOCKETS = ("/dev/log", "/var/run/syslog")


def resolve_address(address: Optional[str] = None) -> Address:
    """Turn a configured address into what SysLogHandler expects.

    None searches for the platform's local socket; "host:port" becomes a UDP
    tuple; anything else is taken as a socket path.

    Raises:
        SyslogUnavailable: if None is given and no local socket exists.
    """
    if address is None:
        for candidate in LOCAL_SOCKETS:
            if os.path.exists(candidate):
                return candidate
        raise SyslogUnavailable(None, "no local syslog socket found")
    if not isinstance(address, str):
        return address
    if ":" in address and not address.startswith("/"):
        host, _, port = address.rpartition(":")
        try:
            return (host, int(port))
        except ValueError:
            raise SyslogUnavailable(address, "invalid port") from None
    return address


def _ident() -> str:
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "python"
    return f"{prog}[{os.getpid()}]: "


class _PinnedPriorityHandler(logging.handlers.SysLogHandler):
    """SysLogHandler that always sends at one priority."""

    def __init__(self, priority: str, address: Address, facility: str):
        super().__init__(address=address, facility=facility)
        self.priority = priority

    def mapPriority(self, levelName):
        return self.priority

    def handleError(self, record):
        diag.warning("syslog delivery failed: %r", record.getMessage(),
                     exc_info=True)


class SyslogSink:
    """A live handle to the system log at a fixed priority."""

    def __init__(self, handler: logging.Handler, priority: str):
        self.handler = handler
        self.priority = priority

    def write(self, message: str) -> None:
        """Send one message. Failures are logged, never raised."""
        record = logging.makeLogRecord({
            "name": "clog.syslog",
            "msg": message,
            "levelname": self.priority.upper(),
            "levelno": logging.INFO,
        })
        try:
            self.handler.handle(record)
        except Exception:
            diag.warning("syslog delivery failed: %r", message, exc_info=True)

    def close(self) -> None:
        self.handler.close()

    def __repr__(self):
        return f"SyslogSink(priority={self.priority!r})"


def open_syslog(level, address: Optional[str] = None,
                facility: str = "local1") -> SyslogSink:
    """Open a system-log sink for a level.

    Args:
        level: Profile level; selects the syslog priority
        address: Socket path, "host:port", or None for the local socket
        facility: Facility name (e.g. 'local1', 'user')

    Returns:
        A SyslogSink bound to the mapped priority

    Raises:
        SyslogUnavailable: if the service cannot be reached
        UnknownLevel: if level has no syslog priority
    """
    priority = syslog_priority(level)
    if facility not in logging.handlers.SysLogHandler.facility_names:
        raise SyslogUnavailable(address, f"unknown facility {facility!r}")
    target = resolve_address(address)
    try:
        handler = _PinnedPriorityHandler(priority, target, facility)
    except OSError as e:
        raise SyslogUnavailable(target, str(e)) from e
    if handler.unixsocket:
        # SysLogHandler ignores unix socket connect errors since 3.11
        try:
            if handler.socket is not None:
                handler.socket.close()
            handler._connect_unixsocket(target)
        except OSError as e:
            handler.close()
            raise SyslogUnavailable(target, str(e)) from e
    handler.ident = _ident()
    handler.setFormatter(logging.Formatter("%(message)s"))
    return SyslogSink(handler, priority)


def write_line(line: str, file: Optional[TextIO] = None) -> None:
    """Write one line to the terminal (stdout unless file is given)."""
    print(line, file=file if file is not None else sys.stdout)
