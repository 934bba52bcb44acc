"""
Clogger — a named logging profile.

A profile binds a level, an ordered list of decorations, and an optional
system-log sink. Messages printed through the same profile share the same
behavior and styling. The print path fans out to two independent sinks:

    print(msg)
      ├─ syslog:   log_to_syslog and sink present  →  "[name] msg" at priority
      └─ terminal: log_to_stdout and level >= min_level
                   →  render_line(...) + newline

Profiles are normally created through ClogManager.new_logger(), which also
opens the syslog sink and registers the profile.
"""

from typing import Callable, Iterable, List, Optional, TextIO

from .config import ClogConfig
from .decoration import Decoration
from .diagnostics import logger as diag
from .errors import SyslogUnavailable
from .formatter import prefix_name, render_line, sprintf
from .levels import Level, parse_level
from .sinks import SyslogSink, write_line


class Clogger:
    """A logging profile with its own level, decorations, and sinks.

    Usage::

        cfg = ClogConfig()
        log = Clogger("db", Level.INFO, [FG_BLUE, BRIGHT], config=cfg)
        log.print("connected")
        log.printf("%d rows in %.1fs", 42, 0.3)
    """

    def __init__(
        self,
        name: str,
        level=Level.INFO,
        decorations: Iterable[str] = (),
        *,
        config: Optional[ClogConfig] = None,
        syslog: Optional[SyslogSink] = None,
        file: Optional[TextIO] = None,
    ):
        if not isinstance(name, str) or not name:
            raise ValueError("clog: logger name must be a non-empty string")
        self.name = name
        self.level = parse_level(level)
        # Own list per profile: mutating one never leaks into another
        self.decorations: List[Decoration] = [Decoration(d) for d in decorations]
        self.config = config if config is not None else ClogConfig()
        self.syslog = syslog
        self.file = file

    def __repr__(self):
        return (f"Clogger(name={self.name!r}, level={self.level.name}, "
                f"decorations={len(self.decorations)}, "
                f"syslog={self.syslog is not None})")

    # -----------------------------------------------------------------
    # Decorations
    # -----------------------------------------------------------------
    def add_decoration(self, decoration: str) -> None:
        """Append a decoration to this profile."""
        self.decorations.append(Decoration(decoration))

    def remove_decoration(self, decoration: str) -> None:
        """Remove the first matching decoration; no-op if absent."""
        try:
            self.decorations.remove(decoration)
        except ValueError:
            pass

    # -----------------------------------------------------------------
    # Sinks
    # -----------------------------------------------------------------
    def connect_syslog(self, factory: Callable[..., SyslogSink]) -> bool:
        """Open the system-log sink if this profile has none.

        Returns True if the profile holds a sink afterwards. An unreachable
        service leaves the profile terminal-only and logs a warning.
        """
        if self.syslog is not None:
            return True
        try:
            self.syslog = factory(
                self.level,
                address=self.config.syslog_address,
                facility=self.config.syslog_facility,
            )
        except SyslogUnavailable as e:
            diag.warning("%s: continuing without syslog (%s)", self.name, e)
            return False
        return True

    def syslog_active(self) -> bool:
        """Would a print right now reach the system log?"""
        cfg = self.config
        if not cfg.log_to_syslog or self.syslog is None:
            return False
        return not cfg.gate_syslog or self.level >= cfg.min_level

    def stdout_active(self) -> bool:
        """Would a print right now reach the terminal?"""
        cfg = self.config
        return cfg.log_to_stdout and self.level >= cfg.min_level

    # -----------------------------------------------------------------
    # Printing
    # -----------------------------------------------------------------
    def print(self, message) -> None:
        """Log message to each enabled sink.

        The system log receives the name-prefixed raw message. The terminal
        receives the rendered line when the level clears min_level.
        """
        message = str(message)
        if self.syslog_active():
            self.syslog.write(prefix_name(message, self.name))
        self.std_print(message)

    def printf(self, format_string: str, *args) -> None:
        """Format with printf-style ``%`` rules, then print()."""
        self.print(sprintf(format_string, args))

    def render(self, message: str) -> str:
        """The terminal line this profile would write for message."""
        cfg = self.config
        return render_line(
            message,
            name=self.name if cfg.prepend_name else None,
            use_timestamp=cfg.use_timestamp,
            timestamp_format=cfg.timestamp_format,
            use_decoration=cfg.use_decoration,
            decorations=self.decorations,
        )

    def std_print(self, message) -> None:
        """Terminal half of print(): rendered line plus newline."""
        if not self.stdout_active():
            return
        write_line(self.render(str(message)), self.file)

    def std_printf(self, format_string: str, *args) -> None:
        self.std_print(sprintf(format_string, args))
