"""
ClogManager — the composition root.

Owns the process's ClogConfig and Registry and builds profiles against them.
The module keeps one singleton manager for the convenience API; tests and
embedding applications can build isolated managers instead.

Default profiles (registered by bootstrap_defaults):

    Name     Level     Decoration
    Debug    DEBUG     FG_WHITE
    Info     INFO      FG_GREEN
    Notice   NOTICE    FG_CYAN
    Warning  WARNING   FG_YELLOW
    Error    ERROR     FG_RED
    Crit     CRITICAL  FG_MAGENTA
"""

from typing import Callable, Optional, TextIO

from .config import ClogConfig
from .decoration import (
    FG_CYAN, FG_GREEN, FG_MAGENTA, FG_RED, FG_WHITE, FG_YELLOW,
)
from .errors import DuplicateLoggerName
from .levels import Level, parse_level
from .logger import Clogger
from .registry import Registry
from .sinks import SyslogSink, open_syslog

DEFAULT_PROFILES = (
    ('Debug', Level.DEBUG, (FG_WHITE,)),
    ('Info', Level.INFO, (FG_GREEN,)),
    ('Notice', Level.NOTICE, (FG_CYAN,)),
    ('Warning', Level.WARNING, (FG_YELLOW,)),
    ('Error', Level.ERROR, (FG_RED,)),
    ('Crit', Level.CRITICAL, (FG_MAGENTA,)),
)


class ClogManager:
    """Builds, registers, and looks up profiles under one configuration.

    Usage::

        clog = ClogManager(ClogConfig(min_level=Level.WARNING))
        clog.bootstrap_defaults()
        clog.lookup('Error').print("disk full")
        db = clog.new_logger('db', Level.INFO, FG_BLUE)
    """

    def __init__(
        self,
        config: Optional[ClogConfig] = None,
        file: Optional[TextIO] = None,
        syslog_factory: Callable[..., SyslogSink] = open_syslog,
    ):
        self.config = config if config is not None else ClogConfig()
        self.registry = Registry()
        self.file = file
        self.syslog_factory = syslog_factory

    def new_logger(self, name: str, level, *decorations) -> Clogger:
        """Create and register a profile.

        The level is validated first. When syslog output is enabled a sink
        is opened at the level's priority; if that fails the profile is
        terminal-only. Finally the profile is registered.

        Raises:
            UnknownLevel: if level has no syslog priority
            DuplicateLoggerName: if name is already registered
            InvalidDecorationCode: if a decoration is not an escape code
        """
        level = parse_level(level)
        logger = Clogger(name, level, decorations,
                         config=self.config, file=self.file)
        if name in self.registry:
            # Fail before opening a socket we would have to throw away
            raise DuplicateLoggerName(name)
        if self.config.log_to_syslog:
            logger.connect_syslog(self.syslog_factory)
        return self.registry.register(logger)

    def register(self, logger: Clogger) -> Clogger:
        return self.registry.register(logger)

    def lookup(self, name: str) -> Clogger:
        return self.registry.lookup(name)

    def bootstrap_defaults(self) -> None:
        """Register the six default profiles (skipping names already taken)."""
        for name, level, decorations in DEFAULT_PROFILES:
            if name not in self.registry:
                self.new_logger(name, level, *decorations)

    def connect_syslog(self) -> int:
        """Open syslog sinks for every profile that lacks one.

        For applications that turn on log_to_syslog after start-up.
        Returns the number of profiles holding a sink afterwards.
        """
        return sum(
            1 for name in self.registry
            if self.registry.lookup(name).connect_syslog(self.syslog_factory)
        )


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[ClogManager] = None


def init_clog(config: Optional[ClogConfig] = None,
              file: Optional[TextIO] = None,
              syslog_factory: Callable[..., SyslogSink] = open_syslog) -> ClogManager:
    """Initialize the module-level ClogManager singleton.

    Call once at program start-up, before any threads use the convenience
    functions. Registers the default profiles.

    Args:
        config: Global configuration (default: ClogConfig())
        file: Terminal stream for all profiles (default: current sys.stdout)
        syslog_factory: Callable that opens a SyslogSink for a level

    Returns:
        The initialized ClogManager instance
    """
    global _manager
    manager = ClogManager(config=config, file=file, syslog_factory=syslog_factory)
    manager.bootstrap_defaults()
    _manager = manager
    return _manager


def get_clog() -> ClogManager:
    """Get the module-level ClogManager, creating a default if needed."""
    global _manager
    if _manager is None:
        init_clog()
    return _manager


def get_config() -> ClogConfig:
    """The live configuration of the module-level manager."""
    return get_clog().config


def get_logger(name: str) -> Clogger:
    """Look up a profile in the module-level manager."""
    return get_clog().lookup(name)


def new_logger(name: str, level, *decorations) -> Clogger:
    """Create and register a profile in the module-level manager."""
    return get_clog().new_logger(name, level, *decorations)


def register(logger: Clogger) -> Clogger:
    """Register an existing profile in the module-level manager."""
    return get_clog().register(logger)
