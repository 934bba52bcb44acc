"""
clog — decorated message logging to the terminal and the system log.

Named profiles ("cloggers") bind a level, ANSI decorations, and optional
syslog delivery. Six default profiles are ready out of the box:

    import clog
    clog.info("server started")
    clog.warningf("%d retries left", 3)

Public API:
    Clogger, ClogManager, Registry    — profiles and their container
    ClogConfig, load_config           — global toggles
    init_clog, get_clog, get_config   — module-level singleton
    new_logger, register, get_logger  — singleton registration surface
    Decoration, new_decoration, ...   — ANSI palette
    debug/info/notice/warning/error/crit/fatal (+ ...f variants)
    red/green/yellow/blue (+ ...f variants), println, printf
    trace                             — function tracing decorator
"""

from ._version import __version__, __app_name__
from .errors import (
    ClogError, InvalidDecorationCode, DuplicateLoggerName,
    UnknownLoggerName, UnknownLevel, SyslogUnavailable,
)
from .decoration import (
    Decoration, new_decoration, validate, PALETTE,
    RESET, BRIGHT, DIM, UNDERSCORE, BLINK, REVERSE, HIDDEN,
    FG_BLACK, FG_RED, FG_GREEN, FG_YELLOW, FG_BLUE, FG_MAGENTA, FG_CYAN, FG_WHITE,
    BG_BLACK, BG_RED, BG_GREEN, BG_YELLOW, BG_BLUE, BG_MAGENTA, BG_CYAN, BG_WHITE,
)
from .levels import Level, parse_level
from .config import ClogConfig, load_config
from .formatter import decorate, render_line, sprintf
from .logger import Clogger
from .registry import Registry
from .manager import (
    ClogManager, init_clog, get_clog, get_config, get_logger,
    new_logger, register,
)
from .api import (
    debug, debugf, info, infof, notice, noticef,
    warning, warningf, warn, warnf, error, errorf,
    crit, critf, fatal, fatalf,
    red, redf, green, greenf, yellow, yellowf, blue, bluef,
)
from .output import print_with_decorations, println, printf
from .diagnostics import configure_diagnostics
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'ClogError', 'InvalidDecorationCode', 'DuplicateLoggerName',
    'UnknownLoggerName', 'UnknownLevel', 'SyslogUnavailable',
    'Decoration', 'new_decoration', 'validate', 'PALETTE',
    'RESET', 'BRIGHT', 'DIM', 'UNDERSCORE', 'BLINK', 'REVERSE', 'HIDDEN',
    'FG_BLACK', 'FG_RED', 'FG_GREEN', 'FG_YELLOW', 'FG_BLUE', 'FG_MAGENTA',
    'FG_CYAN', 'FG_WHITE',
    'BG_BLACK', 'BG_RED', 'BG_GREEN', 'BG_YELLOW', 'BG_BLUE', 'BG_MAGENTA',
    'BG_CYAN', 'BG_WHITE',
    'Level', 'parse_level', 'ClogConfig', 'load_config',
    'decorate', 'render_line', 'sprintf',
    'Clogger', 'Registry', 'ClogManager',
    'init_clog', 'get_clog', 'get_config', 'get_logger', 'new_logger', 'register',
    'debug', 'debugf', 'info', 'infof', 'notice', 'noticef',
    'warning', 'warningf', 'warn', 'warnf', 'error', 'errorf',
    'crit', 'critf', 'fatal', 'fatalf',
    'red', 'redf', 'green', 'greenf', 'yellow', 'yellowf', 'blue', 'bluef',
    'print_with_decorations', 'println', 'printf',
    'configure_diagnostics', 'trace',
]
