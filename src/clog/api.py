"""Convenience functions over the default profiles.

Each call looks up its profile by fixed name in the module-level manager
(no caching), so replacing the manager with init_clog() takes effect
immediately.

Also provides the plain color helpers, which skip profiles entirely and
always print.
"""

import sys

from .decoration import FG_BLUE, FG_GREEN, FG_RED, FG_YELLOW
from .formatter import sprintf
from .manager import get_logger
from .output import print_with_decorations


def debug(msg):
    """Log msg through the 'Debug' profile."""
    get_logger('Debug').print(msg)


def debugf(format_string, *args):
    get_logger('Debug').printf(format_string, *args)


def info(msg):
    """Log msg through the 'Info' profile."""
    get_logger('Info').print(msg)


def infof(format_string, *args):
    get_logger('Info').printf(format_string, *args)


def notice(msg):
    """Log msg through the 'Notice' profile."""
    get_logger('Notice').print(msg)


def noticef(format_string, *args):
    get_logger('Notice').printf(format_string, *args)


def warning(msg):
    """Log msg through the 'Warning' profile."""
    get_logger('Warning').print(msg)


def warningf(format_string, *args):
    get_logger('Warning').printf(format_string, *args)


warn = warning
warnf = warningf


def error(msg):
    """Log msg through the 'Error' profile."""
    get_logger('Error').print(msg)


def errorf(format_string, *args):
    get_logger('Error').printf(format_string, *args)


def crit(msg):
    """Log msg through the 'Crit' profile."""
    get_logger('Crit').print(msg)


def critf(format_string, *args):
    get_logger('Crit').printf(format_string, *args)


def fatal(msg):
    """Log msg through the 'Crit' profile, then exit with status 1.

    Exits regardless of configuration, even if nothing was printed.
    """
    crit(msg)
    print(msg, file=sys.stderr)
    sys.exit(1)


def fatalf(format_string, *args):
    fatal(sprintf(format_string, args))


# ---------------------------------------------------------------------------
# Plain color helpers: straight to stdout, skipping profiles
# ---------------------------------------------------------------------------
def red(msg):
    print_with_decorations(msg, FG_RED)


def redf(format_string, *args):
    red(sprintf(format_string, args))


def green(msg):
    print_with_decorations(msg, FG_GREEN)


def greenf(format_string, *args):
    green(sprintf(format_string, args))


def yellow(msg):
    print_with_decorations(msg, FG_YELLOW)


def yellowf(format_string, *args):
    yellow(sprintf(format_string, args))


def blue(msg):
    print_with_decorations(msg, FG_BLUE)


def bluef(format_string, *args):
    blue(sprintf(format_string, args))
