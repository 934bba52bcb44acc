"""Package-local diagnostics.

clog reports its own problems (an unreachable syslog socket, a failed
delivery) through the standard library logger named ``clog``. By default it
emits nothing unless the host application configures logging. Users can opt
into these messages on stderr via ``CLOG_DIAG_LEVEL``.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "clog"
DIAG_LEVEL_ENV = "CLOG_DIAG_LEVEL"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_diagnostics(level: str | None = None) -> None:
    """Route clog's own warnings to stderr.

    Opt-in: if neither ``level`` nor ``CLOG_DIAG_LEVEL`` is provided, the
    package logger is reset to a silent NullHandler.
    """
    env_level = os.getenv(DIAG_LEVEL_ENV, "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip()
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Reset so repeated calls never stack stderr handlers.
    pkg_logger.handlers = []

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = True
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, resolved_level.upper(), logging.WARNING))
    pkg_logger.propagate = False
