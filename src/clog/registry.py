"""
Profile registry — name → Clogger.

Registration is expected to happen at start-up, before concurrent use.
After that the registry is only read, so lookups need no locking. Names are
never removed: a registered profile lives for the life of its registry.
"""

from typing import Dict, Iterator, List

from .errors import DuplicateLoggerName, UnknownLoggerName
from .logger import Clogger


class Registry:
    """An owned mapping from profile name to Clogger."""

    def __init__(self):
        self._loggers: Dict[str, Clogger] = {}

    def register(self, logger: Clogger) -> Clogger:
        """Add a profile under its name.

        Raises:
            DuplicateLoggerName: if the name is taken; the existing
                profile is kept.
        """
        if logger.name in self._loggers:
            raise DuplicateLoggerName(logger.name)
        self._loggers[logger.name] = logger
        return logger

    def lookup(self, name: str) -> Clogger:
        """Return the profile registered under name.

        Raises:
            UnknownLoggerName: if no such profile exists.
        """
        try:
            return self._loggers[name]
        except KeyError:
            raise UnknownLoggerName(name) from None

    def names(self) -> List[str]:
        """Registered names, in registration order."""
        return list(self._loggers)

    def __contains__(self, name) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._loggers))
