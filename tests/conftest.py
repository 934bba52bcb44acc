"""Shared test fixtures for the clog test suite."""

import io

import pytest

from clog import manager as _manager_mod
from clog.config import ClogConfig
from clog.errors import SyslogUnavailable
from clog.manager import ClogManager


# ---------------------------------------------------------------------------
# Fake system-log sinks
# ---------------------------------------------------------------------------
class FakeSyslogSink:
    """Records every delivery instead of talking to a socket."""

    def __init__(self, level, address=None, facility="local1"):
        self.level = level
        self.address = address
        self.facility = facility
        self.messages = []
        self.closed = False

    def write(self, message):
        self.messages.append(message)

    def close(self):
        self.closed = True


class FakeSyslogFactory:
    """Callable standing in for clog.sinks.open_syslog."""

    def __init__(self, available=True):
        self.available = available
        self.sinks = []

    def __call__(self, level, address=None, facility="local1"):
        if not self.available:
            raise SyslogUnavailable(address, "test: service down")
        sink = FakeSyslogSink(level, address=address, facility=facility)
        self.sinks.append(sink)
        return sink

    @property
    def messages(self):
        return [m for s in self.sinks for m in s.messages]


@pytest.fixture
def syslog_factory():
    return FakeSyslogFactory()


@pytest.fixture
def down_syslog_factory():
    return FakeSyslogFactory(available=False)


# ---------------------------------------------------------------------------
# Output / manager fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing terminal output."""
    return io.StringIO()


@pytest.fixture
def plain_config():
    """Config with timestamp and decoration off for exact-match assertions."""
    return ClogConfig(use_timestamp=False, use_decoration=False)


@pytest.fixture
def manager(buf, syslog_factory):
    """An isolated manager writing to buf, with default profiles."""
    mgr = ClogManager(config=ClogConfig(), file=buf,
                      syslog_factory=syslog_factory)
    mgr.bootstrap_defaults()
    return mgr


@pytest.fixture(autouse=True)
def _reset_manager():
    """Reset the module-level ClogManager singleton between tests."""
    old = _manager_mod._manager
    _manager_mod._manager = None
    yield
    _manager_mod._manager = old
